import pytest

from env_therapist.config_loader import DEFAULT_CONFIG, load_config


def test_defaults_without_config_file(tmp_path):
    assert load_config(cwd=str(tmp_path)) == DEFAULT_CONFIG


def test_defaults_are_not_shared(tmp_path):
    cfg = load_config(cwd=str(tmp_path))
    cfg["required_vars"].append("EXTRA")
    assert "EXTRA" not in DEFAULT_CONFIG["required_vars"]


def test_implicit_config_overrides_defaults(tmp_path):
    (tmp_path / ".envtherapist.yml").write_text(
        "required_vars: [SECRET_KEY]\nmin_length: 8\n", encoding="utf-8"
    )
    cfg = load_config(cwd=str(tmp_path))
    assert cfg["required_vars"] == ["SECRET_KEY"]
    assert cfg["min_length"] == 8
    assert cfg["env_files"] == DEFAULT_CONFIG["env_files"]


def test_bad_types_fall_back_with_warning(tmp_path, capsys):
    path = tmp_path / "cfg.yml"
    path.write_text("env_files: .env\nmin_length: short\ncolour: red\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg == DEFAULT_CONFIG
    err = capsys.readouterr().err
    assert "'env_files' must be a list of strings" in err
    assert "'min_length'" in err
    assert "Unknown config option 'colour'" in err


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yml"))


def test_explicit_invalid_yaml_raises(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("required_vars: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_implicit_invalid_yaml_uses_defaults(tmp_path, capsys):
    (tmp_path / ".envtherapist.yml").write_text("required_vars: [unclosed\n", encoding="utf-8")
    assert load_config(cwd=str(tmp_path)) == DEFAULT_CONFIG
    assert "WARNING" in capsys.readouterr().err


def test_explicit_non_mapping_raises(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("- PORT\n- API_KEY\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_implicit_non_utf8_config_uses_defaults(tmp_path, capsys):
    (tmp_path / ".envtherapist.yml").write_bytes(b"required_vars: [caf\xe9]\n")
    assert load_config(cwd=str(tmp_path)) == DEFAULT_CONFIG
    assert "WARNING: Could not read" in capsys.readouterr().err


def test_implicit_unreadable_config_uses_defaults(tmp_path, capsys):
    (tmp_path / ".envtherapist.yml").mkdir()
    assert load_config(cwd=str(tmp_path)) == DEFAULT_CONFIG
    assert "WARNING: Could not read" in capsys.readouterr().err


def test_explicit_non_utf8_config_raises(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_bytes(b"required_vars: [caf\xe9]\n")
    with pytest.raises(ValueError):
        load_config(str(path))
