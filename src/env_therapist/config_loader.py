# src/env_therapist/config_loader.py
import os
import sys
import yaml

CONFIG_FILENAME = ".envtherapist.yml"

DEFAULT_CONFIG = {
    "required_vars": [
        "PORT",
        "DATABASE_URL",
        "API_KEY"
    ],
    "env_files": [
        ".env",
        ".env.local",
        ".env.staging",
        ".env.production"
    ],
    "min_length": 3
}


def _warn(message):
    print(f"WARNING: {message}", file=sys.stderr)


def _is_str_list(value):
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def merge_config(user: dict) -> dict:
    """
    Overlay user options on the defaults. User lists replace the default
    lists; unknown keys and wrongly-typed values are ignored with a warning.
    """
    cfg = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULT_CONFIG.items()}
    for key, value in user.items():
        if key not in DEFAULT_CONFIG:
            _warn(f"Unknown config option '{key}' ignored.")
            continue
        if key == "min_length":
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                cfg[key] = value
            else:
                _warn("'min_length' must be a non-negative integer; using default.")
        elif _is_str_list(value):
            cfg[key] = list(value)
        else:
            _warn(f"'{key}' must be a list of strings; using default.")
    return cfg


def load_config(path: str = None, cwd: str = ".") -> dict:
    """
    Load configuration and merge with defaults.

    An explicit path must exist and parse. Without one, .envtherapist.yml
    in cwd is used if present, and any problem with it falls back to the
    defaults.
    """
    explicit = path is not None
    if not explicit:
        path = os.path.join(cwd, CONFIG_FILENAME)
        if not os.path.exists(path):
            return merge_config({})
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found at: {path}")

    try:
        with open(path, "r", encoding="utf-8") as fh:
            user = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        if explicit:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        _warn(f"Could not parse {path}; using defaults.")
        return merge_config({})
    except (OSError, UnicodeDecodeError) as e:
        if explicit:
            raise
        _warn(f"Could not read {path} ({e}); using defaults.")
        return merge_config({})

    if not isinstance(user, dict):
        if explicit:
            raise ValueError("Config file must contain a YAML mapping.")
        _warn(f"{path} does not contain a mapping; using defaults.")
        return merge_config({})

    return merge_config(user)
