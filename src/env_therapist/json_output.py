# src/env_therapist/json_output.py

import json

from . import __version__
from .output import count_issues


def to_json(data, pretty=False):
    """Convert result dict into JSON string."""
    if pretty:
        return json.dumps(data, indent=4, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def wrap_json_response(diagnoses, config=None):
    """Standardize JSON output structure."""
    return {
        "tool": "env-therapist",
        "version": __version__,
        "issue_count": count_issues(diagnoses),
        "diagnoses": [d.to_dict() for d in diagnoses],
        "config": config or {},
    }
