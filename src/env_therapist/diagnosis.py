# src/env_therapist/diagnosis.py
from dataclasses import dataclass
from enum import Enum


class Stage(Enum):
    """Health classification of a single environment variable."""
    MISSING = "missing"
    MALFORMED = "malformed"
    CONFLICT = "conflict"
    OK = "ok"


@dataclass(frozen=True)
class Diagnosis:
    """A single finding about one environment variable."""
    key: str
    stage: Stage
    note: str

    @property
    def is_issue(self) -> bool:
        return self.stage is not Stage.OK

    def to_dict(self) -> dict:
        return {"key": self.key, "stage": self.stage.name, "note": self.note}
