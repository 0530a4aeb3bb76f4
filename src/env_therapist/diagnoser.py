from typing import Dict, List, Mapping, Optional, Sequence

from .diagnosis import Diagnosis, Stage
from .parser import read_env_file

DEFAULT_MIN_LENGTH = 3

NOTE_MISSING = "Have you tried setting it?"
NOTE_MALFORMED = "That seems... short"
NOTE_OK = "Good job! You're valid!"


class EnvironmentDiagnoser:
    def __init__(self, environ: Optional[Mapping[str, str]] = None, min_length: int = DEFAULT_MIN_LENGTH):
        """
        environ: read-only lookup of variable name -> value (e.g. os.environ)
        min_length: values shorter than this are diagnosed as malformed
        """
        self.environ = environ if environ is not None else {}
        self.min_length = min_length
        self.diagnoses: List[Diagnosis] = []

    # ---------------------------
    # Required variables
    # ---------------------------
    def check_required_variables(self, names: Sequence[str]) -> List[Diagnosis]:
        found = []
        for key in names:
            value = self.environ.get(key)
            if not value:
                found.append(Diagnosis(key, Stage.MISSING, NOTE_MISSING))
            elif len(value) < self.min_length:
                found.append(Diagnosis(key, Stage.MALFORMED, NOTE_MALFORMED))
            else:
                found.append(Diagnosis(key, Stage.OK, NOTE_OK))
        self.diagnoses.extend(found)
        return found

    # ---------------------------
    # Cross-file conflicts
    # ---------------------------
    def build_index(self, file_paths: Sequence[str]) -> Dict[str, Dict[str, str]]:
        """Map each key to {file path: raw value} across all readable files."""
        index: Dict[str, Dict[str, str]] = {}
        for path in file_paths:
            entries = read_env_file(path)
            if entries is None:
                continue
            for key, value in entries:
                index.setdefault(key, {})[path] = value
        return index

    def check_file_conflicts(self, file_paths: Sequence[str]) -> List[Diagnosis]:
        found = []
        for key, per_file in self.build_index(file_paths).items():
            distinct = list(dict.fromkeys(per_file.values()))
            if len(distinct) > 1:
                found.append(Diagnosis(
                    key,
                    Stage.CONFLICT,
                    f"Can't decide between {' and '.join(distinct)}"
                ))
        self.diagnoses.extend(found)
        return found

    # ---------------------------
    # Full session
    # ---------------------------
    def diagnose(self, names: Sequence[str], file_paths: Sequence[str]) -> List[Diagnosis]:
        self.diagnoses = []
        self.check_required_variables(names)
        self.check_file_conflicts(file_paths)
        return list(self.diagnoses)
