# src/env_therapist/parser.py
from typing import List, NamedTuple, Optional, Union


class Parsed(NamedTuple):
    key: str
    value: str


class Skipped(NamedTuple):
    reason: str


ParsedLine = Union[Parsed, Skipped]


def parse_line(line: str) -> ParsedLine:
    """
    Parse one raw line of an env file.

    The line is split on the first '=' only, so values may themselves
    contain '=' (base64 padding, query strings). Keys and values are taken
    literally: no trimming, no unquoting.
    """
    if "=" not in line:
        return Skipped("no separator")

    key, value = line.split("=", 1)
    if not key:
        return Skipped("empty key")
    if not value:
        return Skipped("empty value")
    return Parsed(key, value)


def read_env_file(path: str) -> Optional[List[Parsed]]:
    """
    Read an env file and return its key=value lines in file order.
    Returns None if the file does not exist; other OS errors propagate.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            content = fh.read()
    except FileNotFoundError:
        return None

    entries = []
    for line in content.split("\n"):
        parsed = parse_line(line)
        if isinstance(parsed, Parsed):
            entries.append(parsed)
    return entries
