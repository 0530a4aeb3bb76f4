# src/env_therapist/output.py
from typing import List

from .diagnosis import Diagnosis, Stage

STAGE_LABELS = {
    Stage.MISSING: "😱 MISSING",
    Stage.MALFORMED: "🤔 MALFORMED",
    Stage.CONFLICT: "⚡ CONFLICT",
    Stage.OK: "✅ OK",
}


class Color:
    RESET = "\033[0m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    MAGENTA = "\033[95m"
    GREEN = "\033[92m"


def color_for_stage(stage: Stage) -> str:
    if stage is Stage.MISSING:
        return Color.RED
    if stage is Stage.MALFORMED:
        return Color.YELLOW
    if stage is Stage.CONFLICT:
        return Color.MAGENTA
    return Color.GREEN


def label_for(stage: Stage, color: bool = False) -> str:
    label = STAGE_LABELS[stage]
    if color:
        return f"{color_for_stage(stage)}{label}{Color.RESET}"
    return label


def count_issues(diagnoses: List[Diagnosis]) -> int:
    return sum(1 for d in diagnoses if d.is_issue)


def report(diagnoses: List[Diagnosis], color: bool = False) -> str:
    """Render the session report as multi-line text."""
    lines = []
    lines.append("")
    lines.append("🧠 ENV THERAPIST SESSION STARTING...")
    lines.append("")
    lines.append("Let's talk about how that makes you feel...")
    lines.append("")
    lines.append("📋 DIAGNOSIS REPORT:")
    lines.append("")
    for d in diagnoses:
        lines.append(f"{label_for(d.stage, color)} {d.key}: {d.note}")

    issues = count_issues(diagnoses)
    lines.append("")
    lines.append(f"💊 PRESCRIPTION: {issues} issue(s) found. Have you tried turning it off and on again?")
    lines.append("")
    lines.append("🏆 Remember: Your environment is valid and deserves love!")
    return "\n".join(lines)
