"""Summary formatter — renders collected answers against the catalog."""

from .question_catalog import QUESTIONS

PLACEHOLDER = "-"


def build_summary(answers: dict[str, str]) -> str:
    """One "<label>: <value>" line per question, in catalog order."""
    lines = []
    for question in QUESTIONS:
        value = answers.get(question.key)
        lines.append(f"{question.label}: {value if value is not None else PLACEHOLDER}")
    return "\n".join(lines)
