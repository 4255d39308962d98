"""Question catalog — the ordered Parametric Foot form fields."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    key: str
    label: str


QUESTIONS: tuple[Question, ...] = (
    Question("patientRef", "Patient Reference"),
    Question("A", "A. Smallest supramalleolar circumference (mm)"),
    Question("B", "B. Instep circumference (mm)"),
    Question("C", "C. Midfoot circumference passing through apex of arch (mm)"),
    Question("D", "D. Circumference passing through 1st meta and 5th meta (mm)"),
    Question("E", "E. Foot length (mm)"),
    Question("F", "F. Length from heel to 1st meta head (mm)"),
    Question("G", "G. Length from heel to navicular (mm)"),
    Question("H", "H. Length from heel to 5th meta head (mm)"),
    Question("I", "I. Length from heel to base of 5th meta (mm)"),
    Question("J", "J. Width between metatarsal heads (mm)"),
    Question("K", "K. Width between apex of navicular (projected to floor) and base of 5th meta (mm)"),
    Question("L", "L. Width of the heel at the widest part (mm)"),
    Question("M", "M. Length from heel to apex of medial malleolus (mm)"),
    Question("N", "N. Length from ground to apex of medial malleolus (mm)"),
    Question("O", "O. Length from heel to apex of lateral malleolus (mm)"),
    Question("P", "P. Length from ground to apex of lateral malleolus (mm)"),
    Question("Q", "Q. Width at supramalleolar (mm)"),
    Question("R", "R. Width at malleoli (mm)"),
)

_BY_KEY = {q.key: q for q in QUESTIONS}


def question_count() -> int:
    return len(QUESTIONS)


def get_question(key: str) -> Question | None:
    """Look up a question by its exact key. Returns None if unknown."""
    return _BY_KEY.get(key)


def get_question_at(index: int) -> Question | None:
    """Question at a catalog position, or None when out of bounds."""
    if 0 <= index < len(QUESTIONS):
        return QUESTIONS[index]
    return None


def get_label(key: str) -> str:
    """Human-readable label for a key, falling back to the key itself."""
    question = _BY_KEY.get(key)
    return question.label if question else key


def first_unanswered_index(answers: dict[str, str]) -> int | None:
    """Position of the first question without a non-empty answer.

    Returns None when every question has been answered.
    """
    for index, question in enumerate(QUESTIONS):
        if not answers.get(question.key):
            return index
    return None
