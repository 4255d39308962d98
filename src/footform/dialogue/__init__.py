"""Dialogue core for the Parametric Foot form.

Pieces:
1. Question catalog (ordered form fields)
2. Input classifier (deterministic intent precedence rules)
3. Summary formatter (answers rendered against the catalog)
4. Templates (user-facing reply texts)
"""

from .contracts import (
    AllDone,
    CorrectionRequest,
    CorrectionValue,
    DialogueTurn,
    DirectSet,
    Intent,
    Reset,
    SequentialAnswer,
    StartGreeting,
    Summary,
)
from .input_classifier import classify_message
from .question_catalog import QUESTIONS, Question, first_unanswered_index, get_question
from .summary_formatter import build_summary

__all__ = [
    "AllDone",
    "CorrectionRequest",
    "CorrectionValue",
    "DialogueTurn",
    "DirectSet",
    "Intent",
    "Reset",
    "SequentialAnswer",
    "StartGreeting",
    "Summary",
    "classify_message",
    "QUESTIONS",
    "Question",
    "first_unanswered_index",
    "get_question",
    "build_summary",
]
