"""Dialogue engine — applies classified intents to a session.

Two modes per session:
- SEQUENTIAL: each message answers the question under the cursor
- AWAITING_CORRECTION: the next message overwrites one pending field

Every handler returns the replies in send order. Handlers mutate the session
held by the store in place; only Reset swaps the session object.
"""

import logging

from footform.dialogue.contracts import (
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
from footform.dialogue.input_classifier import classify_message
from footform.dialogue.question_catalog import (
    QUESTIONS,
    first_unanswered_index,
    get_label,
    get_question_at,
)
from footform.dialogue.summary_formatter import build_summary
from footform.dialogue.templates import render
from footform.domain.session_models import Session
from footform.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def _prompt(index: int) -> str:
    return render("prompt", label=QUESTIONS[index].label)


class DialogueEngine:
    """Runs one conversation turn per inbound message."""

    def __init__(self, store: SessionStore):
        self.store = store

    def handle_message(self, sender_id: str, raw_text: str) -> DialogueTurn:
        """Resolve the sender's session, classify the text and apply it."""
        session = self.store.get_or_create(sender_id)
        intent = classify_message(raw_text, session)
        messages = self.apply(intent, sender_id, session)
        return DialogueTurn(intent=intent.type, messages=messages)

    def apply(self, intent: Intent, sender_id: str, session: Session) -> list[str]:
        """Apply an intent and return the outbound messages."""
        if isinstance(intent, Reset):
            return self._reset(sender_id)
        if isinstance(intent, StartGreeting):
            return [render("start", prompt=_prompt(0))]
        if isinstance(intent, Summary):
            return [render("summary", summary=build_summary(session.answers))]
        if isinstance(intent, CorrectionValue):
            return self._apply_correction_value(intent, session)
        if isinstance(intent, DirectSet):
            return self._apply_direct_set(intent, session)
        if isinstance(intent, CorrectionRequest):
            return self._request_correction(intent, session)
        if isinstance(intent, SequentialAnswer):
            return self._apply_sequential_answer(intent, session)
        if isinstance(intent, AllDone):
            return [render("already_completed")]
        raise TypeError(f"Unhandled intent: {intent!r}")

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _reset(self, sender_id: str) -> list[str]:
        self.store.reset(sender_id)
        return [render("reset", prompt=_prompt(0))]

    def _apply_correction_value(self, intent: CorrectionValue, session: Session) -> list[str]:
        session.answers[intent.key] = intent.value
        session.pending_correction_key = None
        logger.info("Corrected %s", intent.key)

        confirmation = render(
            "correction_applied", label=get_label(intent.key), value=intent.value,
        )
        return [confirmation, self._advance_to_first_unanswered(session)]

    def _apply_direct_set(self, intent: DirectSet, session: Session) -> list[str]:
        session.answers[intent.key] = intent.value
        logger.info("Direct set %s", intent.key)

        confirmation = render("direct_set", label=get_label(intent.key), value=intent.value)
        return [confirmation, self._advance_to_first_unanswered(session)]

    def _request_correction(self, intent: CorrectionRequest, session: Session) -> list[str]:
        session.pending_correction_key = intent.key
        return [render("correction_requested", label=get_label(intent.key))]

    def _apply_sequential_answer(self, intent: SequentialAnswer, session: Session) -> list[str]:
        session.answers[intent.key] = intent.value
        # Plain step forward, unlike the correction paths which recompute
        session.current_index += 1

        if get_question_at(session.current_index) is None:
            logger.info("Form completed sequentially")
            return [render("sequence_completed", summary=build_summary(session.answers))]
        return [_prompt(session.current_index)]

    def _advance_to_first_unanswered(self, session: Session) -> str:
        """Move the cursor to the first gap and return the follow-up message."""
        next_index = first_unanswered_index(session.answers)
        if next_index is None:
            session.current_index = len(QUESTIONS)
            logger.info("Form completed")
            return render("all_fields_completed", summary=build_summary(session.answers))

        session.current_index = next_index
        return _prompt(next_index)
