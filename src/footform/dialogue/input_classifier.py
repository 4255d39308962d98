"""Input Classifier — DETERMINISTIC only.

Maps an inbound message plus the sender's session onto exactly one intent.
Rules are tried in a fixed order and the first match wins; several patterns
can match the same text, so the order is part of the contract.
"""

import logging
import re

from footform.domain.session_models import Session

from .contracts import (
    AllDone,
    CorrectionRequest,
    CorrectionValue,
    DirectSet,
    Intent,
    Reset,
    SequentialAnswer,
    StartGreeting,
    Summary,
)
from .question_catalog import get_question, get_question_at

logger = logging.getLogger(__name__)

RESET_COMMAND = "reset"
START_COMMAND = "start"
SUMMARY_COMMAND = "summary"

# "B: 240", "b=240", "C : 12 mm"
DIRECT_SET_PATTERN = re.compile(r"([A-Ra-r])\s*[:=]\s*(.+)")

# "wrong on c", "I think it's wrong on  B" (unanchored)
CORRECTION_REQUEST_PATTERN = re.compile(r"wrong on\s+([a-r])", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Rule helpers
# ---------------------------------------------------------------------------

def _match_direct_set(raw_body: str) -> DirectSet | None:
    match = DIRECT_SET_PATTERN.fullmatch(raw_body)
    if not match:
        return None
    key = match.group(1).upper()
    if get_question(key) is None:
        return None
    return DirectSet(key=key, value=match.group(2).strip())


def _match_correction_request(body: str) -> CorrectionRequest | None:
    match = CORRECTION_REQUEST_PATTERN.search(body)
    if not match:
        return None
    key = match.group(1).upper()
    if get_question(key) is None:
        return None
    return CorrectionRequest(key=key)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def classify_message(raw_text: str, session: Session) -> Intent:
    """Classify a message in the context of the sender's session."""
    raw_body = (raw_text or "").strip()
    body = raw_body.lower()

    intent = _classify(raw_body, body, session)
    logger.debug("Classified %r as %s", raw_body[:50], intent.type.value)
    return intent


def _classify(raw_body: str, body: str, session: Session) -> Intent:
    if body == RESET_COMMAND:
        return Reset()

    if body == START_COMMAND and session.is_pristine:
        return StartGreeting()

    if body == SUMMARY_COMMAND:
        return Summary()

    # A pending correction swallows the next message whatever it looks like
    if session.pending_correction_key:
        return CorrectionValue(key=session.pending_correction_key, value=raw_body)

    direct_set = _match_direct_set(raw_body)
    if direct_set:
        return direct_set

    correction_request = _match_correction_request(body)
    if correction_request:
        return correction_request

    current = get_question_at(session.current_index)
    if current is None:
        return AllDone()

    return SequentialAnswer(key=current.key, value=raw_body)
