"""Domain enumerations for the Parametric Foot form dialogue.

All enums use the (str, Enum) pattern to ensure JSON serialization compatibility.
"""

from enum import Enum


class IntentType(str, Enum):
    """What an inbound message means for the conversation, in precedence order."""

    RESET = "reset"
    START_GREETING = "start_greeting"
    SUMMARY = "summary"
    CORRECTION_VALUE = "correction_value"
    DIRECT_SET = "direct_set"
    CORRECTION_REQUEST = "correction_request"
    SEQUENTIAL_ANSWER = "sequential_answer"
    ALL_DONE = "all_done"


class DialogueMode(str, Enum):
    """High-level mode of a session."""

    SEQUENTIAL = "sequential"
    AWAITING_CORRECTION = "awaiting_correction"
