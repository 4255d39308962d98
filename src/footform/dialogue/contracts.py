"""Typed dataclasses for dialogue I/O contracts.

Each intent is a frozen dataclass tagged with its IntentType; the payload
fields are exactly what the dialogue engine needs to apply it.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union

from footform.domain.enums import IntentType


@dataclass(frozen=True)
class Reset:
    type: ClassVar[IntentType] = IntentType.RESET


@dataclass(frozen=True)
class StartGreeting:
    type: ClassVar[IntentType] = IntentType.START_GREETING


@dataclass(frozen=True)
class Summary:
    type: ClassVar[IntentType] = IntentType.SUMMARY


@dataclass(frozen=True)
class CorrectionValue:
    """Value for the field the session is waiting to correct."""
    key: str
    value: str
    type: ClassVar[IntentType] = IntentType.CORRECTION_VALUE


@dataclass(frozen=True)
class DirectSet:
    """Direct "<letter>: <value>" assignment."""
    key: str
    value: str
    type: ClassVar[IntentType] = IntentType.DIRECT_SET


@dataclass(frozen=True)
class CorrectionRequest:
    """The "wrong on <letter>" trigger."""
    key: str
    type: ClassVar[IntentType] = IntentType.CORRECTION_REQUEST


@dataclass(frozen=True)
class SequentialAnswer:
    """Answer to the question under the cursor."""
    key: str
    value: str
    type: ClassVar[IntentType] = IntentType.SEQUENTIAL_ANSWER


@dataclass(frozen=True)
class AllDone:
    type: ClassVar[IntentType] = IntentType.ALL_DONE


Intent = Union[
    Reset,
    StartGreeting,
    Summary,
    CorrectionValue,
    DirectSet,
    CorrectionRequest,
    SequentialAnswer,
    AllDone,
]


@dataclass
class DialogueTurn:
    """Output of one handled message: the intent and the replies, in send order."""
    intent: IntentType
    messages: list[str] = field(default_factory=list)
