"""Session model for the form-filling conversation."""

import copy
from dataclasses import dataclass, field

from footform.domain.enums import DialogueMode


@dataclass
class Session:
    """Mutable per-sender conversation state.

    Held by the session store and mutated in place by the dialogue engine,
    so changes are visible to the next message from the same sender.
    """
    current_index: int = 0
    answers: dict[str, str] = field(default_factory=dict)
    pending_correction_key: str | None = None

    @property
    def is_pristine(self) -> bool:
        return self.current_index == 0 and not self.answers

    @property
    def mode(self) -> DialogueMode:
        if self.pending_correction_key:
            return DialogueMode.AWAITING_CORRECTION
        return DialogueMode.SEQUENTIAL

    def snapshot(self) -> dict:
        """Return a detached copy of the state fields."""
        return {
            "current_index": self.current_index,
            "answers": copy.deepcopy(self.answers),
            "pending_correction_key": self.pending_correction_key,
        }
