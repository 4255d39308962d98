"""Transport-neutral message endpoint.

Any request/response gateway can post {"sender", "text"} and relay the
returned messages, in order, back to the same sender.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from footform.app.dependencies import get_dialogue_engine
from footform.services.dialogue_engine import DialogueEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["messages"])


class InboundMessage(BaseModel):
    sender: str = Field(..., min_length=1)
    text: str = ""


class OutboundMessages(BaseModel):
    ok: bool = True
    intent: str
    messages: list[str]


@router.post("", response_model=OutboundMessages)
async def post_message(
    payload: InboundMessage,
    engine: DialogueEngine = Depends(get_dialogue_engine),
):
    """Run one dialogue turn and return the replies."""
    logger.info("Gateway inbound from %s: %s", payload.sender, payload.text[:100])

    turn = engine.handle_message(payload.sender, payload.text)
    return OutboundMessages(intent=turn.intent.value, messages=turn.messages)
