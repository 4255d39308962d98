"""WhatsApp webhook — handles inbound messages from Twilio.

Receives Twilio's form-encoded webhook (From, Body), runs one dialogue turn
for the sender and answers inline with TwiML, one <Message> per reply.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from twilio.request_validator import RequestValidator
from twilio.twiml.messaging_response import MessagingResponse

from footform.app.config import get_settings
from footform.app.dependencies import get_dialogue_engine
from footform.services.dialogue_engine import DialogueEngine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["whatsapp"])

UNKNOWN_SENDER = "unknown"


def _signed_url(request: Request, public_base_url: str) -> str:
    """URL Twilio signed: the public one when behind a proxy, else the request URL."""
    if public_base_url:
        url = public_base_url.rstrip("/") + request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return url
    return str(request.url)


def build_twiml(messages: list[str]) -> str:
    """Wrap outbound texts in a TwiML messaging response."""
    twiml = MessagingResponse()
    for message in messages:
        twiml.message(message)
    return str(twiml)


@router.post("/whatsapp")
async def whatsapp_webhook(
    request: Request,
    engine: DialogueEngine = Depends(get_dialogue_engine),
):
    """Handle one inbound WhatsApp message.

    Expected Twilio form fields:
        From: "whatsapp:+15551234567"
        Body: "A: 240"
    """
    settings = get_settings()
    form = await request.form()
    params = {key: str(value) for key, value in form.items()}

    # ── Validate Twilio signature ────────────────────────────────────
    if settings.twilio_auth_token:
        signature = request.headers.get("x-twilio-signature", "")
        validator = RequestValidator(settings.twilio_auth_token)
        url = _signed_url(request, settings.public_base_url)
        if not signature or not validator.validate(url, params, signature):
            logger.warning("Invalid Twilio signature for %s", url)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid Twilio signature",
            )

    sender = params.get("From") or UNKNOWN_SENDER
    text = (params.get("Body") or "").strip()

    logger.info("WhatsApp inbound from %s: %s", sender, text[:100])

    turn = engine.handle_message(sender, text)
    return Response(content=build_twiml(turn.messages), media_type="text/xml")
