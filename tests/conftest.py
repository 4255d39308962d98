"""Shared test infrastructure for the footform test suite.

Provides:
- session_store: fresh in-memory store per test
- engine: DialogueEngine bound to session_store
- converse: helper that sends several messages and returns every turn
- twilio_form_payload: factory for Twilio WhatsApp webhook form fields
- app_client: factory for an HTTPX AsyncClient wired to a test FastAPI app
"""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from footform.services.dialogue_engine import DialogueEngine
from footform.services.session_store import InMemorySessionStore, get_session_store


# ---------------------------------------------------------------------------
# Dialogue fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def engine(session_store):
    return DialogueEngine(session_store)


@pytest.fixture
def converse(engine):
    """Send messages in order from one sender.

    Usage:
        turns = converse("start", "P-001", "240")
    """
    def _send(*texts: str, sender: str = "whatsapp:+15551234567"):
        return [engine.handle_message(sender, text) for text in texts]

    return _send


# ---------------------------------------------------------------------------
# Webhook payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def twilio_form_payload():
    """Factory for Twilio inbound message form fields.

    Usage:
        payload = twilio_form_payload("whatsapp:+15551234567", "A: 240")
    """
    def _factory(from_number: str, body: str, to_number: str = "whatsapp:+14155238886") -> dict:
        return {
            "MessageSid": "SM00000000000000000000000000000000",
            "AccountSid": "AC00000000000000000000000000000000",
            "From": from_number,
            "To": to_number,
            "Body": body,
            "NumMedia": "0",
        }

    return _factory


# ---------------------------------------------------------------------------
# App client
# ---------------------------------------------------------------------------

@pytest.fixture
def app_client(session_store):
    """Build an HTTPX AsyncClient for a fresh FastAPI app.

    Only the message routers are mounted, and the session store dependency is
    overridden with the per-test store. Settings are patched so signature
    validation is off unless a token is passed.
    """
    def _build(twilio_auth_token: str = "", public_base_url: str = ""):
        from fastapi import FastAPI
        from footform.app.routes.messages import router as messages_router
        from footform.app.routes.whatsapp import router as whatsapp_router

        test_app = FastAPI()
        test_app.include_router(whatsapp_router)
        test_app.include_router(messages_router)
        test_app.dependency_overrides[get_session_store] = lambda: session_store

        patcher = patch("footform.app.routes.whatsapp.get_settings")
        mock_settings = patcher.start()
        mock_settings.return_value.twilio_auth_token = twilio_auth_token
        mock_settings.return_value.public_base_url = public_base_url
        _patchers.append(patcher)

        return AsyncClient(
            transport=ASGITransport(app=test_app),
            base_url="http://testserver",
        )

    _patchers: list = []
    yield _build
    for patcher in _patchers:
        patcher.stop()
