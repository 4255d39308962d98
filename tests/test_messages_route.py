"""Integration tests for the transport-neutral JSON message endpoint."""

import pytest


class TestPostMessage:
    async def test_returns_intent_and_messages(self, app_client, session_store):
        async with app_client() as client:
            resp = await client.post("/api/messages", json={"sender": "gw:1", "text": "B=250"})

        assert resp.status_code == 200
        data = resp.json()
        assert data == {
            "ok": True,
            "intent": "direct_set",
            "messages": ["Set B. Instep circumference (mm) to: 250 ✅", "Patient Reference?"],
        }
        assert session_store.get("gw:1").answers == {"B": "250"}

    async def test_reset_over_gateway(self, app_client, session_store):
        async with app_client() as client:
            await client.post("/api/messages", json={"sender": "gw:2", "text": "PAT"})
            resp = await client.post("/api/messages", json={"sender": "gw:2", "text": "RESET"})

        assert resp.json()["intent"] == "reset"
        assert session_store.get("gw:2").is_pristine

    async def test_text_defaults_to_empty(self, app_client):
        async with app_client() as client:
            resp = await client.post("/api/messages", json={"sender": "gw:3"})

        assert resp.status_code == 200
        assert resp.json()["intent"] == "sequential_answer"

    @pytest.mark.parametrize("payload", [{}, {"sender": ""}, {"text": "hi"}, {"sender": 5}])
    async def test_invalid_payload_rejected(self, app_client, payload):
        async with app_client() as client:
            resp = await client.post("/api/messages", json=payload)

        assert resp.status_code == 422


async def test_health_endpoint():
    from httpx import ASGITransport, AsyncClient
    from footform.app.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "footform"}
