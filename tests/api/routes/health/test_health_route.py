"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.connectors.discord.signature import InteractionSignatureVerifier
from api.routes.health import router as health
from app.services.interaction_dispatcher import InteractionDispatcher


@pytest.mark.asyncio
async def test_health_is_always_healthy() -> None:
    response = await health.health_check()

    assert response.status == "healthy"
    assert response.service == "pyloto-interactions"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_public_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(health, "get_signature_verifier", lambda: None)
    monkeypatch.setattr(health, "get_interaction_dispatcher", lambda: InteractionDispatcher())

    response = await health.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["signature_verifier"] == {
        "status": "failed",
        "error": "public_key_not_configured",
    }


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_verifier(
    monkeypatch: pytest.MonkeyPatch, public_key_hex: str
) -> None:
    verifier = InteractionSignatureVerifier(public_key_hex)
    monkeypatch.setattr(health, "get_signature_verifier", lambda: verifier)
    monkeypatch.setattr(health, "get_interaction_dispatcher", lambda: InteractionDispatcher())

    response = await health.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["signature_verifier"]["status"] == "ok"
    assert payload["listeners_pending"] == 0
