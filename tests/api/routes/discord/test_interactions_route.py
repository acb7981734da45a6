"""Testes da rota POST /interactions."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.connectors.discord.signature import InteractionSignatureVerifier
from api.routes.discord import interactions
from app.domain.interaction import InvalidInteractionKindError, ResponseEnvelope
from app.services.interaction_dispatcher import InteractionDispatcher

TIMESTAMP = "1700000000"


def _build_request(body: bytes, headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/interactions",
        "raw_path": b"/interactions",
        "query_string": b"",
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers.items()],
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _signed_request(body: bytes, sign) -> Request:
    return _build_request(
        body,
        {
            "x-signature-ed25519": sign(TIMESTAMP, body),
            "x-signature-timestamp": TIMESTAMP,
            "content-type": "application/json",
        },
    )


@pytest.fixture()
def wire(monkeypatch: pytest.MonkeyPatch, public_key_hex: str):
    """Substitui os getters do bootstrap por instâncias locais."""

    def _wire(dispatcher=None, verifier: InteractionSignatureVerifier | None = None):
        dispatcher = dispatcher or InteractionDispatcher(deadline_budget_ms=250)
        verifier = verifier or InteractionSignatureVerifier(public_key_hex)
        monkeypatch.setattr(interactions, "get_signature_verifier", lambda: verifier)
        monkeypatch.setattr(interactions, "get_interaction_dispatcher", lambda: dispatcher)
        return dispatcher

    return _wire


@pytest.mark.asyncio
async def test_ping_returns_pong(wire, sign) -> None:
    wire()
    body = json.dumps({"type": 1, "id": "1", "token": "t"}).encode("utf-8")

    response = await interactions.receive_interaction(_signed_request(body, sign))

    assert response.status_code == 200
    assert json.loads(response.body) == {"type": 1}


@pytest.mark.asyncio
async def test_invalid_signature_returns_401_without_dispatch(wire) -> None:
    dispatcher = MagicMock()
    dispatcher.resolve = AsyncMock()
    wire(dispatcher=dispatcher)
    body = b'{"type": 1}'
    request = _build_request(
        body, {"x-signature-ed25519": "00" * 64, "x-signature-timestamp": TIMESTAMP}
    )

    response = await interactions.receive_interaction(request)

    assert response.status_code == 401
    assert response.body == b""
    dispatcher.resolve.assert_not_called()


@pytest.mark.asyncio
async def test_missing_headers_returns_401(wire) -> None:
    wire()

    response = await interactions.receive_interaction(_build_request(b'{"type": 1}', {}))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_without_public_key_every_request_is_rejected(monkeypatch: pytest.MonkeyPatch, sign) -> None:
    monkeypatch.setattr(interactions, "get_signature_verifier", lambda: None)
    body = b'{"type": 1}'

    response = await interactions.receive_interaction(_signed_request(body, sign))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_json_returns_400(wire, sign) -> None:
    wire()

    response = await interactions.receive_interaction(_signed_request(b"{not json", sign))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unknown_interaction_kind_returns_400(wire, sign) -> None:
    wire()
    body = json.dumps({"type": 99, "id": "1", "token": "t"}).encode("utf-8")

    response = await interactions.receive_interaction(_signed_request(body, sign))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_dispatcher_rejection_maps_to_400(wire, sign) -> None:
    dispatcher = MagicMock()
    dispatcher.resolve = AsyncMock(side_effect=InvalidInteractionKindError(7))
    wire(dispatcher=dispatcher)

    response = await interactions.receive_interaction(_signed_request(b'{"type": 7}', sign))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_command_reply_is_returned_inline(wire, sign, command_data) -> None:
    dispatcher = wire()

    @dispatcher.on_interaction
    def on_command(interaction) -> None:
        interaction.handle.reply(f"pong {interaction.option('text')}")

    body = json.dumps(command_data).encode("utf-8")
    response = await interactions.receive_interaction(_signed_request(body, sign))

    assert response.status_code == 200
    assert json.loads(response.body) == {"type": 4, "data": {"content": "pong olá"}}


@pytest.mark.asyncio
async def test_command_without_answer_is_deferred(wire, sign, command_data) -> None:
    wire(dispatcher=InteractionDispatcher(deadline_budget_ms=20))
    body = json.dumps(command_data).encode("utf-8")

    response = await interactions.receive_interaction(_signed_request(body, sign))

    assert response.status_code == 200
    assert json.loads(response.body) == {"type": 5}


@pytest.mark.asyncio
async def test_envelope_serialized_from_dispatcher(wire, sign) -> None:
    dispatcher = MagicMock()
    dispatcher.resolve = AsyncMock(return_value=ResponseEnvelope.deferred(silent=True))
    wire(dispatcher=dispatcher)

    response = await interactions.receive_interaction(_signed_request(b'{"type": 2}', sign))

    assert json.loads(response.body) == {"type": 2}
