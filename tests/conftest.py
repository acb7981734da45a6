"""Configuração do pytest para o serviço de interações."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture()
def signing_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture()
def public_key_hex(signing_key: Ed25519PrivateKey) -> str:
    raw = signing_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return raw.hex()


def sign_interaction(signing_key: Ed25519PrivateKey, timestamp: str, body: bytes) -> str:
    """Assina `timestamp || body` como a plataforma faz."""
    return signing_key.sign(timestamp.encode("utf-8") + body).hex()


@pytest.fixture()
def sign(signing_key: Ed25519PrivateKey):
    def _sign(timestamp: str, body: bytes) -> str:
        return sign_interaction(signing_key, timestamp, body)

    return _sign


def command_payload(
    name: str = "ping",
    interaction_id: str = "830000000000000001",
    token: str = "tok-abc",
) -> dict[str, object]:
    return {
        "type": 2,
        "id": interaction_id,
        "token": token,
        "application_id": "700000000000000001",
        "guild_id": "600000000000000001",
        "channel_id": "500000000000000001",
        "member": {"user": {"id": "400000000000000001"}},
        "data": {
            "id": "900000000000000001",
            "name": name,
            "options": [{"name": "text", "value": "olá"}],
        },
    }


@pytest.fixture()
def command_data() -> dict[str, object]:
    return command_payload()


@pytest.fixture()
def make_command_payload():
    return command_payload
