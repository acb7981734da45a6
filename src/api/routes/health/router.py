"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap.discord_factory import get_interaction_dispatcher, get_signature_verifier

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "pyloto-interactions"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


class ReadinessCheck(BaseModel):
    """Estado de um componente necessário para atender interações."""

    status: Literal["ok", "failed"]
    error: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: chave pública carregada para verificar assinaturas."""
    verifier_check = (
        ReadinessCheck(status="ok")
        if get_signature_verifier() is not None
        else ReadinessCheck(status="failed", error="public_key_not_configured")
    )
    ready = verifier_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"signature_verifier": verifier_check.model_dump()},
        "listeners_pending": get_interaction_dispatcher().pending_listener_tasks,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_failed", extra={"error": verifier_check.error})
    return JSONResponse(content=payload, status_code=200 if ready else 503)
