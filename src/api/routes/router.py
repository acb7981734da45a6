"""Agregador de rotas: registra os routers por canal.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.discord.router import router as discord_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Discord (POST /interactions)
    api_router.include_router(discord_router, tags=["discord"])

    return api_router
