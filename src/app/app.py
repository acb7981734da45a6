"""Entrypoint do serviço de interações.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Listeners de comandos são registrados no dispatcher compartilhado:

    from app.bootstrap.discord_factory import get_interaction_dispatcher

    @get_interaction_dispatcher().on_interaction
    async def on_command(interaction): ...
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.discord_factory import get_interaction_dispatcher, get_signature_verifier
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Decodifica a chave pública (uma vez)

    Shutdown:
    - Aguarda listeners de interação pendentes
    """
    logger.info("app_starting")
    validate_runtime_settings()
    app.state.signature_verifier = get_signature_verifier()
    app.state.interaction_dispatcher = get_interaction_dispatcher()

    yield

    logger.info("app_shutting_down")
    await app.state.interaction_dispatcher.drain_listener_tasks(
        timeout_seconds=SHUTDOWN_DRAIN_SECONDS
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="pyloto-interactions",
        description="Webhook de interações e registro de comandos",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())
    logger.info("app_configured")
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting pyloto-interactions in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
