"""Helpers de logging para a API do Discord (sem tokens).

As rotas são logadas como template (ex: "interactions/{id}/{token}/callback"),
nunca com o token de interação ou o bot token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import DiscordApiError

logger = logging.getLogger(__name__)


def log_api_error(api_error: DiscordApiError, method: str, route: str) -> None:
    logger.warning(
        "discord_api_error",
        extra={
            "method": method,
            "route": route,
            "status_code": api_error.status_code,
            "error_code": api_error.error_code,
            "is_permanent": api_error.is_permanent,
        },
    )


def log_success(method: str, route: str, status_code: int) -> None:
    logger.debug(
        "discord_api_ok",
        extra={"method": method, "route": route, "status_code": status_code},
    )
