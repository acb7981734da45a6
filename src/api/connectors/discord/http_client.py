"""Cliente HTTP especializado para a API REST do Discord.

Estende HttpClient genérico com:
- Autenticação `Authorization: Bot <token>`
- Callback de interação (`?wait=true`) para o canal push
- Edição da resposta original (follow-up após ack adiado)
- CRUD do registro de comandos (globais ou por servidor)
- Tratamento de erros Discord (`{"code", "message"}`)
- Logging estruturado sem tokens
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.discord.api_errors import DiscordApiError, parse_discord_error
from api.connectors.discord.api_logging import log_api_error, log_success
from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import DiscordSettings

logger: logging.Logger = logging.getLogger(__name__)


class DiscordHttpClient(HttpClient):
    """Cliente da API REST do Discord.

    Args:
        api_endpoint: URL base com versão (ex: https://discord.com/api/v8)
        bot_token: Token do bot (vazio = requests sem Authorization)
        config: Configuração HTTP base
    """

    def __init__(
        self,
        api_endpoint: str,
        bot_token: str = "",
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._api_endpoint = api_endpoint.rstrip("/")
        self._bot_token = bot_token

    # ── Interações ──────────────────────────────────────────────────────

    async def send_interaction_response(
        self,
        interaction_id: str,
        interaction_token: str,
        envelope: dict[str, Any],
    ) -> None:
        """Envia o envelope de resposta pelo endpoint de callback.

        Usa `wait=true` para que a plataforma confirme a entrega.
        """
        await self._call(
            "POST",
            f"interactions/{interaction_id}/{interaction_token}/callback",
            route="interactions/{id}/{token}/callback",
            json=envelope,
            params={"wait": "true"},
        )

    async def edit_original_response(
        self,
        application_id: str,
        interaction_token: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """Edita a resposta original (conteúdo após ack adiado)."""
        return await self._call(
            "PATCH",
            f"webhooks/{application_id}/{interaction_token}/messages/@original",
            route="webhooks/{application_id}/{token}/messages/@original",
            json=data,
        )

    # ── Registro de comandos ────────────────────────────────────────────

    async def get_current_application(self) -> dict[str, Any]:
        return await self._call(
            "GET",
            "oauth2/applications/@me",
            route="oauth2/applications/@me",
        )

    async def list_commands(
        self,
        application_id: str,
        guild_id: str | None = None,
    ) -> list[dict[str, Any]]:
        path, route = _commands_path(application_id, guild_id)
        return await self._call("GET", path, route=route)

    async def bulk_overwrite_commands(
        self,
        application_id: str,
        commands: list[dict[str, Any]],
        guild_id: str | None = None,
    ) -> list[dict[str, Any]]:
        path, route = _commands_path(application_id, guild_id)
        return await self._call("PUT", path, route=route, json=commands)

    async def create_command(
        self,
        application_id: str,
        command: dict[str, Any],
        guild_id: str | None = None,
    ) -> dict[str, Any]:
        path, route = _commands_path(application_id, guild_id)
        return await self._call("POST", path, route=route, json=command)

    async def edit_command(
        self,
        application_id: str,
        command_id: str,
        command: dict[str, Any],
        guild_id: str | None = None,
    ) -> dict[str, Any]:
        path, route = _commands_path(application_id, guild_id)
        return await self._call(
            "PATCH", f"{path}/{command_id}", route=f"{route}/{{command_id}}", json=command
        )

    async def delete_command(
        self,
        application_id: str,
        command_id: str,
        guild_id: str | None = None,
    ) -> None:
        path, route = _commands_path(application_id, guild_id)
        await self._call("DELETE", f"{path}/{command_id}", route=f"{route}/{{command_id}}")

    # ── Internos ────────────────────────────────────────────────────────

    def _build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._bot_token:
            headers["Authorization"] = f"Bot {self._bot_token}"
        return headers

    async def _call(
        self,
        method: str,
        path: str,
        *,
        route: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._api_endpoint}/{path}"
        response = await self.request(
            method,
            url,
            json=json,
            params=params,
            headers=self._build_headers(),
        )
        return self._process_response(response, method, route)

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        route: str,
    ) -> Any:
        """Processa response da API; 204 retorna None."""
        if response.status_code == 204 or not response.content:
            response_data: Any = None
        else:
            try:
                response_data = response.json()
            except json.JSONDecodeError as exc:
                logger.error("discord_api_invalid_json", extra={"method": method, "route": route})
                raise HttpError("invalid_response_json", status_code=response.status_code) from exc

        api_error = parse_discord_error(response_data, response.status_code)
        if api_error:
            self._handle_api_error(api_error, method, route)

        log_success(method, route, response.status_code)
        return response_data

    def _handle_api_error(self, api_error: DiscordApiError, method: str, route: str) -> None:
        log_api_error(api_error, method, route)
        raise HttpError(
            f"Discord API error: {api_error.error_message} ({api_error.error_code})",
            status_code=api_error.status_code,
            is_retryable=not api_error.is_permanent,
        )


def _commands_path(application_id: str, guild_id: str | None) -> tuple[str, str]:
    """Retorna (path, template de rota) dos comandos globais ou do servidor."""
    if guild_id:
        return (
            f"applications/{application_id}/guilds/{guild_id}/commands",
            "applications/{application_id}/guilds/{guild_id}/commands",
        )
    return (
        f"applications/{application_id}/commands",
        "applications/{application_id}/commands",
    )


def create_discord_http_client(
    settings: DiscordSettings | None = None,
) -> DiscordHttpClient:
    """Factory para criar cliente Discord com config padrão.

    Args:
        settings: DiscordSettings opcional. Se None, carrega do ambiente.
    """
    from config.settings import get_discord_settings

    discord = settings or get_discord_settings()
    config = HttpClientConfig(
        timeout_seconds=discord.request_timeout_seconds,
        max_retries=discord.max_retries,
    )
    return DiscordHttpClient(
        api_endpoint=discord.api_endpoint,
        bot_token=discord.bot_token,
        config=config,
    )
