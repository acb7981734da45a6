"""Cliente HTTP base para a API REST da plataforma.

Retry com backoff exponencial para 429, 5xx, timeout e falha de conexão.
Em 429 o header Retry-After, quando presente, define o piso da espera.
Erros levantados nunca carregam URL (que contém tokens de interação).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RATE_LIMITED = 429


@dataclass
class HttpClientConfig:
    """Parâmetros de transporte e retry.

    `transport` injeta um transporte httpx (MockTransport nos testes).
    """

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de chamada HTTP.

    Attributes:
        status_code: Status da última resposta (None em falha de conexão)
        is_retryable: Se uma nova tentativa futura pode ter sucesso
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


def _is_transient(status_code: int) -> bool:
    return status_code == RATE_LIMITED or status_code >= 500


class HttpClient:
    """Executa requests com retry; respostas 4xx voltam ao chamador."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia o request, repetindo falhas transitórias.

        Raises:
            HttpError: Falha transitória persistente após `max_retries`.
        """
        cfg = self._config
        request_headers = {**cfg.default_headers, **(headers or {})}
        attempts = cfg.max_retries + 1

        for attempt in range(attempts):
            is_last = attempt == attempts - 1
            try:
                response = await self._send(method, url, json, params, request_headers)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if is_last:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(attempt, cfg, None)
                continue

            if not _is_transient(response.status_code):
                return response
            if is_last:
                raise HttpError(
                    "http_retryable_status",
                    status_code=response.status_code,
                    is_retryable=True,
                )
            await _backoff_sleep(attempt, cfg, _retry_after(response))

        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def _send(
        self,
        method: str,
        url: str,
        json: Any,
        params: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._config.transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            return await client.request(method, url, json=json, params=params, headers=headers)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)


def _retry_after(response: httpx.Response) -> float | None:
    """Segundos do header Retry-After em respostas 429."""
    if response.status_code != RATE_LIMITED:
        return None
    try:
        return float(response.headers.get("retry-after", ""))
    except ValueError:
        return None


async def _backoff_sleep(
    attempt: int,
    config: HttpClientConfig,
    retry_after: float | None,
) -> None:
    delay = config.backoff_base_seconds * (2**attempt)
    if retry_after is not None:
        delay = max(delay, retry_after)
    delay = min(delay, config.backoff_max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": delay, "attempt": attempt})
    await asyncio.sleep(delay)
