"""Roteamento de interações inbound por tipo.

PING               → PONG imediato (síncrono, sem handle nem timer)
APPLICATION_COMMAND → inicia a corrida de acknowledgment, notifica os
                      listeners (fire-and-forget) e devolve o future
outro              → InvalidInteractionKindError

Os dois adapters de entrega (rota HTTP e canal push) usam o mesmo
`handle()`; nenhum duplica esta máquina de estados.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from app.domain.interaction import (
    InteractionPayload,
    InteractionType,
    InvalidInteractionKindError,
    ResponseEnvelope,
)
from app.observability import get_correlation_id
from app.protocols.interaction_callback import InteractionFollowupProtocol
from app.services.acknowledgment import AcknowledgmentRace
from app.services.command_interaction import CommandInteraction
from config.settings.discord import DEFAULT_DEADLINE_BUDGET_MS

logger = logging.getLogger(__name__)

InteractionListener = Callable[[CommandInteraction], Awaitable[None] | None]


class InteractionDispatcher:
    """Classifica interações e produz o envelope de resposta.

    Args:
        deadline_budget_ms: Prazo para a resposta inicial de comandos.
        followup: Cliente de follow-up repassado às interações de comando.
    """

    def __init__(
        self,
        deadline_budget_ms: int = DEFAULT_DEADLINE_BUDGET_MS,
        followup: InteractionFollowupProtocol | None = None,
    ) -> None:
        if deadline_budget_ms <= 0:
            raise ValueError("deadline_budget_ms deve ser > 0")
        self._budget_seconds = deadline_budget_ms / 1000
        self._followup = followup
        self._listeners: list[InteractionListener] = []
        self._listener_tasks: set[asyncio.Task[Any]] = set()

    @property
    def deadline_budget_seconds(self) -> float:
        return self._budget_seconds

    def add_listener(self, listener: InteractionListener) -> InteractionListener:
        """Registra listener de interações de comando."""
        self._listeners.append(listener)
        return listener

    # Açúcar para uso como decorator: @dispatcher.on_interaction
    on_interaction = add_listener

    def remove_listener(self, listener: InteractionListener) -> None:
        with contextlib.suppress(ValueError):
            self._listeners.remove(listener)

    def handle(
        self,
        data: Mapping[str, Any] | InteractionPayload,
    ) -> ResponseEnvelope | asyncio.Future[ResponseEnvelope]:
        """Produz a resposta de uma interação.

        Args:
            data: Payload JSON já parseado (ou InteractionPayload).

        Returns:
            ResponseEnvelope para PING; future da corrida para comandos
            (exige event loop em execução).

        Raises:
            InvalidInteractionKindError: Se o tipo for desconhecido.
        """
        payload = data if isinstance(data, InteractionPayload) else InteractionPayload.from_dict(data)

        if payload.kind == InteractionType.PING:
            return ResponseEnvelope.pong()

        if payload.kind == InteractionType.APPLICATION_COMMAND:
            race = AcknowledgmentRace(
                self._budget_seconds,
                correlation_id=get_correlation_id() or payload.id,
            )
            self._emit(CommandInteraction(payload, race.handle, self._followup))
            return race.result

        logger.warning(
            "interaction_kind_invalid",
            extra={"interaction_kind": repr(payload.kind)},
        )
        raise InvalidInteractionKindError(payload.kind)

    async def resolve(self, data: Mapping[str, Any] | InteractionPayload) -> ResponseEnvelope:
        """Versão awaitable de `handle()` usada pelos adapters."""
        result = self.handle(data)
        if isinstance(result, ResponseEnvelope):
            return result
        return await result

    def _emit(self, interaction: CommandInteraction) -> None:
        if not self._listeners:
            logger.warning(
                "interaction_without_listeners",
                extra={"command": interaction.command_name},
            )
            return

        for listener in list(self._listeners):
            try:
                outcome = listener(interaction)
            except Exception:
                logger.exception(
                    "interaction_listener_failed",
                    extra={"command": interaction.command_name},
                )
                continue
            if inspect.isawaitable(outcome):
                self._track(outcome, interaction.command_name)

    def _track(self, awaitable: Awaitable[Any], command_name: str) -> None:
        task = asyncio.ensure_future(awaitable)
        self._listener_tasks.add(task)

        def _on_done(done: asyncio.Task[Any]) -> None:
            self._listener_tasks.discard(done)
            if done.cancelled():
                return
            exc = done.exception()
            if exc is not None:
                logger.error(
                    "interaction_listener_task_failed",
                    extra={
                        "command": command_name,
                        "error_type": type(exc).__name__,
                        "pending_tasks": len(self._listener_tasks),
                    },
                )

        task.add_done_callback(_on_done)

    @property
    def pending_listener_tasks(self) -> int:
        return len(self._listener_tasks)

    async def drain_listener_tasks(self, timeout_seconds: float = 30.0) -> None:
        """Aguarda tasks de listeners pendentes durante o shutdown."""
        if not self._listener_tasks:
            return

        pending_now = list(self._listener_tasks)
        logger.info(
            "interaction_listeners_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "interaction_listeners_shutdown_cancelled",
            extra={"cancelled_tasks": len(pending)},
        )
