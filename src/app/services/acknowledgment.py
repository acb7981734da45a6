"""Corrida de acknowledgment: prazo da plataforma vs. resposta da aplicação.

Para cada invocação de comando a plataforma exige uma resposta inicial
dentro do prazo (250ms por padrão). A corrida liga duas fontes a um único
slot de resultado (asyncio.Future, atribuição única):

- Timer do prazo: ao disparar resolve com ACKNOWLEDGE_WITH_SOURCE e marca
  `timed_out`; replies posteriores são rejeitados (retornam False).
- AcknowledgmentHandle: `acknowledge()` resolve com ack adiado e
  `reply()` resolve com a mensagem imediata.

A primeira fonte a resolver vence; as demais não têm efeito. Todo acesso
acontece no event loop da interação, então a checagem `done()` seguida de
`set_result()` é atômica em relação às outras fontes.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import Any

from app.domain.interaction import ResponseEnvelope
from app.observability import get_correlation_id, record_late_reply, record_latency

logger = logging.getLogger(__name__)

# Fontes de resolução (usadas em logs e métricas)
SOURCE_DEADLINE = "deadline"
SOURCE_ACKNOWLEDGE = "acknowledge"
SOURCE_REPLY = "reply"


class AcknowledgmentRace:
    """Corrida entre o timer do prazo e o commit da aplicação.

    Deve ser criada dentro de um event loop em execução; o timer começa a
    contar na construção.

    Args:
        budget_seconds: Prazo para a resposta inicial.
        correlation_id: ID para logs (padrão: correlation_id do contexto).
    """

    def __init__(self, budget_seconds: float, correlation_id: str | None = None) -> None:
        self._loop = asyncio.get_running_loop()
        self._result: asyncio.Future[ResponseEnvelope] = self._loop.create_future()
        self._timed_out = False
        self._source: str | None = None
        self._correlation_id = correlation_id or get_correlation_id()
        self._started_at = time.perf_counter()
        self._timer = self._loop.call_later(budget_seconds, self._on_deadline)
        # Cobre também cancelamento externo do future
        self._result.add_done_callback(lambda _: self._timer.cancel())
        self.handle = AcknowledgmentHandle(self)

    @property
    def result(self) -> asyncio.Future[ResponseEnvelope]:
        """Slot de resultado; resolve exatamente uma vez."""
        return self._result

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    @property
    def settled(self) -> bool:
        return self._result.done()

    @property
    def source(self) -> str | None:
        """Fonte que resolveu a corrida (None enquanto pendente)."""
        return self._source

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._started_at) * 1000

    def _on_deadline(self) -> None:
        if self._result.done():
            return
        self._timed_out = True
        self._settle(ResponseEnvelope.deferred(), SOURCE_DEADLINE)

    def _settle(self, envelope: ResponseEnvelope, source: str) -> bool:
        if self._result.done():
            logger.debug(
                "interaction_duplicate_commit_ignored",
                extra={
                    "correlation_id": self._correlation_id,
                    "source": source,
                    "winner": self._source,
                },
            )
            return False

        self._result.set_result(envelope)
        self._source = source
        self._timer.cancel()

        elapsed_ms = self.elapsed_ms()
        logger.info(
            "interaction_acknowledged",
            extra={
                "correlation_id": self._correlation_id,
                "source": source,
                "response_type": envelope.type.name,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        record_latency("acknowledgment", source, elapsed_ms, self._correlation_id)
        return True


class AcknowledgmentHandle:
    """Capacidade entregue à aplicação para responder uma interação.

    `acknowledge` e `reply` são mutuamente exclusivos: o primeiro commit
    vence e os seguintes retornam False sem efeito. Nunca levantam exceção.
    """

    __slots__ = ("_race",)

    def __init__(self, race: AcknowledgmentRace) -> None:
        self._race = race

    @property
    def expired(self) -> bool:
        """True se o prazo expirou antes de qualquer commit da aplicação."""
        return self._race.timed_out

    @property
    def committed(self) -> bool:
        return self._race.settled

    def acknowledge(self, silent: bool = False) -> bool:
        """Compromete com resposta adiada (conteúdo chega depois).

        Args:
            silent: True oculta a invocação original (ACKNOWLEDGE).

        Returns:
            True se este commit definiu a resposta; False se a corrida
            já estava resolvida (prazo expirado ou commit anterior).
        """
        return self._race._settle(ResponseEnvelope.deferred(silent=silent), SOURCE_ACKNOWLEDGE)

    def reply(self, content: str | Mapping[str, Any], silent: bool = False) -> bool:
        """Compromete com conteúdo imediato.

        Args:
            content: Texto ou corpo da mensagem ({"content": ..., "embeds": ...}).
            silent: True oculta a invocação original (CHANNEL_MESSAGE).

        Returns:
            True se a mensagem vai na resposta síncrona. False se o prazo
            expirou (o chamador deve entregar por outro canal) ou se já
            houve commit.
        """
        if self._race.timed_out:
            logger.info(
                "interaction_late_reply_rejected",
                extra={
                    "correlation_id": self._race._correlation_id,
                    "elapsed_ms": round(self._race.elapsed_ms(), 2),
                },
            )
            record_late_reply(self._race._correlation_id)
            return False
        return self._race._settle(ResponseEnvelope.reply(content, silent=silent), SOURCE_REPLY)
