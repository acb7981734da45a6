"""Métricas emitidas como logs estruturados.

A agregação fica a cargo da plataforma de logs; cada métrica é um record
`metric_<nome>` com `metric_type` e dimensões em `extra`.

- metric_latency: tempo até a resolução da corrida, por fonte vencedora
  (deadline, acknowledge, reply)
- metric_late_reply: reply rejeitado porque o prazo já havia expirado
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _emit(name: str, metric_type: str, correlation_id: str | None, **dimensions: Any) -> None:
    logger.info(
        f"metric_{name}",
        extra={"metric_type": metric_type, "correlation_id": correlation_id, **dimensions},
    )


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Latência de `component.operation` em milissegundos (2 casas)."""
    _emit(
        "latency",
        "latency",
        correlation_id,
        component=component,
        operation=operation,
        latency_ms=round(latency_ms, 2),
    )


def record_late_reply(correlation_id: str | None = None) -> None:
    _emit("late_reply", "counter", correlation_id, component="acknowledgment")
