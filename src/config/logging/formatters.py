"""Formatter JSON dos logs estruturados.

Exemplo de output:
    {
        "asctime": "2026-10-16T10:30:00",
        "level": "INFO",
        "logger": "app.services.acknowledgment",
        "message": "interaction_acknowledged",
        "correlation_id": "830129312091234",
        "service": "pyloto_interactions",
        "outcome": "reply",
        "elapsed_ms": 51.2
    }
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem de saída)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
