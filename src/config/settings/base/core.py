"""Settings base do serviço de interações.

Ambiente, nome do serviço e nível de log. O ambiente decide se uma
configuração inválida aborta o boot (staging/production) ou só gera
alerta (development).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

STRICT_ENVIRONMENTS: frozenset[str] = frozenset({"staging", "production"})

# Apelidos aceitos em ENVIRONMENT; qualquer outro valor cai em development
_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class BaseSettings:
    """Settings comuns a todos os componentes.

    Attributes:
        environment: development | staging | production
        service_name: Valor do campo `service` nos logs
        log_level: Nível do logger raiz
        debug: Liga detalhes extras de diagnóstico
    """

    environment: Environment = "development"
    service_name: str = "pyloto_interactions"
    log_level: str = "INFO"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Configuração inválida impede o startup neste ambiente."""
        return self.environment in STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        """Retorna a lista de problemas encontrados (vazia = OK)."""
        problems: list[str] = []
        if self.environment not in ("development", *STRICT_ENVIRONMENTS):
            problems.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            problems.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in _LOG_LEVELS:
            problems.append(f"LOG_LEVEL inválido: {self.log_level}")
        return problems


def _parse_environment(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "")),
        service_name=os.getenv("SERVICE_NAME", "pyloto_interactions"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("DEBUG", "").strip().lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lida do ambiente uma única vez por processo."""
    return _load_base_from_env()
