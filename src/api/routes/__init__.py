"""Rotas HTTP da API: adapters de entrada por canal.

Responsabilidades:
- Definir endpoints HTTP (interações, health)
- Validação inicial de request (headers de assinatura)
- Delegação para connectors e para o dispatcher de interações
- Respostas HTTP apropriadas (200/400/401)

Estrutura:
- routes/discord/: webhook de interações
- routes/health/: liveness e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
