"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- discord/: API de interações e registro de comandos

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
