"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- discord/: registro de comandos (descritor → JSON da API)
"""

__all__: list[str] = []
