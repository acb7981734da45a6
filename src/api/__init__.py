"""API: camada de borda do canal de interações.

Responsabilidades:
- Receber interações HTTP assinadas
- Verificar a assinatura Ed25519 antes de qualquer parse
- Construir payloads para a API REST (registro de comandos)
- Chamar a API REST (callbacks, follow-up, comandos)

Subpastas:
- connectors/: verificação de assinatura e cliente da API por canal
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: a corrida de acknowledgment nem roteamento por tipo.
"""
