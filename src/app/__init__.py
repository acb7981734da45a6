"""App: orquestração das interações e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: adapters de entrega sem HTTP síncrono (canal push)
- domain/: payloads de interação, envelopes e descritores de comando
- services/: dispatcher, corrida de acknowledgment, registro de comandos
- infra/: cliente HTTP base
- protocols/: contratos implementados pela camada api
- observability/: correlation id e métricas via log

Padrão: app decide e cronometra; api verifica e transporta.
"""
