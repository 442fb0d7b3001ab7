"""App — orquestração, tools e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- tools/: definições, requests tipados e dispatcher das tools
- transports/: binding MCP (stdio e streamable HTTP com sessões)
- infra/: implementações concretas de IO (storage de PDFs)
- protocols/: contratos/interfaces
- observability/: contexto de logs (correlation_id, session_id)

Padrão: app executa; api adapta; config configura; utils apoia.
"""
