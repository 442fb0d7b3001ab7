"""API — camada de borda.

Subpastas:
- connectors/: clientes HTTP de APIs externas (Banco Inter)
- routes/: endpoints HTTP auxiliares (health)

NÃO PODE conter: dispatch de tools, transportes MCP, bootstrap.
"""
