"""Connectors — adapters de borda para APIs externas.

Estrutura:
- inter/: API PJ do Banco Inter (banking + cobrança)
"""

__all__: list[str] = []
