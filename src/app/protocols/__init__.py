"""Protocolos e contratos do core da aplicação."""

from .inter_client import InterClientProtocol

__all__ = [
    "InterClientProtocol",
]
