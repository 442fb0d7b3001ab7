"""Conector da API PJ do Banco Inter (mTLS + OAuth2 client credentials)."""

from api.connectors.inter.auth import TOKEN_EXPIRY_MARGIN_SECONDS, AccessToken
from api.connectors.inter.client import InterClient, build_ssl_context
from api.connectors.inter.errors import extract_error_message

__all__ = [
    "TOKEN_EXPIRY_MARGIN_SECONDS",
    "AccessToken",
    "InterClient",
    "build_ssl_context",
    "extract_error_message",
]
