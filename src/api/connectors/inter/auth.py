"""Token OAuth2 do Inter e regras de expiração."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Renova o token 60s antes do vencimento informado pelo Inter.
TOKEN_EXPIRY_MARGIN_SECONDS: float = 60.0


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Bearer token com instante de expiração (relógio do cliente)."""

    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at

    @classmethod
    def from_response(cls, data: dict[str, Any], now: float) -> AccessToken:
        """Monta o token a partir do JSON do endpoint /oauth/v2/token.

        Raises:
            KeyError: Se access_token não estiver presente.
            ValueError: Se expires_in não for numérico.
        """
        expires_in = float(data.get("expires_in", 0))
        return cls(
            value=data["access_token"],
            expires_at=now + (expires_in - TOKEN_EXPIRY_MARGIN_SECONDS),
        )
