"""Settings de integração com a API PJ do Banco Inter.

Credenciais OAuth2 (client credentials) e certificado mTLS. CLIENT_ID,
CLIENT_SECRET, CERT_PATH e KEY_PATH são obrigatórias; validate() reporta
cada ausência para que o bootstrap falhe antes de construir o cliente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

INTER_PRODUCTION_BASE_URL: str = "https://cdpj.partners.bancointer.com.br"
INTER_SANDBOX_BASE_URL: str = "https://cdpj-sandbox.partners.uatinter.co"
INTER_DEFAULT_SCOPE: str = (
    "boleto-cobranca.read boleto-cobranca.write extrato.read saldo.read"
)


@dataclass(frozen=True)
class InterSettings:
    """Configurações de conexão com o Banco Inter.

    Attributes:
        client_id: Client ID da aplicação no Internet Banking PJ
        client_secret: Client secret da aplicação
        cert_path: Caminho do certificado (.crt) usado no mTLS
        key_path: Caminho da chave privada (.key) do certificado
        conta_corrente: Conta enviada em x-conta-corrente (opcional)
        is_sandbox: Usa host de sandbox em vez de produção
        verify_ssl: Valida o certificado do servidor do Inter
        request_timeout_seconds: Timeout total por requisição HTTP
        oauth_scope: Escopos solicitados no token
    """

    # Credenciais
    client_id: str = ""
    client_secret: str = ""
    cert_path: str = ""
    key_path: str = ""
    conta_corrente: str | None = None

    # Ambiente
    is_sandbox: bool = False
    # Servidor do Inter não é verificado a menos que INTER_VERIFY_SSL=true.
    verify_ssl: bool = False

    # HTTP
    request_timeout_seconds: float = 30.0
    oauth_scope: str = INTER_DEFAULT_SCOPE

    @property
    def base_url(self) -> str:
        """Host da API conforme ambiente (sandbox ou produção)."""
        return INTER_SANDBOX_BASE_URL if self.is_sandbox else INTER_PRODUCTION_BASE_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Inter.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("CLIENT_ID não configurado")

        if not self.client_secret:
            errors.append("CLIENT_SECRET não configurado")

        if not self.cert_path:
            errors.append("CERT_PATH não configurado")

        if not self.key_path:
            errors.append("KEY_PATH não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("INTER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _read_optional_env(*keys: str) -> str | None:
    """Retorna o primeiro valor não vazio entre as chaves informadas."""
    for key in keys:
        raw_value = os.getenv(key)
        if raw_value and raw_value.strip():
            return raw_value.strip()
    return None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_timeout(value: str) -> float:
    # Valor não numérico vira 0 e é reportado por validate().
    try:
        return float(value)
    except ValueError:
        return 0.0


def _resolve_path(value: str | None) -> str:
    if not value:
        return ""
    return os.path.abspath(os.path.expanduser(value))


def _load_from_env() -> InterSettings:
    """Carrega InterSettings a partir de variáveis de ambiente."""
    return InterSettings(
        client_id=_read_optional_env("CLIENT_ID", "INTER_CLIENT_ID") or "",
        client_secret=_read_optional_env("CLIENT_SECRET", "INTER_CLIENT_SECRET") or "",
        cert_path=_resolve_path(_read_optional_env("CERT_PATH")),
        key_path=_resolve_path(_read_optional_env("KEY_PATH")),
        conta_corrente=_read_optional_env("X_CONTA_CORRENTE"),
        is_sandbox=_parse_bool(os.getenv("INTER_IS_SANDBOX", "false")),
        verify_ssl=_parse_bool(os.getenv("INTER_VERIFY_SSL", "false")),
        request_timeout_seconds=_parse_timeout(
            os.getenv("INTER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        oauth_scope=os.getenv("INTER_OAUTH_SCOPE", INTER_DEFAULT_SCOPE),
    )


@lru_cache(maxsize=1)
def get_inter_settings() -> InterSettings:
    """Retorna instância cacheada de InterSettings."""
    return _load_from_env()
