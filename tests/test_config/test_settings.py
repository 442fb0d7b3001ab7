"""Testes para config.settings (Inter e servidor MCP)."""

from __future__ import annotations

import os

import pytest

from config.settings import (
    INTER_DEFAULT_SCOPE,
    INTER_PRODUCTION_BASE_URL,
    INTER_SANDBOX_BASE_URL,
    InterSettings,
    McpServerSettings,
    get_inter_settings,
    get_server_settings,
)
from config.settings.inter import _load_from_env as load_inter_from_env
from config.settings.server import _load_from_env as load_server_from_env

_INTER_VARS = (
    "CLIENT_ID",
    "CLIENT_SECRET",
    "INTER_CLIENT_ID",
    "INTER_CLIENT_SECRET",
    "CERT_PATH",
    "KEY_PATH",
    "X_CONTA_CORRENTE",
    "INTER_IS_SANDBOX",
    "INTER_VERIFY_SSL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for var in _INTER_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def _valid_settings(**overrides: object) -> InterSettings:
    values: dict[str, object] = {
        "client_id": "id",
        "client_secret": "secret",
        "cert_path": "/certs/inter.crt",
        "key_path": "/certs/inter.key",
    }
    values.update(overrides)
    return InterSettings(**values)  # type: ignore[arg-type]


class TestInterSettings:
    """Validação e derivação de URL."""

    def test_valid_settings_have_no_errors(self) -> None:
        assert _valid_settings().validate() == []

    @pytest.mark.parametrize(
        ("field", "variable"),
        [
            ("client_id", "CLIENT_ID"),
            ("client_secret", "CLIENT_SECRET"),
            ("cert_path", "CERT_PATH"),
            ("key_path", "KEY_PATH"),
        ],
    )
    def test_each_mandatory_field_is_reported(self, field: str, variable: str) -> None:
        errors = _valid_settings(**{field: ""}).validate()
        assert errors == [f"{variable} não configurado"]

    def test_non_positive_timeout_is_reported(self) -> None:
        errors = _valid_settings(request_timeout_seconds=0).validate()
        assert any("INTER_REQUEST_TIMEOUT_SECONDS" in error for error in errors)

    def test_base_url_switches_on_sandbox(self) -> None:
        assert _valid_settings().base_url == INTER_PRODUCTION_BASE_URL
        assert _valid_settings(is_sandbox=True).base_url == INTER_SANDBOX_BASE_URL

    def test_settings_are_immutable(self) -> None:
        settings = _valid_settings()
        with pytest.raises(AttributeError):
            settings.client_id = "other"  # type: ignore[misc]


class TestInterSettingsFromEnv:
    """Leitura das variáveis de ambiente."""

    def test_loads_all_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CLIENT_ID", "abc")
        clean_env.setenv("CLIENT_SECRET", "xyz")
        clean_env.setenv("CERT_PATH", "certs/inter.crt")
        clean_env.setenv("KEY_PATH", "certs/inter.key")
        clean_env.setenv("X_CONTA_CORRENTE", "12345678")
        clean_env.setenv("INTER_IS_SANDBOX", "true")

        settings = load_inter_from_env()

        assert settings.client_id == "abc"
        assert settings.client_secret == "xyz"
        assert settings.cert_path == os.path.abspath("certs/inter.crt")
        assert settings.key_path == os.path.abspath("certs/inter.key")
        assert settings.conta_corrente == "12345678"
        assert settings.is_sandbox is True
        assert settings.verify_ssl is False
        assert settings.oauth_scope == INTER_DEFAULT_SCOPE

    def test_accepts_inter_prefixed_credentials(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("INTER_CLIENT_ID", "prefixed-id")
        clean_env.setenv("INTER_CLIENT_SECRET", "prefixed-secret")

        settings = load_inter_from_env()

        assert settings.client_id == "prefixed-id"
        assert settings.client_secret == "prefixed-secret"

    def test_missing_variables_yield_all_errors(self, clean_env: pytest.MonkeyPatch) -> None:
        errors = load_inter_from_env().validate()
        assert len(errors) == 4

    def test_blank_account_is_none(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("X_CONTA_CORRENTE", "   ")
        assert load_inter_from_env().conta_corrente is None

    def test_non_numeric_timeout_is_reported(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("INTER_REQUEST_TIMEOUT_SECONDS", "trinta")

        settings = load_inter_from_env()

        assert settings.request_timeout_seconds == 0.0
        assert "INTER_REQUEST_TIMEOUT_SECONDS deve ser > 0" in settings.validate()

    def test_getter_is_cached(self) -> None:
        assert get_inter_settings() is get_inter_settings()


class TestMcpServerSettings:
    """Transporte, porta e storage."""

    def test_defaults_are_valid(self) -> None:
        settings = McpServerSettings()
        assert settings.validate() == []
        assert settings.is_http is False

    def test_invalid_transport(self) -> None:
        errors = McpServerSettings(transport="websocket").validate()
        assert any("Transporte inválido: websocket" in error for error in errors)

    def test_sse_is_accepted_as_http_alias(self) -> None:
        settings = McpServerSettings(transport="sse")
        assert settings.validate() == []
        assert settings.is_http is True
        assert settings.resolved_transport == "streamable-http"

    def test_sse_from_env_starts_http_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_TRANSPORT", "SSE")
        monkeypatch.delenv("MCP_PORT", raising=False)

        settings = load_server_from_env()

        assert settings.validate() == []
        assert settings.is_http is True

    def test_invalid_port(self) -> None:
        errors = McpServerSettings(port=70000).validate()
        assert errors == ["MCP_PORT deve estar entre 1 e 65535"]

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_TRANSPORT", "Streamable-HTTP")
        monkeypatch.setenv("MCP_PORT", "8081")
        monkeypatch.setenv("STORAGE_PATH", "pdfs")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_server_from_env()

        assert settings.is_http is True
        assert settings.port == 8081
        assert settings.storage_path == os.path.abspath("pdfs")
        assert settings.log_level == "DEBUG"

    def test_non_numeric_port_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_PORT", "abc")
        assert load_server_from_env().validate() == ["MCP_PORT deve estar entre 1 e 65535"]

    def test_getter_is_cached(self) -> None:
        assert get_server_settings() is get_server_settings()
