"""Testes para config.logging.

Cobre: configure_logging (stderr, níveis, loggers ruidosos), log_tool_call,
CorrelationIdFilter com session_id, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
import sys
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_tool_call,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_writes_to_stderr_by_default(self) -> None:
        """stdout é reservado ao protocolo MCP no modo stdio."""
        configure_logging()
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_handler_has_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_httpx_loggers_are_quieted_in_debug(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "mcp_banco_inter"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("api.connectors.inter.client")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "api.connectors.inter.client"


class TestLogToolCall:
    """Testes para log_tool_call."""

    def test_success_logs_info(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_tool_call(logger, "consultar_saldo", "ok", elapsed_ms=12.345)
        level, template, result = logger.log.call_args[0]
        extra = logger.log.call_args[1]["extra"]
        assert level == logging.INFO
        assert template == "tool_call_%s"
        assert result == "ok"
        assert extra["tool"] == "consultar_saldo"
        assert extra["elapsed_ms"] == 12.35
        assert "error_type" not in extra

    def test_error_logs_warning_with_error_type(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_tool_call(logger, "emitir_boleto", "error", error_type="RemoteApiError")
        level = logger.log.call_args[0][0]
        extra = logger.log.call_args[1]["extra"]
        assert level == logging.WARNING
        assert extra["error_type"] == "RemoteApiError"
        assert "elapsed_ms" not in extra


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_ids_from_getters(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "corr-123", lambda: "sess-9")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.session_id == "sess-9"
        assert record.service == "svc"

    def test_filter_preserves_explicit_values(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        record.session_id = "explicit-session"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"
        assert record.session_id == "explicit-session"

    def test_filter_defaults_to_empty_strings(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""
        assert record.session_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "session_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_renamed_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("inter_token_refreshed")
        record.correlation_id = "abc-123"
        record.session_id = ""
        record.service = "mcp_banco_inter"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "inter_token_refreshed"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "mcp_banco_inter"


class TestLoggingIntegration:
    """Fluxo completo: configure, log, JSON no stream."""

    def test_full_logging_flow(self) -> None:
        stream = io.StringIO()
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
            stream=stream,
        )
        get_logger("integration.test").info("pdf_saved", extra={"size_bytes": 10})

        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "pdf_saved"
        assert payload["correlation_id"] == "int-test-001"
        assert payload["service"] == "integration_test"
        assert payload["size_bytes"] == 10
