"""Testes para api.connectors.inter.errors e AccessToken."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.inter import AccessToken, extract_error_message
from api.connectors.inter.errors import MAX_BODY_CHARS, describe_http_error, response_body


class TestExtractErrorMessage:
    """Mensagens legíveis a partir de corpos de erro do Inter."""

    def test_title_and_detail(self) -> None:
        body = {"title": "Requisição inválida", "detail": "Data fora do intervalo"}
        assert extract_error_message(body) == "Requisição inválida - Data fora do intervalo"

    def test_violacoes_are_listed(self) -> None:
        body = {
            "title": "Bad Request",
            "violacoes": [
                {"razao": "deve ser maior que 2.5", "propriedade": "valorNominal", "valor": "1"},
                {"razao": "obrigatório"},
            ],
        }
        message = extract_error_message(body)
        assert "valorNominal: deve ser maior que 2.5" in message
        assert message.endswith("obrigatório")

    def test_oauth_error_format(self) -> None:
        body = {"error": "invalid_client", "error_description": "Client inválido"}
        assert extract_error_message(body) == "invalid_client - Client inválido"

    def test_unknown_dict_is_dumped(self) -> None:
        assert extract_error_message({"codigo": 42}) == '{"codigo": 42}'

    def test_text_body_is_truncated(self) -> None:
        message = extract_error_message("x" * (MAX_BODY_CHARS + 100))
        assert len(message) == MAX_BODY_CHARS

    def test_none_is_empty(self) -> None:
        assert extract_error_message(None) == ""


class TestDescribeHttpError:
    """Formato padrão "<operação> falhou com HTTP <status>"."""

    def test_with_detail(self) -> None:
        message = describe_http_error("Consulta de saldo", 500, {"title": "Erro interno"})
        assert message == "Consulta de saldo falhou com HTTP 500: Erro interno"

    def test_without_detail(self) -> None:
        assert describe_http_error("Consulta de saldo", 502, "") == (
            "Consulta de saldo falhou com HTTP 502"
        )


class TestResponseBody:
    """Decodificação tolerante do corpo."""

    def test_json_body(self) -> None:
        response = httpx.Response(400, json={"title": "x"})
        assert response_body(response) == {"title": "x"}

    def test_text_body(self) -> None:
        response = httpx.Response(502, text="Bad Gateway")
        assert response_body(response) == "Bad Gateway"


class TestAccessToken:
    """Expiração com margem de 60s."""

    def test_from_response_applies_margin(self) -> None:
        token = AccessToken.from_response({"access_token": "abc", "expires_in": 3600}, now=100.0)
        assert token.value == "abc"
        assert token.expires_at == 100.0 + 3540

    def test_is_valid_boundary(self) -> None:
        token = AccessToken(value="abc", expires_at=200.0)
        assert token.is_valid(199.9)
        assert not token.is_valid(200.0)

    def test_missing_access_token_raises(self) -> None:
        with pytest.raises(KeyError):
            AccessToken.from_response({"expires_in": 3600}, now=0.0)
