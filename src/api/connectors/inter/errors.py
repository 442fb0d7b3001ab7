"""Helpers de parsing de erros da API do Inter.

O Inter responde erros como:
    {"title": "...", "detail": "...", "violacoes": [{"razao": "...",
     "propriedade": "...", "valor": "..."}]}
O OAuth usa o formato padrão {"error": "...", "error_description": "..."}.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

# Corpo bruto incluído na mensagem é truncado para não poluir o envelope.
MAX_BODY_CHARS = 500


def response_body(response: httpx.Response) -> Any:
    """Retorna o corpo como JSON quando possível, senão como texto."""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def extract_error_message(body: Any) -> str:
    """Extrai mensagem legível de um corpo de erro do Inter.

    Args:
        body: Corpo já decodificado (dict, lista ou texto).

    Returns:
        Mensagem do upstream ou string vazia quando não há conteúdo.
    """
    if isinstance(body, dict):
        parts: list[str] = []
        for key in ("title", "detail", "message", "error", "error_description"):
            value = body.get(key)
            if isinstance(value, str) and value and value not in parts:
                parts.append(value)

        violations = body.get("violacoes")
        if isinstance(violations, list):
            for violation in violations:
                if not isinstance(violation, dict):
                    continue
                field = violation.get("propriedade", "")
                reason = violation.get("razao", "")
                parts.append(f"{field}: {reason}" if field else str(reason))

        if parts:
            return " - ".join(parts)
        return json.dumps(body, ensure_ascii=False)[:MAX_BODY_CHARS]

    if body is None:
        return ""
    text = str(body).strip()
    return text[:MAX_BODY_CHARS]


def describe_http_error(operation: str, status_code: int, body: Any) -> str:
    """Mensagem padrão para resposta não-2xx."""
    detail = extract_error_message(body)
    base = f"{operation} falhou com HTTP {status_code}"
    return f"{base}: {detail}" if detail else base
