"""Definições estáticas das tools expostas via MCP.

A lista é montada uma vez na importação e devolvida sem alteração em todo
list_tools. Os schemas descrevem os mesmos campos dos requests tipados em
app.tools.requests.
"""

from __future__ import annotations

from typing import Any

from mcp import types

from app.tools.requests import SEU_NUMERO_MAX_LEN, VALOR_NOMINAL_MINIMO

_DATE = {"type": "string", "description": "YYYY-MM-DD"}

_SITUACOES = ["RECEBIDO", "A_RECEBER", "ATRASADO", "CANCELADO"]
_FILTROS_DATA = ["VENCIMENTO", "EMISSAO", "PAGAMENTO"]


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


_PERIODO = _object(
    {"dataInicial": _DATE, "dataFinal": _DATE},
    ["dataInicial", "dataFinal"],
)

_CODIGO = {"type": "string", "description": "Código de solicitação da cobrança"}

_PAGADOR = _object(
    {
        "cpfCnpj": {"type": "string"},
        "tipoPessoa": {"type": "string", "enum": ["FISICA", "JURIDICA"]},
        "nome": {"type": "string"},
        "endereco": {"type": "string"},
        "numero": {"type": "string"},
        "complemento": {"type": "string"},
        "bairro": {"type": "string"},
        "cidade": {"type": "string"},
        "uf": {"type": "string", "minLength": 2, "maxLength": 2},
        "cep": {"type": "string"},
        "email": {"type": "string"},
        "ddd": {"type": "string"},
        "telefone": {"type": "string"},
    },
    ["cpfCnpj", "tipoPessoa", "nome", "endereco", "bairro", "cidade", "uf", "cep"],
)

_DESCONTO = _object(
    {
        "codigo": {
            "type": "string",
            "description": "Ex.: PERCENTUALDATAINFORMADA, VALORFIXODATAINFORMADA",
        },
        "taxa": {"type": "number", "minimum": 0},
        "valor": {"type": "number", "minimum": 0},
        "quantidadeDias": {"type": "integer", "minimum": 0},
    },
    ["codigo"],
)

_MULTA = _object(
    {
        "codigo": {"type": "string", "enum": ["NAOTEMMULTA", "VALORFIXO", "PERCENTUAL"]},
        "taxa": {"type": "number", "minimum": 0},
        "valor": {"type": "number", "minimum": 0},
    },
    ["codigo"],
)

_MORA = _object(
    {
        "codigo": {
            "type": "string",
            "enum": ["ISENTO", "VALORDIA", "TAXAMENSAL", "CONTROLEDOBANCO"],
        },
        "taxa": {"type": "number", "minimum": 0},
        "valor": {"type": "number", "minimum": 0},
    },
    ["codigo"],
)

_MENSAGEM = _object(
    {f"linha{i}": {"type": "string", "maxLength": 78} for i in range(1, 6)},
)


TOOL_DEFINITIONS: tuple[types.Tool, ...] = (
    types.Tool(
        name="consultar_saldo",
        description="Consulta o saldo da conta corrente.",
        inputSchema=_object({}),
    ),
    types.Tool(
        name="consultar_extrato",
        description="Consulta o extrato da conta em um período.",
        inputSchema=_PERIODO,
    ),
    types.Tool(
        name="listar_boletos",
        description="Lista as cobranças (boletos) emitidas.",
        inputSchema=_object(
            {
                "dataInicial": {
                    "type": "string",
                    "description": "Data de vencimento inicial YYYY-MM-DD",
                },
                "dataFinal": {
                    "type": "string",
                    "description": "Data de vencimento final YYYY-MM-DD",
                },
                "situacao": {"type": "string", "enum": _SITUACOES},
                "filtrarDataPor": {"type": "string", "enum": _FILTROS_DATA},
                "itensPorPagina": {"type": "integer", "minimum": 1, "maximum": 1000},
                "paginaAtual": {"type": "integer", "minimum": 0},
                "ordenarPor": {
                    "type": "string",
                    "enum": [
                        "PAGADOR",
                        "NOSSONUMERO",
                        "SEUNUMERO",
                        "DATASITUACAO",
                        "DATAVENCIMENTO",
                        "VALOR",
                        "STATUS",
                    ],
                },
                "tipoOrdenacao": {"type": "string", "enum": ["ASC", "DESC"]},
            },
            ["dataInicial", "dataFinal"],
        ),
    ),
    types.Tool(
        name="emitir_boleto",
        description="Emite um novo boleto de cobrança.",
        inputSchema=_object(
            {
                "seuNumero": {"type": "string", "maxLength": SEU_NUMERO_MAX_LEN},
                "valorNominal": {"type": "number", "minimum": VALOR_NOMINAL_MINIMO},
                "dataVencimento": _DATE,
                "numDiasAgenda": {"type": "integer", "minimum": 0, "maximum": 60},
                "pagador": _PAGADOR,
                "desconto": _DESCONTO,
                "multa": _MULTA,
                "mora": _MORA,
                "mensagem": _MENSAGEM,
            },
            ["seuNumero", "valorNominal", "dataVencimento", "pagador"],
        ),
    ),
    types.Tool(
        name="consultar_boleto",
        description="Consulta os detalhes de um boleto pelo código de solicitação.",
        inputSchema=_object({"codigoSolicitacao": _CODIGO}, ["codigoSolicitacao"]),
    ),
    types.Tool(
        name="baixar_pdf_boleto",
        description="Gera e salva o PDF de um boleto pelo código de solicitação.",
        inputSchema=_object({"codigoSolicitacao": _CODIGO}, ["codigoSolicitacao"]),
    ),
    types.Tool(
        name="cancelar_boleto",
        description="Cancela um boleto de cobrança.",
        inputSchema=_object(
            {
                "codigoSolicitacao": _CODIGO,
                "motivo": {"type": "string", "maxLength": 50},
            },
            ["codigoSolicitacao", "motivo"],
        ),
    ),
    types.Tool(
        name="editar_boleto",
        description="Altera valor, vencimento, desconto, multa ou mora de um boleto.",
        inputSchema=_object(
            {
                "codigoSolicitacao": _CODIGO,
                "valorNominal": {"type": "number", "minimum": VALOR_NOMINAL_MINIMO},
                "dataVencimento": _DATE,
                "desconto": _DESCONTO,
                "multa": _MULTA,
                "mora": _MORA,
            },
            ["codigoSolicitacao"],
        ),
    ),
    types.Tool(
        name="sumario_boletos",
        description="Recupera o sumário de cobranças por período.",
        inputSchema=_object(
            {
                "dataInicial": _DATE,
                "dataFinal": _DATE,
                "filtrarDataPor": {"type": "string", "enum": _FILTROS_DATA},
            },
            ["dataInicial", "dataFinal"],
        ),
    ),
    types.Tool(
        name="baixar_pdf_extrato",
        description="Gera e salva o PDF do extrato em um período.",
        inputSchema=_PERIODO,
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(tool.name for tool in TOOL_DEFINITIONS)
