"""Requests tipados por tool.

Cada tool tem um modelo com campos obrigatórios/opcionais explícitos,
validado antes do dispatch. Os nomes de campo seguem o contrato da API do
Inter (camelCase) via alias; o acesso em Python é snake_case.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

SituacaoCobranca = Literal["RECEBIDO", "A_RECEBER", "ATRASADO", "CANCELADO"]
FiltroData = Literal["VENCIMENTO", "EMISSAO", "PAGAMENTO"]
OrdenacaoCobranca = Literal[
    "PAGADOR",
    "NOSSONUMERO",
    "SEUNUMERO",
    "DATASITUACAO",
    "DATAVENCIMENTO",
    "VALOR",
    "STATUS",
]
TipoOrdenacao = Literal["ASC", "DESC"]
TipoPessoa = Literal["FISICA", "JURIDICA"]
CodigoMulta = Literal["NAOTEMMULTA", "VALORFIXO", "PERCENTUAL"]
CodigoMora = Literal["ISENTO", "VALORDIA", "TAXAMENSAL", "CONTROLEDOBANCO"]

VALOR_NOMINAL_MINIMO = 2.5
SEU_NUMERO_MAX_LEN = 15


class _ToolRequest(BaseModel):
    """Base dos requests: aceita alias ou nome Python, ignora extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    def to_api(self) -> dict[str, Any]:
        """Serializa no formato da API do Inter (alias, sem None)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ──────────────────────────────────────────────────────────────────────────────
# Blocos reutilizáveis
# ──────────────────────────────────────────────────────────────────────────────


class Pagador(_ToolRequest):
    cpf_cnpj: str = Field(alias="cpfCnpj", min_length=1)
    tipo_pessoa: TipoPessoa = Field(alias="tipoPessoa")
    nome: str = Field(min_length=1)
    endereco: str = Field(min_length=1)
    bairro: str = Field(min_length=1)
    cidade: str = Field(min_length=1)
    uf: str = Field(min_length=2, max_length=2)
    cep: str = Field(min_length=1)
    numero: str | None = None
    complemento: str | None = None
    email: str | None = None
    ddd: str | None = None
    telefone: str | None = None


class Desconto(_ToolRequest):
    codigo: str
    taxa: float | None = Field(default=None, ge=0)
    valor: float | None = Field(default=None, ge=0)
    quantidade_dias: int | None = Field(default=None, alias="quantidadeDias", ge=0)


class Multa(_ToolRequest):
    codigo: CodigoMulta
    taxa: float | None = Field(default=None, ge=0)
    valor: float | None = Field(default=None, ge=0)


class Mora(_ToolRequest):
    codigo: CodigoMora
    taxa: float | None = Field(default=None, ge=0)
    valor: float | None = Field(default=None, ge=0)


class Mensagem(_ToolRequest):
    linha1: str | None = Field(default=None, max_length=78)
    linha2: str | None = Field(default=None, max_length=78)
    linha3: str | None = Field(default=None, max_length=78)
    linha4: str | None = Field(default=None, max_length=78)
    linha5: str | None = Field(default=None, max_length=78)


# ──────────────────────────────────────────────────────────────────────────────
# Requests por tool
# ──────────────────────────────────────────────────────────────────────────────


class ConsultarSaldoRequest(_ToolRequest):
    """consultar_saldo não recebe argumentos."""


class PeriodoRequest(_ToolRequest):
    """Intervalo inclusivo YYYY-MM-DD (validado pelo Inter, não aqui)."""

    data_inicial: str = Field(alias="dataInicial", min_length=1)
    data_final: str = Field(alias="dataFinal", min_length=1)


class ConsultarExtratoRequest(PeriodoRequest):
    pass


class BaixarPdfExtratoRequest(PeriodoRequest):
    pass


class ListarBoletosRequest(PeriodoRequest):
    situacao: SituacaoCobranca | None = None
    filtrar_data_por: FiltroData | None = Field(default=None, alias="filtrarDataPor")
    itens_por_pagina: int | None = Field(default=None, alias="itensPorPagina", ge=1, le=1000)
    pagina_atual: int | None = Field(default=None, alias="paginaAtual", ge=0)
    ordenar_por: OrdenacaoCobranca | None = Field(default=None, alias="ordenarPor")
    tipo_ordenacao: TipoOrdenacao | None = Field(default=None, alias="tipoOrdenacao")

    def to_query(self) -> dict[str, Any]:
        """Query string do GET /cobrancas; datas passam sem alteração."""
        query: dict[str, Any] = {
            "dataInicial": self.data_inicial,
            "dataFinal": self.data_final,
            "situacao": self.situacao,
            "filtrarDataPor": self.filtrar_data_por,
            "paginacao.itensPorPagina": self.itens_por_pagina,
            "paginacao.paginaAtual": self.pagina_atual,
            "ordenarPor": self.ordenar_por,
            "tipoOrdenacao": self.tipo_ordenacao,
        }
        return {key: value for key, value in query.items() if value is not None}


class SumarioBoletosRequest(PeriodoRequest):
    filtrar_data_por: FiltroData | None = Field(default=None, alias="filtrarDataPor")

    def to_query(self) -> dict[str, Any]:
        return self.to_api()


class EmitirBoletoRequest(_ToolRequest):
    seu_numero: str = Field(alias="seuNumero", min_length=1, max_length=SEU_NUMERO_MAX_LEN)
    valor_nominal: float = Field(alias="valorNominal", ge=VALOR_NOMINAL_MINIMO)
    data_vencimento: str = Field(alias="dataVencimento", min_length=1)
    num_dias_agenda: int = Field(default=0, alias="numDiasAgenda", ge=0, le=60)
    pagador: Pagador
    desconto: Desconto | None = None
    multa: Multa | None = None
    mora: Mora | None = None
    mensagem: Mensagem | None = None


class CodigoSolicitacaoRequest(_ToolRequest):
    codigo_solicitacao: str = Field(alias="codigoSolicitacao", min_length=1)


class ConsultarBoletoRequest(CodigoSolicitacaoRequest):
    pass


class BaixarPdfBoletoRequest(CodigoSolicitacaoRequest):
    pass


class CancelarBoletoRequest(CodigoSolicitacaoRequest):
    motivo: str = Field(min_length=1, max_length=50)


class EditarBoletoRequest(CodigoSolicitacaoRequest):
    valor_nominal: float | None = Field(
        default=None,
        alias="valorNominal",
        ge=VALOR_NOMINAL_MINIMO,
    )
    data_vencimento: str | None = Field(default=None, alias="dataVencimento")
    desconto: Desconto | None = None
    multa: Multa | None = None
    mora: Mora | None = None

    @model_validator(mode="after")
    def _require_change(self) -> EditarBoletoRequest:
        if not self.changes():
            raise ValueError("informe ao menos um campo para alterar")
        return self

    def changes(self) -> dict[str, Any]:
        """Payload do PATCH (sem o código da cobrança)."""
        payload = self.to_api()
        payload.pop("codigoSolicitacao", None)
        return payload


def format_validation_error(exc: ValidationError) -> str:
    """Resume erros de validação em uma linha legível.

    Exemplo: "dataInicial: Field required; pagador.uf: String should have..."
    """
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "valor inválido")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)
