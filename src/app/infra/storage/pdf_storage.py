"""Gravação de PDFs (boletos e extratos) no diretório de storage.

Nomes de arquivo são determinísticos:
- boleto_<codigoSolicitacao>.pdf
- extrato_<dataInicial>_<dataFinal>.pdf
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from pathlib import Path

from utils.errors import StorageError

logger = logging.getLogger(__name__)

_COMPONENT = "pdf_storage"

# Identificadores viram parte do nome do arquivo; nada de separadores.
_FORBIDDEN_PARTS = ("/", "\\", "\x00")


def _safe_part(value: str, label: str) -> str:
    if not value or value in {".", ".."} or any(ch in value for ch in _FORBIDDEN_PARTS):
        raise StorageError(f"{label} inválido para nome de arquivo: {value!r}")
    return value


class PdfStorage:
    """Grava PDFs dentro de um diretório raiz.

    O diretório (com pais) é criado uma única vez, na construção.

    Raises:
        StorageError: Se o diretório não puder ser criado.
    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Não foi possível criar {self._root}: {exc}") from exc

    @property
    def root(self) -> Path:
        return self._root

    def boleto_path(self, codigo_solicitacao: str) -> Path:
        codigo = _safe_part(codigo_solicitacao, "codigoSolicitacao")
        return self._root / f"boleto_{codigo}.pdf"

    def extrato_path(self, data_inicial: str, data_final: str) -> Path:
        inicio = _safe_part(data_inicial, "dataInicial")
        fim = _safe_part(data_final, "dataFinal")
        return self._root / f"extrato_{inicio}_{fim}.pdf"

    async def save_boleto(self, codigo_solicitacao: str, pdf_base64: str) -> Path:
        """Decodifica o PDF em base64 e grava boleto_<codigo>.pdf.

        Quebras de linha e espaços no base64 são ignorados.
        """
        path = self.boleto_path(codigo_solicitacao)
        try:
            content = base64.b64decode("".join(pdf_base64.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise StorageError(f"PDF do boleto em base64 inválido: {exc}") from exc
        return await self._write(path, content)

    async def save_extrato(self, data_inicial: str, data_final: str, content: bytes) -> Path:
        path = self.extrato_path(data_inicial, data_final)
        return await self._write(path, content)

    async def _write(self, path: Path, content: bytes) -> Path:
        try:
            await asyncio.to_thread(path.write_bytes, content)
        except OSError as exc:
            logger.error(
                "pdf_write_failed",
                extra={"component": _COMPONENT, "file": path.name, "error_type": type(exc).__name__},
            )
            raise StorageError(f"Falha ao gravar {path}: {exc}") from exc

        logger.info(
            "pdf_saved",
            extra={"component": _COMPONENT, "file": path.name, "size_bytes": len(content)},
        )
        return path
