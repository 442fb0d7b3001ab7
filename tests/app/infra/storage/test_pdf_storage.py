"""Testes para app.infra.storage.PdfStorage."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from app.infra.storage import PdfStorage
from utils.errors import StorageError

PDF_BYTES = b"%PDF-1.4\n%boleto\n"


class TestPdfStorageInit:
    """Criação do diretório raiz."""

    def test_creates_nested_directory(self, tmp_path: Path) -> None:
        root = tmp_path / "a" / "b" / "storage"
        storage = PdfStorage(root)
        assert root.is_dir()
        assert storage.root == root

    def test_existing_directory_is_accepted(self, tmp_path: Path) -> None:
        PdfStorage(tmp_path)
        PdfStorage(tmp_path)
        assert tmp_path.is_dir()

    def test_root_is_a_file_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "arquivo"
        blocker.write_text("x")
        with pytest.raises(StorageError, match="Não foi possível criar"):
            PdfStorage(blocker / "storage")


class TestPdfStoragePaths:
    """Nomes de arquivo determinísticos."""

    def test_boleto_path(self, tmp_path: Path) -> None:
        assert PdfStorage(tmp_path).boleto_path("abc-123") == tmp_path / "boleto_abc-123.pdf"

    def test_extrato_path(self, tmp_path: Path) -> None:
        path = PdfStorage(tmp_path).extrato_path("2024-01-01", "2024-01-31")
        assert path == tmp_path / "extrato_2024-01-01_2024-01-31.pdf"

    @pytest.mark.parametrize("codigo", ["", ".", "..", "../etc/passwd", "a\\b", "a\x00b"])
    def test_unsafe_identifiers_are_rejected(self, tmp_path: Path, codigo: str) -> None:
        with pytest.raises(StorageError, match="inválido para nome de arquivo"):
            PdfStorage(tmp_path).boleto_path(codigo)


class TestPdfStorageSave:
    """Gravação de boletos e extratos."""

    @pytest.mark.asyncio
    async def test_save_boleto_decodes_base64(self, tmp_path: Path) -> None:
        storage = PdfStorage(tmp_path)
        encoded = base64.b64encode(PDF_BYTES).decode()

        path = await storage.save_boleto("abc", encoded)

        assert path == tmp_path / "boleto_abc.pdf"
        assert path.read_bytes() == PDF_BYTES

    @pytest.mark.asyncio
    async def test_save_boleto_overwrites_previous_file(self, tmp_path: Path) -> None:
        storage = PdfStorage(tmp_path)
        await storage.save_boleto("abc", base64.b64encode(b"old").decode())

        path = await storage.save_boleto("abc", base64.b64encode(PDF_BYTES).decode())

        assert path.read_bytes() == PDF_BYTES

    @pytest.mark.asyncio
    async def test_save_boleto_accepts_line_wrapped_base64(self, tmp_path: Path) -> None:
        storage = PdfStorage(tmp_path)
        pdf = PDF_BYTES * 20
        encoded = base64.encodebytes(pdf).decode()
        assert "\n" in encoded

        path = await storage.save_boleto("abc", encoded)

        assert path.read_bytes() == pdf

    @pytest.mark.asyncio
    async def test_save_boleto_invalid_base64_raises(self, tmp_path: Path) -> None:
        storage = PdfStorage(tmp_path)

        with pytest.raises(StorageError, match="base64 inválido"):
            await storage.save_boleto("abc", "não é base64!")

        assert not (tmp_path / "boleto_abc.pdf").exists()

    @pytest.mark.asyncio
    async def test_save_extrato_writes_raw_bytes(self, tmp_path: Path) -> None:
        storage = PdfStorage(tmp_path)

        path = await storage.save_extrato("2024-01-01", "2024-01-31", PDF_BYTES)

        assert path.name == "extrato_2024-01-01_2024-01-31.pdf"
        assert path.read_bytes() == PDF_BYTES
