"""Armazenamento local de PDFs baixados do Inter."""

from app.infra.storage.pdf_storage import PdfStorage

__all__ = ["PdfStorage"]
