# dhvani/sources/pdf.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz

logger = logging.getLogger(__name__)


class PdfError(RuntimeError):
    """Raised when a file cannot be opened as a PDF."""


def extract_pdf_pages(pdf_path: str | Path) -> List[str]:
    """
    Extract the text layer of a PDF, one string per page.

    :param pdf_path: Path to the PDF file.
    :returns: Page texts in document order (empty string for blank pages).
    :raises FileNotFoundError: If ``pdf_path`` does not exist.
    :raises PdfError: If the file is corrupt or not a PDF.
    """
    path = Path(pdf_path)
    if not path.is_file():
        raise FileNotFoundError(f"PDF not found: {path}")

    try:
        doc = fitz.open(path)
    except RuntimeError as exc:
        # pymupdf.FileDataError for corrupt or non-PDF files
        raise PdfError(f"Cannot open {path} as PDF: {exc}") from exc

    pages: List[str] = []
    with doc:
        for page in doc:
            txt = page.get_text("text")
            pages.append(txt if txt is not None else "")

    logger.debug("Extracted %d page(s) from %s", len(pages), path)
    return pages


def extract_pdf_text(pdf_path: str | Path, *, page_separator: str = "\n\n") -> str:
    """
    Extract the whole text layer of a PDF as a single string.

    Scanned PDFs without a text layer yield ``""``; send those to OCR instead.
    """
    return page_separator.join(extract_pdf_pages(pdf_path)).strip()
