from __future__ import annotations
import pathlib
import pytest


@pytest.fixture
def write_pdf(tmp_path):
    """Build a small PDF with one text line per page."""
    fitz = pytest.importorskip(
        "fitz",
        reason="PyMuPDF is required for PDF extraction tests. Install with: pip install pymupdf",
    )

    def _write(name: str, pages: list[str]) -> pathlib.Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path

    return _write
