from .ocr import OcrError, OcrSpaceClient
from .pdf import PdfError, extract_pdf_pages, extract_pdf_text

__all__ = ["OcrError", "OcrSpaceClient", "PdfError", "extract_pdf_pages", "extract_pdf_text"]
