# dhvani/sources/ocr.py
from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import Any, Dict

import requests

logger = logging.getLogger(__name__)

OCR_ENDPOINT = "https://api.ocr.space/parse/image"
API_KEY_ENV = "OCR_SPACE_API_KEY"


class OcrError(RuntimeError):
    """Raised when the OCR service cannot return text for a file."""


def _content_type(path: Path) -> str:
    if path.suffix.lower() == ".pdf":
        return "application/pdf"
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "image/jpeg"


def _error_message(payload: Dict[str, Any]) -> str:
    msg = payload.get("ErrorMessage") or payload.get("ErrorDetails") or "OCR processing failed."
    if isinstance(msg, list):
        msg = " ".join(str(m) for m in msg)
    return str(msg)


class OcrSpaceClient:
    """
    Minimal client for the OCR.Space ``parse/image`` endpoint.

    Accepts images and PDFs; all pages' recognized text is joined with
    newlines.

    :param api_key: OCR.Space key; defaults to ``$OCR_SPACE_API_KEY``.
    :param endpoint: Service URL.
    :param language: OCR language code (``eng``, ``hin``...).
    :param engine: OCR.Space engine number (1, 2 or 3).
    :param timeout: Request timeout in seconds.
    :param session: Optional ``requests.Session`` to reuse connections.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        endpoint: str = OCR_ENDPOINT,
        language: str = "eng",
        engine: int = 2,
        timeout: float = 60.0,
        session: requests.Session | None = None,
    ) -> None:
        api_key = api_key or os.environ.get(API_KEY_ENV)
        if not api_key:
            raise OcrError(f"No OCR.Space API key given and {API_KEY_ENV} is not set.")
        self.api_key = api_key
        self.endpoint = endpoint
        self.language = language
        self.engine = engine
        self.timeout = timeout
        self.session = session or requests.Session()

    def _form(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "language": self.language,
            "isOverlayRequired": "false",
            "isTable": "false",
            "scale": "true",
            "OCREngine": str(self.engine),
        }

    def extract_text(self, file_path: str | Path) -> str:
        """
        Upload ``file_path`` and return the recognized plain text.

        :raises FileNotFoundError: If the file does not exist.
        :raises OcrError: On transport errors, non-2xx status, service-side
            processing errors, or an empty result.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        logger.info("Sending %s to OCR (%s, engine %s)", path.name, self.language, self.engine)
        try:
            with path.open("rb") as fh:
                res = self.session.post(
                    self.endpoint,
                    data=self._form(),
                    files={"file": (path.name, fh, _content_type(path))},
                    timeout=self.timeout,
                )
        except requests.RequestException as exc:
            raise OcrError(f"OCR request failed: {exc}") from exc

        if not res.ok:
            raise OcrError(f"OCR request failed ({res.status_code})")

        try:
            payload = res.json()
        except ValueError as exc:
            raise OcrError("OCR service returned invalid JSON.") from exc

        if not isinstance(payload, dict):
            raise OcrError("No OCR results found.")
        if payload.get("IsErroredOnProcessing"):
            raise OcrError(_error_message(payload))

        results = payload.get("ParsedResults") or []
        if not results:
            raise OcrError("No OCR results found.")

        text = "\n".join((r or {}).get("ParsedText") or "" for r in results).strip()
        logger.debug("OCR returned %d chars from %d result(s)", len(text), len(results))
        return text
