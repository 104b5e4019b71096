# dhvani/braille/prepare.py
from __future__ import annotations

import re
import unicodedata

from .mappings import TRANSLATE_MAP

__all__ = ["prepare_text"]

# ---------------------------------------------------------------------------
# Pre-compiled regexes
# ---------------------------------------------------------------------------

# Control chars except TAB(0x09), LF(0x0A), CR(0x0D)
RE_CTRL = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")

RE_ZERO_WIDTH = re.compile(r"[\u200B-\u200D\u2060]")  # ZWSP/ZWNJ/ZWJ/WORD JOINER
RE_SOFT_HYPHEN = re.compile(r"\u00AD")
RE_BOM = re.compile(r"\ufeff")
RE_VARIATION_SELECTORS = re.compile(r"[\uFE00-\uFE0F]")

# CRLF or lone CR
RE_LINE_BREAK = re.compile(r"\r\n?")

_TRANSLATE_TABLE = str.maketrans(TRANSLATE_MAP)


def prepare_text(s: str) -> str:
    """
    Clean OCR/PDF text before transliteration.

    Operations:
    - normalize typographic quotes and NBSP via ``TRANSLATE_MAP``
    - remove zero-width chars, soft hyphens, BOM, variation selectors
    - remove disallowed control characters
    - Unicode normalization (NFKC): ligatures, fullwidth digits
    - fold CRLF / CR line breaks into LF

    Idempotent. The engine never calls this on its own.

    :param s: Input text.
    :returns: Cleaned text.
    """
    if not s:
        return s

    s = s.translate(_TRANSLATE_TABLE)

    # Invisible chars go first: they block composition under NFKC
    s = RE_ZERO_WIDTH.sub("", s)
    s = RE_SOFT_HYPHEN.sub("", s)
    s = RE_BOM.sub("", s)
    s = RE_VARIATION_SELECTORS.sub("", s)
    s = RE_CTRL.sub("", s)

    # Compatibility form handles ligatures/fullwidth
    s = unicodedata.normalize("NFKC", s)

    s = RE_LINE_BREAK.sub("\n", s)

    return s
