# dhvani/export.py
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BASE_NAME = "braille-output"


def default_base_name(source: str | Path | None = None) -> str:
    """
    File stem for exported Braille: ``<source stem>-braille`` or the default.
    """
    if source is None or str(source) in ("", "-"):
        return DEFAULT_BASE_NAME
    return f"{Path(source).stem}-braille"


def save_braille_file(
    braille_text: str,
    directory: str | Path = ".",
    base_name: str = DEFAULT_BASE_NAME,
) -> Path:
    """
    Write Braille output verbatim to ``<directory>/<base_name>.txt``.

    :param braille_text: Output of the transliteration engine.
    :param directory: Target directory, created if missing.
    :param base_name: File name without extension.
    :returns: Path of the written file.
    """
    out_path = Path(directory) / f"{base_name}.txt"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        f.write(braille_text)
    logger.info("Saved Braille file: %s", out_path)
    return out_path
