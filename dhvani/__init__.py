from .braille import BrailleReport, braille, prepare_text, transliterate, transliterate_lines

__all__ = [
    "BrailleReport",
    "braille",
    "prepare_text",
    "transliterate",
    "transliterate_lines",
]

__version__ = "0.1.0"
