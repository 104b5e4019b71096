from .mappings import BRAILLE_MAP, CAPITAL_SIGN, DIGIT_MAP, NUMBER_SIGN
from .prepare import prepare_text
from .transliterate import BrailleReport, braille, transliterate, transliterate_lines

__all__ = [
    "BRAILLE_MAP",
    "CAPITAL_SIGN",
    "DIGIT_MAP",
    "NUMBER_SIGN",
    "BrailleReport",
    "braille",
    "prepare_text",
    "transliterate",
    "transliterate_lines",
]
