# Dhvani mappings: Grade-1 (uncontracted) English Braille.

from types import MappingProxyType

NUMBER_SIGN = "⠼"
CAPITAL_SIGN = "⠠"

# lowercase letters, whitespace and punctuation → Braille
BRAILLE_MAP = MappingProxyType(
    {
        # letters
        "a": "⠁",
        "b": "⠃",
        "c": "⠉",
        "d": "⠙",
        "e": "⠑",
        "f": "⠋",
        "g": "⠛",
        "h": "⠓",
        "i": "⠊",
        "j": "⠚",
        "k": "⠅",
        "l": "⠇",
        "m": "⠍",
        "n": "⠝",
        "o": "⠕",
        "p": "⠏",
        "q": "⠟",
        "r": "⠗",
        "s": "⠎",
        "t": "⠞",
        "u": "⠥",
        "v": "⠧",
        "w": "⠺",
        "x": "⠭",
        "y": "⠽",
        "z": "⠵",
        # layout is kept as-is
        " ": " ",
        "\n": "\n",
        # punctuation
        ".": "⠲",
        ",": "⠂",
        "?": "⠦",
        ";": "⠆",
        ":": "⠒",
        "!": "⠖",
        "'": "⠄",
        "-": "⠤",
        "–": "⠤",
        "—": "⠤",
        # two-cell sequences
        '"': "⠐⠶",
        "(": "⠐⠣",
        ")": "⠐⠜",
    }
)

# Digits reuse the a-j cells; they are only valid after NUMBER_SIGN.
DIGIT_MAP = MappingProxyType(
    {
        "1": "⠁",
        "2": "⠃",
        "3": "⠉",
        "4": "⠙",
        "5": "⠑",
        "6": "⠋",
        "7": "⠛",
        "8": "⠓",
        "9": "⠊",
        "0": "⠚",
    }
)

LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")

# Input preparation: 1→1 replacements for noisy OCR/PDF text
TRANSLATE_MAP = {
    # typographic quotes → ASCII
    "“": '"',
    "”": '"',
    "‟": '"',
    "„": '"',
    "’": "'",
    "‘": "'",
    "‚": "'",
    # NBSP → space
    "\u00a0": " ",
}
