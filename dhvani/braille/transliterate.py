# dhvani/braille/transliterate.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

from .mappings import BRAILLE_MAP, CAPITAL_SIGN, DIGIT_MAP, LETTERS, NUMBER_SIGN
from .prepare import prepare_text

__all__ = [
    "braille",
    "transliterate",
    "transliterate_lines",
    "BrailleReport",
]


# ---------------------------------------------------------------------------
# Report (optional)
# ---------------------------------------------------------------------------


@dataclass
class BrailleReport:
    """
    Execution report for a transliteration run.

    :param input_len: Length of the text handed to the engine.
    :param output_len: Length of the Braille output string.
    :param letters: Latin letters encoded (capitals included).
    :param capitals: Capital indicators emitted, one per uppercase letter.
    :param digits: Digit cells emitted.
    :param digit_runs: Numeric indicators emitted, one per maximal digit run.
    :param punctuation: Mapped punctuation marks encoded.
    :param passthrough: Characters copied through unchanged.
    :param passthrough_chars: Distinct unmapped characters, first-seen order.
    :param normalized: Whether the input preparation pass ran.
    """

    input_len: int
    output_len: int = 0
    letters: int = 0
    capitals: int = 0
    digits: int = 0
    digit_runs: int = 0
    punctuation: int = 0
    passthrough: int = 0
    passthrough_chars: List[str] = field(default_factory=list)
    normalized: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


# ---------------------------------------------------------------------------
# Cell encoders
# ---------------------------------------------------------------------------


def _is_digit(ch: str) -> bool:
    # ASCII only; str.isdigit() would also accept e.g. Devanagari digits
    return "0" <= ch <= "9"


def _is_capital(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _digit_run_end(text: str, start: int) -> int:
    """
    Index one past the maximal run of digits beginning at ``start``.
    """
    end = start
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return end


def _encode_digit_run(run: str) -> str:
    return NUMBER_SIGN + "".join(DIGIT_MAP[d] for d in run)


def _encode_capital(ch: str) -> str:
    return CAPITAL_SIGN + BRAILLE_MAP[ch.lower()]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


def _transliterate(text: str, rep: BrailleReport | None = None) -> str:
    """
    Single left-to-right pass shared by :func:`transliterate` and the report
    path of :func:`braille`. ``rep`` is only written to, never read.
    """
    out: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if _is_digit(ch):
            end = _digit_run_end(text, i)
            out.append(_encode_digit_run(text[i:end]))
            if rep is not None:
                rep.digit_runs += 1
                rep.digits += end - i
            i = end
            continue

        if _is_capital(ch):
            out.append(_encode_capital(ch))
            if rep is not None:
                rep.capitals += 1
                rep.letters += 1
            i += 1
            continue

        key = ch.lower()
        cell = BRAILLE_MAP.get(key)
        if cell is not None:
            out.append(cell)
            if rep is not None:
                if key in LETTERS:
                    rep.letters += 1
                elif not key.isspace():
                    rep.punctuation += 1
        else:
            # unmapped: keep the original character
            out.append(ch)
            if rep is not None:
                rep.passthrough += 1
                if ch not in rep.passthrough_chars:
                    rep.passthrough_chars.append(ch)
        i += 1

    return "".join(out)


def transliterate(text: str) -> str:
    """
    Transcribe ``text`` to Grade-1 Braille Unicode.

    - a maximal run of digits gets one number sign, then one cell per digit
    - every uppercase letter gets its own capital sign
    - letters, space, newline and known punctuation use :data:`BRAILLE_MAP`
    - anything else is copied through unchanged

    The function is pure and total: it accepts any string and never raises.

    :param text: Input text (typed, or extracted by OCR/PDF upstream).
    :returns: Braille string.
    """
    if not text:
        return ""
    return _transliterate(text)


def transliterate_lines(lines: Iterable[str]) -> List[str]:
    """
    Transcribe an iterable of strings with :func:`transliterate`.

    Digit runs never span two elements.

    :param lines: Iterable of strings.
    :returns: List of Braille strings, same order.
    """
    return [transliterate(x) for x in lines]


def braille(
    text: str,
    *,
    normalize: bool = False,
    report: bool = False,
) -> Union[str, Tuple[str, BrailleReport]]:
    """
    One-shot entrypoint: optionally prepare noisy text, then transcribe it.

    - normalize=True -> run :func:`~dhvani.braille.prepare.prepare_text` first
    - report=False   -> returns str
    - report=True    -> returns (str, BrailleReport)
    """
    if normalize:
        text = prepare_text(text)

    if not report:
        return transliterate(text)

    rep = BrailleReport(input_len=len(text), normalized=normalize)
    out = _transliterate(text, rep) if text else ""
    rep.output_len = len(out)
    return out, rep
