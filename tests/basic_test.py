import logging
import threading

from dhvani import transliterate
from dhvani.braille import BRAILLE_MAP, CAPITAL_SIGN, DIGIT_MAP, NUMBER_SIGN

logging.basicConfig(level=logging.INFO)


def test_lowercase_word_has_no_indicators():
    assert transliterate("cat") == "⠉⠁⠞"


def test_leading_capital():
    assert transliterate("Cat") == "⠠⠉⠁⠞"


def test_digit_run_gets_one_number_sign():
    out = transliterate("123")
    logging.info(f"result: {out}")
    assert out == "⠼⠁⠃⠉"
    assert out.count(NUMBER_SIGN) == 1


def test_single_digit_between_letters():
    assert transliterate("a1b") == "⠁⠼⠁⠃"


def test_sentence_with_capitals_and_punctuation():
    assert transliterate("Hi, Bob!") == "⠠⠓⠊⠂ ⠠⠃⠕⠃⠖"


def test_empty_input():
    assert transliterate("") == ""


def test_capital_indicator_repeats_per_letter():
    out = transliterate("USA")
    assert out == "⠠⠥⠠⠎⠠⠁"
    assert out.count(CAPITAL_SIGN) == 3


def test_separate_digit_runs_each_get_a_sign():
    assert transliterate("12 345") == "⠼⠁⠃ ⠼⠉⠙⠑"
    assert transliterate("1a2") == "⠼⠁⠁⠼⠃"


def test_all_digits_map():
    out = transliterate("1234567890")
    assert out == NUMBER_SIGN + "".join(DIGIT_MAP[d] for d in "1234567890")


def test_two_cell_punctuation():
    assert transliterate('"(x)"') == "⠐⠶⠐⠣⠭⠐⠜⠐⠶"


def test_dashes_share_one_cell():
    assert transliterate("-–—") == "⠤⠤⠤"


def test_layout_is_preserved():
    assert transliterate("a b\nc") == "⠁ ⠃\n⠉"


def test_unmapped_characters_pass_through():
    assert transliterate("café ☕") == "⠉⠁⠋é ☕"
    assert transliterate("नमस्ते") == "नमस्ते"
    assert transliterate("a\tb\r\n") == "⠁\t⠃\r\n"


def test_non_ascii_digits_pass_through():
    assert transliterate("५") == "५"
    assert NUMBER_SIGN not in transliterate("٣")


def test_non_ascii_uppercase_passes_through():
    assert transliterate("É") == "É"


def test_lowercase_letters_are_one_cell_each():
    text = "thequickbrownfoxjumpsoverthelazydog"
    out = transliterate(text)
    assert len(out) == len(text)
    assert out == "".join(BRAILLE_MAP[ch] for ch in text)


def test_uppercase_matches_lowercase_cell():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert transliterate(ch.upper()) == CAPITAL_SIGN + transliterate(ch)


def test_deterministic():
    text = "Room 101, Floor 3!\nCall (555) 0199."
    assert transliterate(text) == transliterate(text)


def test_total_over_odd_input():
    for text in ["\x00", "�", "😀👍🏽", "\ud800", "A" * 1000, "9" * 1000]:
        assert isinstance(transliterate(text), str)


def test_long_digit_run_single_indicator():
    out = transliterate("9" * 1000)
    assert out.count(NUMBER_SIGN) == 1
    assert len(out) == 1001


def test_concurrent_callers_agree():
    text = "Page 12 of 40: Hello World!"
    expected = transliterate(text)
    results = []

    def worker():
        for _ in range(200):
            results.append(transliterate(text))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 800
    assert all(r == expected for r in results)
