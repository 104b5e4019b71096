from dhvani import transliterate
from dhvani.export import DEFAULT_BASE_NAME, default_base_name, save_braille_file


def test_save_braille_file_writes_verbatim(tmp_path):
    out = transliterate("Line 1\nLine 2\r\n")
    path = save_braille_file(out, tmp_path / "exports", "note")

    assert path == tmp_path / "exports" / "note.txt"
    assert path.read_bytes() == out.encode("utf-8")


def test_save_braille_file_default_name(tmp_path):
    path = save_braille_file("⠁", tmp_path)
    assert path.name == f"{DEFAULT_BASE_NAME}.txt"
    assert path.read_text(encoding="utf-8") == "⠁"


def test_save_overwrites(tmp_path):
    save_braille_file("⠁⠁⠁", tmp_path, "x")
    path = save_braille_file("⠃", tmp_path, "x")
    assert path.read_text(encoding="utf-8") == "⠃"


def test_default_base_name():
    assert default_base_name(None) == "braille-output"
    assert default_base_name("-") == "braille-output"
    assert default_base_name("scans/menu.jpg") == "menu-braille"
