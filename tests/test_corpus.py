from pathlib import Path

from thaispell.common.config import BUNDLED_CORPUS_PATH
from thaispell.corpus import load_word_freqs, parse_word_freqs, read_corpus_lines
from thaispell.spellcheck.engine import create


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_read_corpus_lines_strips_comments_and_blanks(tmp_path: Path) -> None:
    corpus = _write(tmp_path / "freq.txt", "# header\nภาษา\t30  # note\n\n   \nภาษา\t30\nคำ\t10\n")

    assert read_corpus_lines(corpus) == ["ภาษา\t30", "คำ\t10"]
    assert read_corpus_lines(corpus, comments=True)[0] == "# header"


def test_read_corpus_lines_missing_file_is_empty(tmp_path: Path) -> None:
    assert read_corpus_lines(tmp_path / "missing.txt") == []


def test_parse_word_freqs_skips_malformed_lines() -> None:
    lines = ["ภาษา\t30", "ไม่มีแท็บ", "คำ\tmany", "ลบ\t-4", "ประโยค\t7\textra"]

    assert parse_word_freqs(lines) == [("ภาษา", 30), ("ประโยค", 7)]


def test_load_word_freqs_last_duplicate_wins(tmp_path: Path) -> None:
    corpus = _write(tmp_path / "freq.txt", "ภาษา\t30\nคำ\t10\nภาษา\t40\n")

    assert load_word_freqs(corpus) == {"ภาษา": 40, "คำ": 10}


def test_missing_corpus_gives_empty_checker(tmp_path: Path) -> None:
    checker = create(load_word_freqs(tmp_path / "missing.txt"))

    assert checker.dictionary() == []
    assert checker.correct("ภาษ") == "ภาษ"


def test_bundled_corpus_loads_with_default_filter() -> None:
    checker = create(load_word_freqs(BUNDLED_CORPUS_PATH))

    assert checker.freq("เหตุการณ์") > 0
    assert checker.freq("2550") == 0
    assert checker.freq("ก") == 0
    assert checker.spell("เหตการณ") == ["เหตุการณ์"]
