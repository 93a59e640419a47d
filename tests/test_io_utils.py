import pytest

from wordcover.io_utils import parse_words, read_words, write_lines


def test_parse_words():
    assert parse_words("  Fjord\n\nGUCKS  \r\nnymph\n") == ["Fjord", "GUCKS", "nymph"]
    assert parse_words("") == []


def test_read_and_write(tmp_path):
    source = tmp_path / "words.txt"
    source.write_text("waltz\n vibex \n\n", encoding="utf-8")
    assert read_words(source) == ["waltz", "vibex"]

    target = tmp_path / "out.txt"
    assert write_lines(["a b", "c d"], target) == 2
    assert target.read_text(encoding="utf-8") == "a b\nc d\n"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")
