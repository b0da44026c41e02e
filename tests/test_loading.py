import pytest

from patternsearch.loading import (
    convert_pattern,
    load_file,
    load_patterns,
    normalize_text,
    parse_patterns,
)

SAMPLE = "Hola\r\n\tMundo   DEL  Texto\n\nFin\t"


def test_normalize_removes_control_whitespace():
    result = normalize_text(SAMPLE)
    for ch in "\n\r\t":
        assert ch not in result


def test_normalize_collapses_spaces():
    assert "  " not in normalize_text(SAMPLE)


def test_normalize_lowercases_ascii():
    result = normalize_text(SAMPLE)
    assert result == result.lower()
    assert "hola" in result


def test_normalize_is_idempotent():
    once = normalize_text(SAMPLE)
    assert normalize_text(once) == once


def test_normalize_keeps_non_ascii_letters():
    assert normalize_text("\xc9\xff") == "\xc9\xff"


def test_normalize_keeps_single_spaces():
    assert normalize_text("a b c") == "a b c"


def test_normalize_worked_example():
    assert normalize_text("A\n\nB") == "a b"


def test_load_file_matches_normalize(tmp_path):
    (tmp_path / "corpus").write_bytes(SAMPLE.encode("latin-1"))
    assert load_file("corpus", tmp_path) == normalize_text(SAMPLE)


def test_load_file_binary_bytes_preserved(tmp_path):
    data = bytes([0xC9, 0x41, 0xFF])
    (tmp_path / "corpus").write_bytes(data)
    result = load_file("corpus", tmp_path)
    assert len(result) == len(data)
    assert result[0] == "\xc9"
    assert result[1] == "a"


def test_load_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file("missing", tmp_path)


def test_parse_patterns_source_example():
    assert parse_patterns("ab, cd, abb") == ["ab", "cd", "abb"]


def test_parse_patterns_removes_inner_whitespace_and_empties():
    assert parse_patterns("A B,, \t ,Cd") == ["ab", "cd"]


def test_parse_patterns_empty_line():
    assert parse_patterns("") == []


def test_load_patterns_reads_first_line_only(tmp_path):
    (tmp_path / "pats.txt").write_text("ab, CD\nzz, yy\n")
    assert load_patterns("pats.txt", tmp_path) == ["ab", "cd"]


def test_load_patterns_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_patterns("missing.txt", tmp_path)


def test_convert_pattern():
    assert convert_pattern("Hola_Mundo") == "hola mundo"


def test_convert_pattern_has_no_underscores():
    result = convert_pattern("__A_b__")
    assert "_" not in result
    assert len(result) == len("__A_b__")