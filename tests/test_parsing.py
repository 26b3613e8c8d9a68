# tests/test_parsing.py
"""Tests for input cleanup and import parsing."""

import pytest

from vocab.core.parsing import (
    correct_whitespace, parse_import_file, parse_import_line, sanitize, split_words,
)


def test_correct_whitespace():
    assert correct_whitespace("  sun ,  sol  ") == "sun,sol"
    assert correct_whitespace("日　、月") == "日,月"


def test_split_words():
    assert split_words("sun, sol,,star ") == ["sun", "sol", "star"]
    assert split_words("") == []


def test_sanitize_drops_illegal_characters():
    text, skipped = sanitize("sun! sol? 日")
    assert text == "sun sol 日"
    assert skipped == ["!", "?"]


def test_sanitize_keeps_allowed_symbols():
    text, skipped = sanitize("Straße, (ねこ) 「猫」")
    assert skipped == []
    assert text == "Straße,(ねこ) 「猫」"


def test_parse_import_line_standard_order():
    native, foreign = parse_import_line("日, 太陽 - sun, sol")
    assert native == ["sun", "sol"]
    assert foreign == ["日", "太陽"]


def test_parse_import_line_swapped_order():
    native, foreign = parse_import_line("sun ; 日", delimiter=";", standard_order=False)
    assert native == ["sun"]
    assert foreign == ["日"]


@pytest.mark.parametrize("line", ["no delimiter", "a - b - c", " - sun"])
def test_parse_import_line_malformed(line):
    with pytest.raises(ValueError):
        parse_import_line(line)


def test_parse_import_file_skips_comments_and_blanks():
    text = "# header\n\n日 - sun\n月 - moon\n"
    lines = parse_import_file(text)
    assert [(l.line_no, l.native, l.foreign) for l in lines] == [
        (3, ["sun"], ["日"]),
        (4, ["moon"], ["月"]),
    ]


def test_parse_import_file_reports_line_number():
    with pytest.raises(ValueError, match="line 2"):
        parse_import_file("日 - sun\nbroken\n")
