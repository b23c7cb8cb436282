"""
Tests for league_sync.csv_tokenizer.
"""
from __future__ import annotations

from league_sync.csv_tokenizer import parse_csv_line, split_fields, split_lines


def test_quoted_field_keeps_separator():
    assert parse_csv_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_unterminated_quote_is_tolerated():
    assert parse_csv_line('a,"b') == ["a", "b"]


def test_fields_are_trimmed():
    assert parse_csv_line("  Week 1 , 593743521 ") == ["Week 1", "593743521"]


def test_quotes_are_never_emitted():
    # Doubled quotes toggle twice instead of escaping
    assert parse_csv_line('"say ""hi"""') == ["say hi"]


def test_empty_line_gives_one_empty_field():
    assert parse_csv_line("") == [""]
    assert parse_csv_line(",") == ["", ""]


def test_split_fields_ignores_quotes():
    assert split_fields('12, "Smith, John" ,3') == ["12", '"Smith', 'John"', "3"]


def test_split_lines_handles_both_line_endings():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
