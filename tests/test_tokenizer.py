"""Tests for flattener.tokenizer: quote-aware line splitting."""
from flattener.tokenizer import tokenize_line


def test_plain_fields():
    assert tokenize_line("a,b,c") == ["a", "b", "c"]


def test_quoted_comma_stays_in_field():
    assert tokenize_line('"doe, john",John Doe') == ["doe, john", "John Doe"]


def test_empty_line_is_one_empty_field():
    assert tokenize_line("") == [""]


def test_trailing_comma_emits_empty_last_field():
    assert tokenize_line("a,") == ["a", ""]


def test_no_trimming_inside_tokenizer():
    assert tokenize_line(" a , b ") == [" a ", " b "]


def test_unbalanced_quote_swallows_rest_of_line():
    assert tokenize_line('"a,b,c') == ["a,b,c"]


def test_doubled_quote_emits_nothing():
    # "" is not an escaped quote here, it just toggles twice
    assert tokenize_line('"say ""hi""",x') == ["say hi", "x"]
