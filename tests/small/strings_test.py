"""Unit tests for decoding and escaping MI string literals."""

import pytest

from mi_parser.errors import (
    EndOfInputError,
    InvalidEscapeError,
    InvalidOctalError,
    NonByteCharacterError,
    TrailingInputError,
    UnexpectedTokenError,
)
from mi_parser.parser import parse_string
from mi_parser.strings import escape_string


def test_plain_string():
    """Should return the text between the quotes."""
    assert parse_string('"main"') == "main"


def test_empty_string():
    """Should decode an empty literal."""
    assert parse_string('""') == ""


def test_whitespace_inside_string_is_kept():
    """Should preserve whitespace inside the quotes."""
    assert parse_string('"  a \t b  "') == "  a \t b  "


def test_named_escapes():
    """Should map C-style escapes to their control characters."""
    assert parse_string(r'"\n\b\t\f\r\e\a"') == "\n\b\t\f\r\x1b\x07"


def test_quote_and_backslash_escapes():
    """Should map escaped quotes and backslashes to themselves."""
    assert parse_string(r'"say \"hi\" C:\\tmp"') == 'say "hi" C:\\tmp'


def test_octal_escape():
    """Should decode octal 101 to the letter A."""
    assert parse_string(r'"\101"') == "A"


def test_octal_escapes_are_utf8_bytes():
    """Should join octal escaped bytes and decode them as UTF-8."""
    assert parse_string(r'"caf\303\251"') == "café"


def test_invalid_utf8_is_replaced():
    """Should substitute the replacement character for undecodable bytes."""
    assert parse_string(r'"\377"') == "\ufffd"


def test_invalid_escape():
    """Should reject an unknown escape character."""
    with pytest.raises(InvalidEscapeError) as excinfo:
        parse_string(r'"\q"')
    assert excinfo.value.char == "q"


def test_octal_must_start_with_0_to_3():
    """Should treat a leading octal digit above 3 as an unknown escape."""
    with pytest.raises(InvalidEscapeError) as excinfo:
        parse_string(r'"\401"')
    assert excinfo.value.char == "4"


def test_invalid_octal_digit():
    """Should require two more digits after the first octal digit."""
    with pytest.raises(InvalidOctalError) as excinfo:
        parse_string(r'"\1x1"')
    assert excinfo.value.char == "x"


def test_non_byte_character():
    """Should reject characters outside the byte range."""
    with pytest.raises(NonByteCharacterError) as excinfo:
        parse_string('"price: \u20ac"')
    assert excinfo.value.context == "U+20AC"


def test_unterminated_string():
    """Should fail when the closing quote is missing."""
    with pytest.raises(EndOfInputError):
        parse_string('"abc')


def test_whitespace_before_quote_is_rejected():
    """Should require the literal to start exactly at the cursor."""
    with pytest.raises(UnexpectedTokenError):
        parse_string(' "abc"')


def test_trailing_input():
    """Should fail when text remains after the closing quote."""
    with pytest.raises(TrailingInputError):
        parse_string('"ok" extra')


def test_escape_string():
    """Should escape control characters, quotes and non-ASCII bytes."""
    assert escape_string('a"b\\\n\x1bé') == r'"a\"b\\\n\e\303\251"'


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Hello, world!\n",
        'She said "hi"\\',
        "\x00\x01\x7f\x1b\x07",
        "tab\there\r\n",
        "Grüße, 世界 🐛",
    ],
)
def test_escape_round_trip(text: str):
    """Should decode an escaped string back to the original text."""
    assert parse_string(escape_string(text)) == text


@pytest.mark.parametrize(
    ("literal", "text"),
    [
        (r'"\018"', "\x10"),
        (r'"\099"', "\x51"),
        (r'"\399"', "\x11"),
    ],
)
def test_octal_arithmetic(literal: str, text: str):
    """Should accept digits 8 and 9 and keep only the low 8 bits of the sum."""
    assert parse_string(literal) == text


@pytest.mark.parametrize("literal", ['"\\', '"\\1', '"\\12', '"\\n'])
def test_end_of_input_inside_escape(literal: str):
    """Should report the missing closing quote when the text ends mid-escape."""
    with pytest.raises(EndOfInputError) as excinfo:
        parse_string(literal)
    assert excinfo.value.expected == "closing quote"
