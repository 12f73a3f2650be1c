"""
GDB/MI string literals.

GDB prints strings byte by byte: printable ASCII stays as is, a handful of control
characters get C-style escapes and every other byte becomes a three-digit octal
escape. Decoding therefore collects raw bytes first and interprets them as UTF-8
only once the closing quote is reached.
"""

from mi_parser.cursor import Cursor
from mi_parser.errors import (
    EndOfInputError,
    InvalidEscapeError,
    InvalidOctalError,
    NonByteCharacterError,
    UnexpectedTokenError,
)

QUOTE = '"'
BACKSLASH = "\\"

ESCAPED_BYTES = {
    "n": 0x0A,
    "b": 0x08,
    "t": 0x09,
    "f": 0x0C,
    "r": 0x0D,
    "e": 0x1B,
    "a": 0x07,
    "\\": 0x5C,
    '"': 0x22,
}
OCTAL_LEADING_DIGITS = "0123"
MAX_BYTE = 0xFF

_BYTE_ESCAPES = {byte: f"\\{char}" for char, byte in ESCAPED_BYTES.items()}


def decode_string(cursor: Cursor) -> str:
    """
    Consume a quoted string literal at the cursor.

    Whitespace before the opening quote is not skipped: the literal must start
    exactly at the cursor.

    :param cursor: Cursor positioned on the opening quote.
    :return: The decoded text.
    """
    if cursor.peek(skip_whitespace=False) != QUOTE:
        raise UnexpectedTokenError(QUOTE, cursor.remaining())
    cursor.next_char()

    raw = bytearray()
    while True:
        char = _next_byte_char(cursor)
        if char == QUOTE:
            break
        if char != BACKSLASH:
            raw.append(ord(char))
            continue
        raw.append(_decode_escape(cursor))
    return raw.decode("utf-8", errors="replace")


def _next_byte_char(cursor: Cursor) -> str:
    try:
        char = cursor.next_char()
    except EndOfInputError as err:
        raise EndOfInputError("closing quote") from err
    if ord(char) > MAX_BYTE:
        raise NonByteCharacterError(char)
    return char


def _decode_escape(cursor: Cursor) -> int:
    """Decode the escape following a backslash into one byte value."""
    char = _next_byte_char(cursor)
    if char in ESCAPED_BYTES:
        return ESCAPED_BYTES[char]
    if char in OCTAL_LEADING_DIGITS:
        second = _octal_digit(cursor)
        third = _octal_digit(cursor)
        return (int(char) * 64 + second * 8 + third) & MAX_BYTE
    raise InvalidEscapeError(char)


def _octal_digit(cursor: Cursor) -> int:
    char = _next_byte_char(cursor)
    # GDB only ever prints 0-7 here, but any decimal digit is accepted
    if not "0" <= char <= "9":
        raise InvalidOctalError(char)
    return int(char)


def escape_string(text: str) -> str:
    """
    Quote and escape text the way GDB prints it in MI output.

    :param text: Any text encodable as UTF-8.
    :return: The literal, including the surrounding quotes.
    """
    parts = [QUOTE]
    for byte in text.encode("utf-8"):
        if byte in _BYTE_ESCAPES:
            parts.append(_BYTE_ESCAPES[byte])
        elif 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\{byte:03o}")
    parts.append(QUOTE)
    return "".join(parts)
