"""
Recursive-descent parser for GDB/MI values.

GDB/MI output looks like JSON but is not. There is one primitive, the string, and
two aggregates: lists in `[ ]` and maps in `{ }`. Maps are really field lists -
a key may repeat - and the outermost field list of a record is not enclosed at
all. A list of `key=value` pairs, as in `stack=[frame={...},frame={...}]`, is a
field list too. One character of lookahead always decides which production
applies, so the parser never backtracks:

    value      := string | list | map | fields
    list       := '[' (value (',' value)*)? ']'
    map        := '{' fields '}'
    fields     := (entry (',' entry)*)?
    entry      := identifier '=' value | value
    identifier := [A-Za-z0-9_-]+

See https://sourceware.org/gdb/onlinedocs/gdb/GDB_002fMI-Output-Syntax.html
"""

import re

from mi_parser.cursor import Cursor
from mi_parser.errors import UnexpectedTokenError
from mi_parser.strings import QUOTE, decode_string
from mi_parser.values import UNNAMED, FieldList, Text, Value, ValueList

COMMA = re.compile(",")
LBRACKET = re.compile(r"\[")
RBRACKET = re.compile(r"\]")
FIELD_ID = re.compile(r"[0-9A-Za-z_-]+")
EQUALS = re.compile("=")
LBRACE = re.compile(r"\{")
RBRACE = re.compile(r"\}")


class MIParser:
    """
    Parser over the text of one MI record.

    An instance holds mutable cursor state and parses exactly one record; use the
    module-level `parse_value`, `parse_string` and `parse_fields` unless you need
    to parse a record piece by piece.
    """

    def __init__(self, text: str):
        """
        Initialize the parser.

        :param text: One complete record body, record prefix already stripped.
        """
        self._cursor = Cursor(text)

    @property
    def cursor(self) -> Cursor:
        """The read position over the record text."""
        return self._cursor

    def parse_value(self) -> Value:
        """Parse the value at the cursor, choosing the production by one lookahead character."""
        lookahead = self._cursor.peek(skip_whitespace=True)
        if lookahead == QUOTE:
            return Text(self.parse_string())
        if lookahead == "[":
            return self.parse_list()
        if lookahead == "{":
            return self.parse_map()
        # Not a grammar production of its own: GDB omits the braces of the outermost
        # field list, so anything else is read as an unenclosed field list.
        return self.parse_fields(enclosed=False)

    def parse_string(self) -> str:
        """Parse the string literal at the cursor, keeping any whitespace inside it."""
        return decode_string(self._cursor)

    def parse_list(self) -> Value:
        """
        Parse the list at the cursor.

        A list holding a single unenclosed field list, such as `[frame={...},frame={...}]`,
        is a list of fields rather than a one-element list, so that field list is
        returned in place of the list.

        :raises UnexpectedTokenError: If a `}` appears where an item or `]` is due.
        """
        self._cursor.match(LBRACKET, skip_whitespace=True)
        items: list[Value] = []
        while self._cursor.has_remaining():
            lookahead = self._cursor.peek(skip_whitespace=True)
            if lookahead == "]":
                self._cursor.match(RBRACKET, skip_whitespace=False)
                break
            if lookahead == "}":
                raise UnexpectedTokenError(RBRACKET.pattern, self._cursor.remaining())
            if lookahead == ",":
                self._cursor.match(COMMA, skip_whitespace=False)
            items.append(self.parse_value())

        if len(items) == 1 and isinstance(items[0], FieldList) and not items[0].enclosed:
            return items[0]
        return ValueList(tuple(items))

    def parse_map(self) -> FieldList:
        """Parse the braced map at the cursor."""
        self._cursor.match(LBRACE, skip_whitespace=True)
        fields = self.parse_fields(enclosed=True)
        self._cursor.match(RBRACE, skip_whitespace=True)
        return fields

    def parse_fields(self, enclosed: bool) -> FieldList:
        """
        Parse fields up to the closing bracket or brace, or the end of the text.

        Nested objects without an identifier are stored under `UNNAMED`, bare strings
        under None.

        :param enclosed: True if the fields are between braces.
        """
        fields = FieldList(enclosed=enclosed)
        while self._cursor.has_remaining():
            lookahead = self._cursor.peek(skip_whitespace=True)
            if lookahead in "]}":
                break
            if lookahead == ",":
                self._cursor.match(COMMA, skip_whitespace=False)

            lookahead = self._cursor.peek(skip_whitespace=True)
            if lookahead == "{":
                fields._add(UNNAMED, self.parse_value())  # noqa: WPS437 # pylint: disable=W0212
                continue
            if lookahead == QUOTE:
                fields._add(None, Text(self.parse_string()))  # noqa: WPS437 # pylint: disable=W0212
                continue
            field_id = self._cursor.match(FIELD_ID, skip_whitespace=True)
            self._cursor.match(EQUALS, skip_whitespace=True)
            fields._add(field_id, self.parse_value())  # noqa: WPS437 # pylint: disable=W0212
        return fields


def parse_value(text: str) -> Value:
    """
    Parse a complete MI value.

    :param text: The value text; all of it must be consumed.
    :return: The parsed value.
    """
    parser = MIParser(text)
    result = parser.parse_value()
    parser.cursor.check_empty()
    return result


def parse_string(text: str) -> str:
    """
    Parse a complete quoted MI string literal.

    :param text: The literal, quotes included; nothing may follow it.
    :return: The decoded text.
    """
    parser = MIParser(text)
    result = parser.parse_string()
    parser.cursor.check_empty()
    return result


def parse_fields(text: str) -> FieldList:
    """
    Parse a complete top-level field list, e.g. the payload of a result record.

    :param text: The unenclosed fields, such as `bkptno="1",thread-id="1"`.
    :return: The parsed field list.
    """
    parser = MIParser(text)
    result = parser.parse_fields(enclosed=False)
    parser.cursor.check_empty()
    return result
