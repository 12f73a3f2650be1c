"""Parser for GDB/MI machine-interface output."""

from .errors import (
    EndOfInputError,
    InvalidEscapeError,
    InvalidOctalError,
    MIParseError,
    MultiValuedKeyError,
    NonByteCharacterError,
    TrailingInputError,
    UnexpectedTokenError,
)
from .parser import MIParser, parse_fields, parse_string, parse_value
from .records import Record, RecordKind, parse_record, parse_records
from .render import format_value
from .strings import escape_string
from .values import UNNAMED, Entry, FieldList, Text, Value, ValueList

__all__ = [
    "parse_value",
    "parse_string",
    "parse_fields",
    "MIParser",
    "Value",
    "Text",
    "ValueList",
    "FieldList",
    "Entry",
    "UNNAMED",
    "escape_string",
    "format_value",
    "Record",
    "RecordKind",
    "parse_record",
    "parse_records",
    "MIParseError",
    "EndOfInputError",
    "UnexpectedTokenError",
    "InvalidEscapeError",
    "InvalidOctalError",
    "NonByteCharacterError",
    "TrailingInputError",
    "MultiValuedKeyError",
]
