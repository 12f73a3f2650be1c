"""Render parsed values back to GDB/MI notation."""

from mi_parser.strings import escape_string
from mi_parser.values import UNNAMED, FieldList, Text, Value, ValueList


def format_value(value: Value) -> str:
    """
    Render a value as MI text that parses back to an equal value.

    Enclosed field lists get their braces back; unenclosed ones are written in
    brackets, which restores the `[key=value,...]` form of an unwrapped list when
    the field list is a list item or a field value. An empty unenclosed field list
    is written `[]` the way GDB prints it, and reads back as an empty list.

    :raises ValueError: If an unenclosed field list starts with an entry that has no
        identifier. No bracketed text reads back as such a field list; render a
        top-level payload of this shape with `format_fields` instead.
    """
    if isinstance(value, Text):
        return escape_string(value.text)
    if isinstance(value, ValueList):
        return "[" + ",".join(format_value(item) for item in value) + "]"
    if isinstance(value, FieldList):
        return _format_fields(value)
    raise TypeError(f"Not an MI value: {value!r}")


def format_fields(fields: FieldList) -> str:
    """Render a top-level field list without braces; `parse_fields` reads it back."""
    return ",".join(_format_entry(key, value) for key, value in fields.entries())


def _format_fields(fields: FieldList) -> str:
    if fields.enclosed:
        return "{" + format_fields(fields) + "}"
    entries = fields.entries()
    if entries and _is_unkeyed(entries[0].key):
        raise ValueError(f"Cannot render a bracketed field list that starts unkeyed: {fields!r}")
    return "[" + format_fields(fields) + "]"


def _format_entry(key: str | None, value: Value) -> str:
    if _is_unkeyed(key):
        return format_value(value)
    return f"{key}={format_value(value)}"


def _is_unkeyed(key: str | None) -> bool:
    return key is None or key == UNNAMED
