"""
Conversion of parsed values to the plain dicts and lists pygdbmi produces.

Code written against pygdbmi reads record payloads as nested dicts, e.g.
`resp.get("payload", {}).get("children", [])`. These helpers give the same shape
for values parsed here, so such code can consume either.
"""

from typing import Any

from mi_parser.values import FieldList, Text, Value, ValueList


def to_payload(value: Value) -> Any:
    """
    Convert a parsed value to pygdbmi's payload shape.

    * a string becomes `str`, a list becomes `list`;
    * a top-level or braced field list becomes a `dict`; a repeated key maps to the
      list of its values, in order;
    * an unenclosed field list nested inside another value, as in
      `stack=[frame={...},frame={...}]`, becomes the `list` of its values.

    :param value: Parsed value, usually the field list of a record.
    :return: Plain Python data.
    """
    if isinstance(value, FieldList):
        return fields_to_dict(value)
    return _convert(value)


def fields_to_dict(fields: FieldList) -> dict:
    """Convert a field list to a dict, collapsing repeated keys into lists."""
    result: dict = {}
    for key in fields.keys():
        values = [_convert(value) for value in fields.get(key)]
        result[key] = values[0] if len(values) == 1 else values
    return result


def _convert(value: Value) -> Any:
    if isinstance(value, Text):
        return value.text
    if isinstance(value, ValueList):
        return [_convert(item) for item in value]
    if value.enclosed:
        return fields_to_dict(value)
    return [_convert(entry.value) for entry in value.entries()]
