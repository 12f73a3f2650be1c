"""
Value model produced by the GDB/MI parser.

A parsed value is exactly one of three kinds:

* ``Text`` - a decoded string literal;
* ``ValueList`` - a bracketed sequence of values;
* ``FieldList`` - an ordered, multi-valued collection of ``key=value`` entries,
  used for braced maps as well as bare (unenclosed) field lists.

Values are built bottom-up by the parser and are read-only afterwards.
"""

from __future__ import annotations

from collections import namedtuple
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from mi_parser.errors import MultiValuedKeyError

# Key of entries parsed from a nested object with no identifier, e.g. the
# elements of `groups=[{...},{...}]` read as a field list.
UNNAMED = "<unnamed>"

Entry = namedtuple("Entry", ["key", "value"])


@dataclass(frozen=True)
class Text:
    """A string literal, already unescaped and decoded."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ValueList:
    """An ordered list of values, as written between `[` and `]`."""

    items: tuple = ()

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


class FieldList:
    """
    Ordered multi-valued map of MI fields.

    The same key may occur several times, e.g. `thread-ids={thread-id="1",thread-id="2"}`.
    The entry sequence is the source of truth; the per-key index is derived from it
    as entries are appended.
    """

    def __init__(self, enclosed: bool = False):
        """
        Create an empty field list.

        :param enclosed: True if the list was written between `{` and `}`.
        """
        self._entries: list[Entry] = []
        self._index: dict[str | None, list[Value]] = {}
        self._enclosed: bool = enclosed

    @staticmethod
    def builder() -> FieldListBuilder:
        """Start building an unenclosed field list, as if it had been parsed."""
        return FieldListBuilder()

    def _add(self, key: str | None, value: Value):
        """Append an entry. Only the parser and the builder call this."""
        self._entries.append(Entry(key, value))
        self._index.setdefault(key, []).append(value)

    @property
    def enclosed(self) -> bool:
        """Whether the list was parsed between braces."""
        return self._enclosed

    def entries(self) -> tuple[Entry, ...]:
        """
        Get the entries in order of appearance.

        :return: Tuple of `(key, value)` entries.
        """
        return tuple(self._entries)

    def keys(self) -> tuple[str | None, ...]:
        """Get the distinct keys in order of first appearance."""
        return tuple(self._index)

    def get(self, key: str | None) -> tuple[Value, ...]:
        """
        Get all values associated with the key.

        :param key: Field name.
        :return: The values, empty if the key is absent.
        """
        return tuple(self._index.get(key, ()))

    def get_singleton(self, key: str | None) -> Value | None:
        """
        Get the only value associated with the key.

        :param key: Field name.
        :return: The value, or None if the key is absent.
        :raises MultiValuedKeyError: If more than one value is associated.
        """
        values = self._index.get(key)
        if not values:
            return None
        if len(values) != 1:
            raise MultiValuedKeyError(key, tuple(values))
        return values[0]

    def get_string(self, key: str | None) -> str | None:
        """Get the only value of the key as a string."""
        value = self.get_singleton(key)
        if value is None:
            return None
        if not isinstance(value, Text):
            raise TypeError(f"Field {key!r} is not a string: {value!r}")
        return value.text

    def get_list_of(self, key: str | None) -> tuple[Value, ...] | None:
        """Get the only value of the key as a tuple of list items."""
        value = self.get_singleton(key)
        if value is None:
            return None
        if not isinstance(value, ValueList):
            raise TypeError(f"Field {key!r} is not a list: {value!r}")
        return value.items

    def get_field_list(self, key: str | None) -> FieldList | None:
        """
        Get the only value of the key as a field list.

        GDB prints an empty field list as `[]`, so an empty list value is
        returned as an empty field list.
        """
        value = self.get_singleton(key)
        if value is None:
            return None
        if isinstance(value, ValueList) and not value.items:
            return FieldList()
        if not isinstance(value, FieldList):
            raise TypeError(f"Field {key!r} is not a field list: {value!r}")
        return value

    def contains_key(self, key: str | None) -> bool:
        """Check whether at least one entry has the key."""
        return key in self._index

    def size(self) -> int:
        """Count the entries (not the distinct keys)."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldList):
            return NotImplemented
        return self._index == other._index  # noqa: WPS437

    def __repr__(self) -> str:
        return f"FieldList({self._index!r})"


class FieldListBuilder:
    """Builder for field lists in tests and fixtures."""

    def __init__(self):
        """Start with an empty, unenclosed field list."""
        self._fields = FieldList(enclosed=False)

    def add(self, key: str | None, value) -> FieldListBuilder:
        """
        Add a key-value pair.

        :param key: Field name, `UNNAMED` or None.
        :param value: A value, or a plain `str`/`list` converted with `as_value`.
        :return: This builder.
        """
        self._fields._add(key, as_value(value))  # noqa: WPS437 # pylint: disable=W0212
        return self

    def build(self) -> FieldList:
        """Return the field list built so far and start over with an empty one."""
        fields, self._fields = self._fields, FieldList(enclosed=False)
        return fields


def as_value(obj) -> Value:
    """Wrap plain strings and lists as parsed values; values pass through unchanged."""
    if isinstance(obj, (Text, ValueList, FieldList)):
        return obj
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (list, tuple)):
        return ValueList(tuple(as_value(item) for item in obj))
    raise TypeError(f"Cannot convert {type(obj).__name__} to an MI value")


Value = Union[Text, ValueList, FieldList]
