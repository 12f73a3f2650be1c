"""
Exceptions raised while parsing GDB/MI output and while querying parsed field lists.

Every parse failure carries what the parser expected and the part of the record
that was left when it gave up. Nothing here is retried: the caller drops or
re-reads the whole record.
"""

CONTEXT_SNIPPET_LENGTH = 64


def _snippet(context: str) -> str:
    if len(context) > CONTEXT_SNIPPET_LENGTH:
        return context[:CONTEXT_SNIPPET_LENGTH] + "..."
    return context


class MIParseError(Exception):
    """Base class for all syntax errors in GDB/MI text."""

    def __init__(self, expected: str, context: str):
        """
        Initialize the error.

        :param expected: Description or pattern of the token the parser wanted.
        :param context: The offending text, usually the unconsumed rest of the record.
        """
        super().__init__(f"Expected {expected} at {_snippet(context)!r}")
        self.expected = expected
        self.context = context


class EndOfInputError(MIParseError):
    """The record ended while the parser still needed characters."""

    def __init__(self, expected: str = "more input"):
        super().__init__(expected, "")


class UnexpectedTokenError(MIParseError):
    """The text at the cursor does not match the required pattern."""


class InvalidEscapeError(MIParseError):
    """A backslash in a string literal is followed by an unknown escape character."""

    def __init__(self, char: str):
        super().__init__("escape", char)
        self.char = char


class InvalidOctalError(MIParseError):
    """An octal escape is not followed by two decimal digits."""

    def __init__(self, char: str):
        super().__init__("octal", char)
        self.char = char


class NonByteCharacterError(MIParseError):
    """A string literal holds a character that does not fit in one byte."""

    def __init__(self, char: str):
        super().__init__("byte", f"U+{ord(char):04X}")
        self.char = char


class TrailingInputError(MIParseError):
    """Text remains after a complete top-level value was parsed."""

    def __init__(self, context: str):
        super().__init__("end of input", context)


class MultiValuedKeyError(LookupError):
    """A field list key expected to be unique is associated with several values."""

    def __init__(self, key: str | None, values: tuple):
        super().__init__(f"Key {key!r} is multi-valued: {list(values)!r}")
        self.key = key
        self.values = values
