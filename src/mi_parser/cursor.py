"""Read position over the text of a single GDB/MI record."""

import re

from mi_parser.errors import EndOfInputError, TrailingInputError, UnexpectedTokenError

WHITESPACE = " \t\r\n"


class Cursor:
    """
    Owns the record text and the current read position.

    All matching is anchored at the current position; nothing scans ahead.
    """

    def __init__(self, text: str):
        """
        Initialize the cursor at the start of the text.

        :param text: One complete MI record body.
        """
        self._text: str = text
        self._pos: int = 0

    @property
    def position(self) -> int:
        """Index of the next unread character."""
        return self._pos

    def remaining(self) -> str:
        """Return the unconsumed part of the text."""
        return self._text[self._pos :]

    def has_remaining(self) -> bool:
        """Check whether any character, whitespace included, is left."""
        return self._pos < len(self._text)

    def skip_whitespace(self):
        """Advance past spaces, tabs and line breaks."""
        while self._pos < len(self._text) and self._text[self._pos] in WHITESPACE:
            self._pos += 1

    def peek(self, skip_whitespace: bool) -> str:
        """
        Return the next character without consuming it.

        :param skip_whitespace: Consume leading whitespace first.
        :return: The character at the cursor.
        :raises EndOfInputError: If the text is exhausted.
        """
        if skip_whitespace:
            self.skip_whitespace()
        if not self.has_remaining():
            raise EndOfInputError()
        return self._text[self._pos]

    def next_char(self) -> str:
        """
        Consume and return one raw character, whitespace included.

        :raises EndOfInputError: If the text is exhausted.
        """
        if not self.has_remaining():
            raise EndOfInputError()
        char = self._text[self._pos]
        self._pos += 1
        return char

    def match(self, pattern: re.Pattern, skip_whitespace: bool) -> str:
        """
        Consume the text matched by the pattern at the cursor.

        :param pattern: Compiled regular expression, matched at the current position.
        :param skip_whitespace: Consume leading whitespace first.
        :return: The consumed text.
        :raises UnexpectedTokenError: If the pattern does not match here.
        """
        if skip_whitespace:
            self.skip_whitespace()
        found = pattern.match(self._text, self._pos)
        if found is None:
            raise UnexpectedTokenError(pattern.pattern, self.remaining())
        self._pos = found.end()
        return found.group()

    def check_empty(self, skip_whitespace: bool = True):
        """
        Verify that the whole text has been consumed.

        :param skip_whitespace: Tolerate trailing whitespace.
        :raises TrailingInputError: If unconsumed text remains.
        """
        if skip_whitespace:
            self.skip_whitespace()
        if self.has_remaining():
            raise TrailingInputError(self.remaining())
