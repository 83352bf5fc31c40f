"""
Character sources for the Kaleidoscope lexer.

The lexer never indexes into the source directly. It reads through an
InputCursor: a window of exactly two characters (current + one lookahead)
over a single-pass character source. The same cursor works for an
in-memory string and for an interactive stream such as stdin.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TextIO

from .tokens import SourceLocation


class InputCursor(ABC):
    """Abstract one-character-lookahead window over a character source."""

    @property
    @abstractmethod
    def current(self) -> Optional[str]:
        """The current character, or None at end of input."""
        pass

    @abstractmethod
    def peek(self) -> Optional[str]:
        """The character after the current one, without consuming it."""
        pass

    @abstractmethod
    def advance(self) -> Optional[str]:
        """Shift the window forward and return the new current character."""
        pass

    @property
    @abstractmethod
    def location(self) -> SourceLocation:
        """Source location of the current character."""
        pass

    @property
    def at_end(self) -> bool:
        return self.current is None


class IteratorInput(InputCursor):
    """
    Cursor over any iterator of single characters.

    Holds the current and the next character only. Once the iterator is
    exhausted, advance() keeps returning None.
    """

    def __init__(self, chars: Iterator[str], filename: str = "<unknown>"):
        self._chars = chars
        self.filename = filename
        self.line = 1
        self.column = 1
        self.offset = 0
        self._current = self._pull()
        self._next = self._pull() if self._current is not None else None

    def _pull(self) -> Optional[str]:
        return next(self._chars, None)

    @property
    def current(self) -> Optional[str]:
        return self._current

    def peek(self) -> Optional[str]:
        return self._next

    def advance(self) -> Optional[str]:
        if self._current is None:
            return None

        if self._current == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.offset += 1

        self._current = self._next
        self._next = self._pull() if self._current is not None else None
        return self._current

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.offset)


class StringInput(IteratorInput):
    """Cursor over an in-memory source string."""

    def __init__(self, source: str, filename: str = "<string>"):
        super().__init__(iter(source), filename)


class StreamInput(IteratorInput):
    """
    Cursor over a text stream (file object, sys.stdin, io.StringIO).

    Characters are read one at a time, so an interactive stream is only
    waited on when the lexer actually needs the next character.
    """

    def __init__(self, stream: TextIO, filename: str = "<stream>"):
        self.stream = stream
        super().__init__(iter(lambda: stream.read(1), ""), filename)
