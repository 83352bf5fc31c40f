"""
Two-token window over a token stream.

The grammar never needs more than the current token and the one after it,
so the parser pulls tokens through this buffer instead of materializing a
list. The lookahead slot is filled only when peek() asks for it, which
keeps an interactive lexer from blocking on input nobody needs yet.
A stream that runs dry without an EOF token gets one synthesized.
"""

from typing import Iterable, Iterator, Optional

from ..lexer.tokens import Token, TokenType, eof_token


class TokenBuffer:
    """Holds the current token and at most one token of lookahead."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._current: Token = self._pull(None)
        self._next: Optional[Token] = None

    def _pull(self, previous: Optional[Token]) -> Token:
        # Nothing is read past EOF
        if previous is not None and previous.type == TokenType.EOF:
            return previous
        token = next(self._tokens, None)
        if token is None:
            if previous is not None:
                return eof_token(previous.location)
            return eof_token()
        return token

    @property
    def current(self) -> Token:
        return self._current

    def peek(self) -> Token:
        if self._next is None:
            self._next = self._pull(self._current)
        return self._next

    def advance(self) -> Token:
        """Move to the next token and return it. Sticks at EOF."""
        if self._current.type == TokenType.EOF:
            return self._current

        if self._next is not None:
            self._current, self._next = self._next, None
        else:
            self._current = self._pull(self._current)
        return self._current
