"""
Token definitions for the Kaleidoscope lexer.

The token set is deliberately small:
- Keywords (def, extern)
- Punctuation (; ( ) ,)
- Binary operators, one token type carrying the operator character
- Identifiers and numeric literals (always 64-bit floats)
- End of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Kaleidoscope.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Keywords
    # ========================================================================
    DEF = auto()                    # def
    EXTERN = auto()                 # extern

    # ========================================================================
    # Punctuation
    # ========================================================================
    DELIMITER = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    COMMA = auto()                  # ,

    # ========================================================================
    # Operators, identifiers and literals
    # ========================================================================
    BINARY_OP = auto()              # + - * / < >  (value is the character)
    IDENTIFIER = auto()             # foo, x1
    NUMBER = auto()                 # 42, 3.14, .5, 1.


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting only; two tokens at different places still
    compare equal if they carry the same kind and value.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


UNKNOWN_LOCATION = SourceLocation("<unknown>", 0, 0, 0)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Kaleidoscope language.

    Contains the token type, lexeme (raw text), semantic value and
    source location. Equality looks at type and value only, so `1.` and
    `1.0` are the same NUMBER token.
    """
    type: TokenType
    lexeme: str = field(compare=False)  # Raw text from source
    value: Any = None              # str for identifiers/operators, float for numbers
    location: SourceLocation = field(default=UNKNOWN_LOCATION, compare=False)

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"


# Lookup tables used by the lexer

KEYWORDS = {
    "def": TokenType.DEF,
    "extern": TokenType.EXTERN,
}

PUNCTUATION = {
    ";": TokenType.DELIMITER,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
}

# Every character here lexes to BINARY_OP; the parser owns precedence.
OPERATOR_CHARS = frozenset("+-*/<>")

COMMENT_CHAR = "#"


# Helper constructors, mostly for building token streams by hand

def make_token(token_type: TokenType, lexeme: str, value: Any = None,
               location: SourceLocation = UNKNOWN_LOCATION) -> Token:
    return Token(token_type, lexeme, value, location)


def number_token(value: float, location: SourceLocation = UNKNOWN_LOCATION) -> Token:
    return Token(TokenType.NUMBER, repr(float(value)), float(value), location)


def identifier_token(name: str, location: SourceLocation = UNKNOWN_LOCATION) -> Token:
    return Token(TokenType.IDENTIFIER, name, name, location)


def operator_token(op: str, location: SourceLocation = UNKNOWN_LOCATION) -> Token:
    return Token(TokenType.BINARY_OP, op, op, location)


def eof_token(location: SourceLocation = UNKNOWN_LOCATION) -> Token:
    return Token(TokenType.EOF, "", None, location)
