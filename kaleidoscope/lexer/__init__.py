"""
Kaleidoscope Lexer Package

Character-level scanner for the Kaleidoscope language. Reads source through
a one-character-lookahead InputCursor and produces tokens on demand.

Key Features:
- Works over strings and interactive streams alike
- '#' line comments
- Keywords def/extern, identifiers, float literals, single-char operators
- Recoverable per-token errors with source locations

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .input import InputCursor, IteratorInput, StringInput, StreamInput
from .lexer import Lexer, TokenStream, tokenize_string, tokenize_file
from .errors import LexerError, MalformedNumberError, UnrecognizedCharacterError

__all__ = [
    "Lexer",
    "TokenStream",
    "Token",
    "TokenType",
    "SourceLocation",
    "InputCursor",
    "IteratorInput",
    "StringInput",
    "StreamInput",
    "LexerError",
    "MalformedNumberError",
    "UnrecognizedCharacterError",
    "tokenize_string",
    "tokenize_file",
]
