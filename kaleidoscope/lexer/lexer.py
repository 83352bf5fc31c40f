"""
Kaleidoscope Lexer - turns characters into tokens, one per request.

The lexer reads through an InputCursor and never looks further ahead than
the cursor's single lookahead character. Tokens are produced on demand, so
the parser can drive it over an interactive stream.

Number policy: a number is the maximal run of digits and dots. The whole
run is consumed and then parsed, so `1.4.2` is reported as one malformed
literal with its full text instead of being split.

xwest
"""

import logging
import math
from typing import Iterator, List, Optional, TextIO, Union

from .input import InputCursor, StringInput, StreamInput
from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, PUNCTUATION, OPERATOR_CHARS,
    COMMENT_CHAR
)
from .errors import LexerError, MalformedNumberError, UnrecognizedCharacterError

logger = logging.getLogger(__name__)

Source = Union[str, InputCursor, TextIO]


class Lexer:
    """
    Kaleidoscope lexical analyzer.

    Three ways to drive it:
    - next_token(): one token per call, raises LexerError on bad input
    - iteration: yields Token or LexerError values until end of input
    - tokenize(): batch mode, collects errors and returns a token list
    """

    def __init__(self, source: Source, filename: str = "<unknown>"):
        """
        Initialize the lexer.

        Args:
            source: Source string, an InputCursor, or a readable text stream
            filename: Name of source for error reporting
        """
        if isinstance(source, InputCursor):
            self.input = source
        elif isinstance(source, str):
            self.input = StringInput(source, filename)
        else:
            self.input = StreamInput(source, filename)

        self.filename = filename
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def next_token(self) -> Token:
        """
        Produce exactly one token.

        Returns an EOF token at end of input, and keeps doing so.

        Raises:
            LexerError: if the next token is malformed. The offending input
                has already been consumed.
        """
        self._skip_whitespace_and_comments()

        location = self.input.location
        current_char = self.input.current

        if current_char is None:
            return Token(TokenType.EOF, "", None, location)

        # Punctuation
        if current_char in PUNCTUATION:
            self.input.advance()
            return Token(PUNCTUATION[current_char], current_char, None, location)

        # Binary operators
        if current_char in OPERATOR_CHARS:
            self.input.advance()
            return Token(TokenType.BINARY_OP, current_char, current_char, location)

        # Identifiers and keywords
        if current_char.isalpha():
            return self._tokenize_identifier_or_keyword(location)

        # Numbers, including a leading '.'
        if self._is_digit(current_char) or current_char == '.':
            return self._tokenize_number(location)

        self.input.advance()
        raise UnrecognizedCharacterError(current_char, location)

    def __iter__(self) -> Iterator[Union[Token, LexerError]]:
        """Yield tokens and lexical errors in source order, without EOF."""
        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                logger.debug("lexical error at %s: %s", e.location, e.message)
                yield e
                continue

            if token.type == TokenType.EOF:
                return
            yield token

    def tokens_stream(self) -> "TokenStream":
        """
        Tokens up to and including EOF, raising on lexical errors.

        This is the stream the parser consumes. A LexerError does not end
        it: the next pull resumes after the offending input.
        """
        return TokenStream(self)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire input.

        Lexical errors are collected in self.errors and lexing continues
        after each one.

        Returns:
            List of tokens including EOF token
        """
        self.tokens.clear()
        self.errors.clear()

        for item in self:
            if isinstance(item, LexerError):
                self.errors.append(item)
            else:
                self.tokens.append(item)

        self.tokens.append(Token(TokenType.EOF, "", None, self.input.location))

        logger.debug("tokenized %s: %d tokens, %d errors",
                     self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and '#' comments through end of line."""
        c = self.input.current
        while c is not None:
            if c.isspace():
                c = self.input.advance()
                continue

            if c == COMMENT_CHAR:
                while c is not None and c != '\n':
                    c = self.input.advance()
                # Eat the newline as well
                c = self.input.advance()
                continue

            break

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        """Collect a maximal run of letters and ASCII digits."""
        chars = [self.input.current]
        c = self.input.advance()
        while c is not None and (c.isalpha() or self._is_digit(c)):
            chars.append(c)
            c = self.input.advance()

        lexeme = ''.join(chars)
        token_type = KEYWORDS.get(lexeme)
        if token_type is not None:
            return Token(token_type, lexeme, None, location)
        return Token(TokenType.IDENTIFIER, lexeme, lexeme, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Collect digits and dots, then parse the run as a float."""
        chars = [self.input.current]
        c = self.input.advance()
        while c is not None and (self._is_digit(c) or c == '.'):
            chars.append(c)
            c = self.input.advance()

        lexeme = ''.join(chars)
        try:
            value = float(lexeme)
        except ValueError:
            raise MalformedNumberError(lexeme, location) from None

        # Very long digit runs overflow to inf
        if not math.isfinite(value):
            raise MalformedNumberError(lexeme, location)

        return Token(TokenType.NUMBER, lexeme, value, location)

    @staticmethod
    def _is_digit(char: Optional[str]) -> bool:
        return char is not None and '0' <= char <= '9'

    def has_errors(self) -> bool:
        """Check if batch tokenizing collected any errors."""
        return len(self.errors) > 0


class TokenStream:
    """
    Iterator over a lexer's tokens that ends after the EOF token.

    Unlike a generator, it survives a raised LexerError, so a driver can
    catch the error, resynchronize and keep pulling.
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self._done = False

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        token = self.lexer.next_token()
        if token.type == TokenType.EOF:
            self._done = True
        return token


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
