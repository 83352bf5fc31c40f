"""
Error handling for the Kaleidoscope parser.

The parser stops at the first syntax error and raises one of the
ParseError subclasses below. It does not resynchronize on its own; a
caller that wants to keep going calls Parser.skip_to_delimiter() first.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation, UNKNOWN_LOCATION
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Base class for syntax errors.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation = UNKNOWN_LOCATION,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """A token that does not fit the grammar at this position."""

    def __init__(self, found: Token, expected: str):
        self.found = found
        self.expected = expected
        super().__init__(
            message=f"Unexpected {found.describe()}: {expected}",
            location=found.location,
            token=found,
            code="P001",
            help_text=f"The parser {expected} here, but found {found.describe()} instead.",
            suggestions=suggest_missing_token(expected),
        )


class UnexpectedEndOfInputError(ParseError):
    """Input ended in the middle of a construct."""

    def __init__(self, expected: str, location: SourceLocation = UNKNOWN_LOCATION):
        self.expected = expected
        super().__init__(
            message=f"Unexpected end of input: {expected}",
            location=location,
            code="P010",
            help_text=f"The parser reached the end of the input while it {expected}.",
            suggestions=["Check for incomplete declarations"],
        )


class UnknownOperatorError(ParseError):
    """A binary operator token with no entry in the precedence table."""

    def __init__(self, operator: str, token: Optional[Token] = None):
        self.operator = operator
        super().__init__(
            message=f"Unknown binary operator '{operator}'",
            location=token.location if token is not None else UNKNOWN_LOCATION,
            token=token,
            code="P009",
            help_text="Only the operators in the precedence table can be used.",
        )


def unexpected(found: Token, expected: str) -> ParseError:
    """Build the right error for `found`: end of input or a wrong token."""
    if found.type == TokenType.EOF:
        return UnexpectedEndOfInputError(expected, found.location)
    return UnexpectedTokenError(found, expected)


def suggest_missing_token(expected: str) -> List[str]:
    """Suggest what token might be missing."""
    token_suggestions = {
        "')'": ["Add a closing parenthesis ')'"],
        "'('": ["Add an opening parenthesis '('"],
        "name": ["Names must start with a letter"],
    }

    suggestions = []
    for needle, hints in token_suggestions.items():
        if needle in expected:
            suggestions.extend(hints)
    return suggestions
