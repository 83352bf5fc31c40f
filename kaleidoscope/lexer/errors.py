"""
Error handling for the Kaleidoscope lexer.

Lexical errors are per-token and recoverable. Each error carries a
Diagnostic with the source location, an error code and a help text.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, UNKNOWN_LOCATION


@dataclass
class Diagnostic:
    """Diagnostic record shared by lexer and parser errors."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Base class for lexical errors.

    The lexer has always consumed the offending input by the time one of
    these is raised, so lexing can resume with the next request.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation = UNKNOWN_LOCATION,
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

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __eq__(self, other) -> bool:
        # Errors are compared as values (kind + message), not by identity
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class MalformedNumberError(LexerError):
    """A run of digits and dots that is not a valid float, e.g. `1.4.2`."""

    def __init__(self, literal: str, location: SourceLocation = UNKNOWN_LOCATION):
        self.literal = literal
        super().__init__(
            message=f"Malformed number literal: '{literal}'",
            location=location,
            code="L003",
            help_text="A number is a run of digits with at most one decimal point.",
        )

    def __repr__(self) -> str:
        return f"MalformedNumberError({self.literal!r})"


class UnrecognizedCharacterError(LexerError):
    """A character that cannot start any token."""

    def __init__(self, char: str, location: SourceLocation = UNKNOWN_LOCATION):
        self.char = char
        if char.isprintable():
            help_text = f"The character '{char}' is not valid in Kaleidoscope source code."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        super().__init__(
            message=f"Unrecognized character: {char!r}",
            location=location,
            code="L001",
            help_text=help_text,
        )

    def __repr__(self) -> str:
        return f"UnrecognizedCharacterError({self.char!r})"
