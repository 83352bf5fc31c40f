"""
Kaleidoscope Front End Package

Lexer and parser for Kaleidoscope, a small expression language with
function definitions, extern declarations, float arithmetic and calls.

Architecture:
    kaleidoscope/
    ├── lexer/           # Input cursor and tokenization
    ├── parser/          # Syntax analysis and AST generation
    └── codegen/         # Interface consumed by code generation backends

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, StringInput, StreamInput, tokenize_string
from .parser import Parser, parse_string, parse_file
from .codegen import CodeGenerator, compile_program

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "StringInput",
    "StreamInput",
    "CodeGenerator",

    # Convenience functions
    "tokenize_string",
    "parse_string",
    "parse_file",
    "compile_program",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
