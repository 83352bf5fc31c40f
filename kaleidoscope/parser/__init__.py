"""
Kaleidoscope Parser Package

Recursive descent parser with precedence climbing for binary operators.
Produces an immutable Abstract Syntax Tree.

Key Features:
- Pulls tokens on demand, at most one token of lookahead
- Fixed operator precedence table, left-associative operators
- Anonymous top-level expressions wrapped as nullary functions
- Stops at the first error; resynchronizing is explicit

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTVisitor,
    Expression, NumberLiteral, VariableReference, BinaryOp, Call,
    Prototype, Function,
    TopLevel, ExternDeclaration, FunctionDefinition, Declaration,
    Program,
)
from .buffer import TokenBuffer
from .parser import (
    Parser, BINOP_PRECEDENCE, ANONYMOUS_FUNCTION_PREFIX, parse_string, parse_file
)
from .errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError, UnknownOperatorError
)

__all__ = [
    # Core parser
    "Parser", "TokenBuffer", "BINOP_PRECEDENCE", "ANONYMOUS_FUNCTION_PREFIX",
    "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTVisitor",
    "Expression", "NumberLiteral", "VariableReference", "BinaryOp", "Call",
    "Prototype", "Function",
    "TopLevel", "ExternDeclaration", "FunctionDefinition", "Declaration",
    "Program",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnexpectedEndOfInputError",
    "UnknownOperatorError",
]
