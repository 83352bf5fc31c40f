"""
Kaleidoscope Parser Implementation

Recursive descent for declarations plus precedence climbing for binary
expressions. Tokens are pulled one at a time through a TokenBuffer, so the
parser works the same over a token list and over a live lexer.

Grammar:
    program    := (topLevel)*
    topLevel   := "def" prototype expression
                | "extern" prototype
                | ";"
                | expression
    prototype  := ident "(" [ident ("," ident)*] ")"
    expression := primary (binop primary)*
    primary    := ident ["(" [expression ("," expression)*] ")"]
                | number
                | "(" expression ")"

Author: xwest
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Expression, NumberLiteral, VariableReference, BinaryOp, Call,
    Prototype, Function, ExternDeclaration, FunctionDefinition, Declaration,
    Program
)
from .buffer import TokenBuffer
from .errors import UnknownOperatorError, unexpected

logger = logging.getLogger(__name__)


# Higher binds tighter. Fixed; not user-extensible.
BINOP_PRECEDENCE: Dict[str, int] = {
    '<': 10,
    '>': 10,
    '+': 20,
    '-': 20,
    '*': 40,
    '/': 40,
}

ANONYMOUS_FUNCTION_PREFIX = "__anon_expr_"


class Parser:
    """
    Kaleidoscope parser.

    Stops at the first syntax error. Resynchronizing is up to the caller,
    see skip_to_delimiter().
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a token stream.

        Args:
            tokens: Any iterable of tokens, normally ending with EOF
        """
        self.buffer = TokenBuffer(tokens)
        self._anonymous_count = 0

    @property
    def at_end(self) -> bool:
        return self._check(TokenType.EOF)

    def parse(self) -> Program:
        """Parse declarations until end of input."""
        declarations: List[Declaration] = []

        while True:
            declaration = self.parse_top_level()
            if declaration is None:
                break
            declarations.append(declaration)

        return Program(tuple(declarations))

    def parse_top_level(self) -> Optional[Declaration]:
        """
        Parse a single top-level declaration.

        Bare ';' tokens are skipped. Returns None at end of input.
        """
        while self._match(TokenType.DELIMITER):
            pass

        if self._check(TokenType.EOF):
            return None

        if self._check(TokenType.DEF):
            declaration = FunctionDefinition(self._parse_definition())
        elif self._check(TokenType.EXTERN):
            declaration = ExternDeclaration(self._parse_extern())
        else:
            declaration = FunctionDefinition(self._parse_top_level_expression())

        logger.debug("parsed top-level %s", type(declaration).__name__)
        return declaration

    def skip_to_delimiter(self):
        """
        Discard tokens through the next ';' (or up to end of input).

        Never called by the parser itself; a driver calls it after a
        ParseError to resume at the next declaration.
        """
        while not self._check(TokenType.DELIMITER) and not self._check(TokenType.EOF):
            self._advance()
        self._match(TokenType.DELIMITER)

    def _parse_definition(self) -> Function:
        """def prototype expression"""
        self._consume(TokenType.DEF, "expected 'def'")
        prototype = self.parse_prototype()
        body = self.parse_expression()
        return Function(prototype, body)

    def _parse_extern(self) -> Prototype:
        """extern prototype"""
        self._consume(TokenType.EXTERN, "expected 'extern'")
        return self.parse_prototype()

    def _parse_top_level_expression(self) -> Function:
        """Wrap a bare expression in a uniquely named nullary function."""
        body = self.parse_expression()
        self._anonymous_count += 1
        name = f"{ANONYMOUS_FUNCTION_PREFIX}{self._anonymous_count}"
        return Function(Prototype(name, ()), body)

    def parse_prototype(self) -> Prototype:
        """ident '(' [ident (',' ident)*] ')'"""
        name = self._consume(TokenType.IDENTIFIER, "expected function name in prototype").value
        self._consume(TokenType.LEFT_PAREN, "expected '(' in prototype")

        params: List[str] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                param = self._consume(TokenType.IDENTIFIER, "expected parameter name in prototype")
                params.append(param.value)
                if not self._match(TokenType.COMMA):
                    break

        self._consume(TokenType.RIGHT_PAREN, "expected ',' or ')' in prototype")
        return Prototype(name, tuple(params))

    def parse_expression(self) -> Expression:
        """primary (binop primary)*"""
        lhs = self.parse_primary()
        return self.parse_bin_op_rhs(0, lhs)

    def parse_bin_op_rhs(self, min_precedence: int, lhs: Expression) -> Expression:
        """
        Fold binary operators binding at least as tight as min_precedence
        onto lhs.

        Equal precedence associates left. When the operator after rhs binds
        tighter, it is absorbed into rhs first. An operator below the
        threshold is left unconsumed.
        """
        while True:
            operator_token = self._peek()
            if operator_token.type != TokenType.BINARY_OP:
                return lhs

            precedence = self._get_precedence(operator_token)
            if precedence < min_precedence:
                return lhs

            self._advance()
            rhs = self.parse_primary()

            next_token = self._peek()
            if (next_token.type == TokenType.BINARY_OP and
                    self._get_precedence(next_token) > precedence):
                rhs = self.parse_bin_op_rhs(precedence + 1, rhs)

            lhs = BinaryOp(operator_token.value, lhs, rhs)

    def parse_primary(self) -> Expression:
        """identifier expression, number, or parenthesized expression"""
        token = self._peek()

        if token.type == TokenType.IDENTIFIER:
            return self._parse_identifier_expression()
        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token.value)
        if token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        raise unexpected(token, "expected primary expression")

    def _parse_identifier_expression(self) -> Expression:
        """A call when '(' follows directly, otherwise a variable."""
        name = self._peek().value

        if self.buffer.peek().type != TokenType.LEFT_PAREN:
            self._advance()
            return VariableReference(name)

        self._advance()  # identifier
        self._advance()  # (

        args: List[Expression] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                args.append(self.parse_expression())
                if not self._match(TokenType.COMMA):
                    break

        self._consume(TokenType.RIGHT_PAREN, "expected ',' or ')' in argument list")
        return Call(name, tuple(args))

    def _parse_grouping(self) -> Expression:
        """'(' expression ')'"""
        self._consume(TokenType.LEFT_PAREN, "expected '('")
        expr = self.parse_expression()
        self._consume(TokenType.RIGHT_PAREN, "expected ')' after expression")
        return expr

    def _get_precedence(self, token: Token) -> int:
        """Precedence of a binary operator token."""
        try:
            return BINOP_PRECEDENCE[token.value]
        except KeyError:
            raise UnknownOperatorError(token.value, token) from None

    # Token helpers

    def _peek(self) -> Token:
        """The current token (not consumed)."""
        return self.buffer.current

    def _advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.buffer.current
        self.buffer.advance()
        return token

    def _check(self, token_type: TokenType) -> bool:
        return self.buffer.current.type == token_type

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _consume(self, token_type: TokenType, expected: str) -> Token:
        """Consume a token of the given type or raise a ParseError."""
        if self._check(token_type):
            return self._advance()
        raise unexpected(self._peek(), expected)


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import Lexer

    lexer = Lexer(source, filename)
    parser = Parser(lexer.tokens_stream())
    return parser.parse()


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    The file is read through the lexer's stream input, one character at a
    time, rather than loaded whole.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import Lexer

    with open(filepath, 'r', encoding='utf-8') as f:
        lexer = Lexer(f, filepath)
        parser = Parser(lexer.tokens_stream())
        return parser.parse()
