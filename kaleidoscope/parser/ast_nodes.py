"""
Abstract Syntax Tree node definitions for Kaleidoscope.

Nodes are plain immutable data. Each parent owns its children outright:
no node is shared between two parents and nothing points back up the tree.
Equality is structural, so two parses of the same input compare equal.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Tuple, Union


class ASTVisitor:
    """
    Base visitor for traversing AST nodes.

    visit(node) dispatches to visit_<ClassName>(node) when defined and
    falls back to generic_visit, which visits every child in order.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        for child in node.children():
            self.visit(child)
        return None


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def walk(self):
        """Yield this node and all descendants, depth-first, pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions. Every expression evaluates to a float."""
    pass


@dataclass(frozen=True)
class NumberLiteral(Expression):
    """Numeric literal: 4.0"""
    value: float

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class VariableReference(Expression):
    """Reference to a function parameter: x"""
    name: str

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation: left <operator> right"""
    operator: str
    left: Expression
    right: Expression

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class Call(Expression):
    """Function call: callee(arg, ...)"""
    callee: str
    args: Tuple[Expression, ...] = ()

    def children(self) -> List[ASTNode]:
        return list(self.args)

    def __str__(self) -> str:
        return f"{self.callee}({', '.join(str(arg) for arg in self.args)})"


# ============================================================================
# Functions
# ============================================================================

@dataclass(frozen=True)
class Prototype(ASTNode):
    """
    Signature of a callable: its name and parameter names.

    Duplicate parameter names are accepted here; rejecting them is left
    to whoever compiles the prototype.
    """
    name: str
    params: Tuple[str, ...] = ()

    def children(self) -> List[ASTNode]:
        return []

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.params)})"


@dataclass(frozen=True)
class Function(ASTNode):
    """A prototype together with its body expression."""
    prototype: Prototype
    body: Expression

    def children(self) -> List[ASTNode]:
        return [self.prototype, self.body]

    @property
    def name(self) -> str:
        return self.prototype.name


# ============================================================================
# Top-level declarations
# ============================================================================

class TopLevel(ASTNode):
    """Base class for top-level declarations."""
    pass


@dataclass(frozen=True)
class ExternDeclaration(TopLevel):
    """extern name(params)"""
    prototype: Prototype

    def children(self) -> List[ASTNode]:
        return [self.prototype]


@dataclass(frozen=True)
class FunctionDefinition(TopLevel):
    """def name(params) body, or an anonymous top-level expression."""
    function: Function

    def children(self) -> List[ASTNode]:
        return [self.function]


Declaration = Union[ExternDeclaration, FunctionDefinition]


@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node: top-level declarations in source order."""
    declarations: Tuple[Declaration, ...] = ()

    def children(self) -> List[ASTNode]:
        return list(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self):
        return iter(self.declarations)

    @property
    def externs(self) -> List[Prototype]:
        return [d.prototype for d in self.declarations if isinstance(d, ExternDeclaration)]

    @property
    def functions(self) -> List[Function]:
        return [d.function for d in self.declarations if isinstance(d, FunctionDefinition)]
