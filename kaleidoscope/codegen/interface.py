"""
Boundary between the front end and a code generator.

Code generation itself lives outside this package. A backend plugs in by
implementing CodeGenerator's two operations; compile_program() feeds it a
parsed Program in declaration order.

Author: xwest
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from ..parser.ast_nodes import (
    Program, Prototype, Function, ExternDeclaration, FunctionDefinition
)

logger = logging.getLogger(__name__)


class CodegenError(Exception):
    """Raised by a code generator that cannot compile a declaration."""
    pass


class CodeGenerator(ABC):
    """
    Abstract code generator.

    compile_prototype must be idempotent for a name it already knows:
    it returns the existing handle, so that `extern f(x)` followed by
    `def f(x) ...` compiles cleanly.
    """

    @abstractmethod
    def compile_prototype(self, prototype: Prototype) -> Any:
        """Declare a function and return its handle."""
        pass

    @abstractmethod
    def compile_function(self, function: Function) -> Any:
        """Compile a function definition and return its handle."""
        pass


def compile_program(generator: CodeGenerator, program: Program) -> List[Any]:
    """
    Hand every declaration of a program to a code generator.

    Returns:
        One handle per declaration, in source order

    Raises:
        CodegenError: from the generator, on the first failing declaration
    """
    handles = []
    for declaration in program.declarations:
        if isinstance(declaration, ExternDeclaration):
            handles.append(generator.compile_prototype(declaration.prototype))
        elif isinstance(declaration, FunctionDefinition):
            handles.append(generator.compile_function(declaration.function))
        else:
            raise CodegenError(f"Unsupported declaration: {type(declaration).__name__}")
    logger.debug("compiled %d declarations", len(handles))
    return handles


@dataclass
class FunctionHandle:
    """Handle returned by the mock generator."""
    name: str
    params: tuple
    defined: bool = False


class MockCodeGenerator(CodeGenerator):
    """
    Code generator that only keeps the symbol table.

    Useful for exercising the front end without a real backend. It enforces
    the same declaration rules a real backend would: a redeclaration must
    keep the arity, and a function body may be given only once.
    """

    def __init__(self):
        self.functions: Dict[str, FunctionHandle] = {}

    def compile_prototype(self, prototype: Prototype) -> FunctionHandle:
        handle = self.functions.get(prototype.name)
        if handle is not None:
            if len(handle.params) != prototype.arity:
                raise CodegenError(
                    f"Function {prototype.name} redeclared with {prototype.arity} "
                    f"parameters, previously {len(handle.params)}"
                )
            return handle

        handle = FunctionHandle(prototype.name, prototype.params)
        self.functions[prototype.name] = handle
        return handle

    def compile_function(self, function: Function) -> FunctionHandle:
        handle = self.compile_prototype(function.prototype)
        if handle.defined:
            raise CodegenError(f"Function {function.name} cannot be redefined")
        # Body parameters follow the definition, not an earlier extern
        handle.params = function.prototype.params
        handle.defined = True
        return handle


def create_mock_codegen() -> MockCodeGenerator:
    """Create a code generator that records declarations only."""
    return MockCodeGenerator()
