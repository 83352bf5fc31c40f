"""
Kaleidoscope Codegen Package.

Interface that code generation backends implement to consume the AST.

Author: xwest
"""

from .interface import (
    CodeGenerator, CodegenError, FunctionHandle, MockCodeGenerator,
    compile_program, create_mock_codegen
)

__all__ = [
    'CodeGenerator', 'CodegenError', 'FunctionHandle', 'MockCodeGenerator',
    'compile_program', 'create_mock_codegen',
]
