"""Syntax subpackage: lexical scanning of nccl source text.

Re-exports the public API for the syntax module:
- Lexer: lazy iterable of Line records for one document
- Line: one logical line (depth, text, physical line number)
"""

from nccl.syntax.lexer import Lexer, Line

__all__ = ["Lexer", "Line"]
