"""
Arithmetic expressions over single-letter variables.

Text is lexed into tokens, built into a tree by repeatedly splitting at the
weakest operator, and the tree is evaluated against variable bindings.
"""

from exprtree.parser import ParserError, build
from exprtree.runtime import CalcRuntimeError, InvalidExpressionError, UnboundVariableError, evaluate
from exprtree.tokenizer import lex

__all__ = [
    "lex",
    "build",
    "evaluate",
    "ParserError",
    "CalcRuntimeError",
    "InvalidExpressionError",
    "UnboundVariableError",
]
