"""
graphcalc - formula compiler for an interactive surface plotter.

Turns a typed infix formula such as ``sin(x) * y ** 2`` into validated
expression text for the plotter's evaluation function.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ConfigError,
    FormulaError,
    FormulaLengthError,
    FormulaSyntaxError,
    GraphCalcError,
    TokenizationError,
)
from .core.expression_lang import (
    DEFAULT_TEMPLATE,
    compile_formula,
    compile_function,
    embed_expression,
    generate,
    parse_formula,
    tokenize,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "DEFAULT_TEMPLATE",
    "compile_formula",
    "compile_function",
    "embed_expression",
    "generate",
    "parse_formula",
    "tokenize",
    "ConfigError",
    "FormulaError",
    "FormulaLengthError",
    "FormulaSyntaxError",
    "GraphCalcError",
    "TokenizationError",
]
