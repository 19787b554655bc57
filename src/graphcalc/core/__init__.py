"""Core graphcalc functionality: IR, formula language, registries, configuration."""

from . import ir
from .errors import (
    ConfigError,
    FormulaError,
    FormulaLengthError,
    FormulaSyntaxError,
    GraphCalcError,
    TokenizationError,
)

__all__ = [
    "ConfigError",
    "FormulaError",
    "FormulaLengthError",
    "FormulaSyntaxError",
    "GraphCalcError",
    "TokenizationError",
    "ir",
]
