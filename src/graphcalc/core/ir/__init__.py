"""
graphcalc Intermediate Representation (IR) types.

The expression AST produced by the parser and consumed by the code
generator.
"""

from .expressions import (
    BinaryExpression,
    BinaryOperator,
    Const,
    Expression,
    FunctionCall,
    Grouping,
    Number,
    UnaryExpression,
    UnaryOperator,
)

__all__ = [
    "BinaryExpression",
    "BinaryOperator",
    "Const",
    "Expression",
    "FunctionCall",
    "Grouping",
    "Number",
    "UnaryExpression",
    "UnaryOperator",
]
