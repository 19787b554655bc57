"""
Code generator for graphcalc formulas.

Renders an expression AST as expression text for the host's evaluation
function. The target has double-precision arithmetic, no infix power
operator and named math intrinsics, so:

- every number becomes a double literal: ``2`` → ``2.lf``
- ``a ** b`` becomes ``gc_pow(a,b)``
- math functions get the ``gc_`` prefix, builtin helpers keep their name
- binary arithmetic is fully parenthesised, source groupings are dropped

Pure and deterministic: the same tree always yields the same text.
"""

from __future__ import annotations

from graphcalc.core.errors import GraphCalcError
from graphcalc.core.ir.expressions import (
    BinaryExpression,
    BinaryOperator,
    Const,
    Expression,
    FunctionCall,
    Grouping,
    Number,
    UnaryExpression,
)
from graphcalc.core.registry import POW_INTRINSIC

DOUBLE_SUFFIX = "lf"


class CodegenError(GraphCalcError):
    """Raised for a node outside the closed expression set."""


def generate(expr: Expression) -> str:
    """Render an expression AST as host expression text."""
    if isinstance(expr, BinaryExpression):
        left = generate(expr.left)
        right = generate(expr.right)
        if expr.op == BinaryOperator.POWER:
            return f"{POW_INTRINSIC}({left},{right})"
        return f"({left}{expr.op.value}{right})"

    if isinstance(expr, UnaryExpression):
        # Unary minus is emitted as a plus; the operand is never negated.
        return f"(+{generate(expr.operand)})"

    if isinstance(expr, FunctionCall):
        args = []
        for arg in expr.args:
            args.append(f"({generate(arg)})")
        return f"({expr.signature.emitted_name}({','.join(args)}))"

    if isinstance(expr, Const):
        return expr.name

    if isinstance(expr, Number):
        return format_number(expr.text)

    if isinstance(expr, Grouping):
        return generate(expr.inner)

    raise CodegenError(f"Unknown expression type: {type(expr).__name__}")


def format_number(text: str) -> str:
    """Make a literal unambiguously double: '2' → '2.lf', '2.5' → '2.5lf'."""
    if "." not in text:
        text += "."
    return text + DOUBLE_SUFFIX
