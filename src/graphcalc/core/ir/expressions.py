"""
Expression AST for graphcalc formulas.

A closed set of node types. Every node is a frozen model that owns its
children exclusively, so a parsed tree is finite and acyclic.

Supports:
- Arithmetic: +, -, *, /, ** (power)
- Unary minus: -x
- Function calls from the math and builtin registries: sin(x), min(x, y)
- Reserved constants: x, y, pi, e
- Number literals, kept as written: 2, 2.5, .5, 3.
- Parenthesised groups: (x + 1)
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from graphcalc.core.registry import RESERVED_CONSTANTS, FunctionSignature, lookup_function

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOperator(StrEnum):
    """Binary operators, in source spelling."""

    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    POWER = "**"


class UnaryOperator(StrEnum):
    """Unary operators, in source spelling."""

    MINUS = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal. The text is kept exactly as typed."""

    text: str = Field(description="Literal text, e.g. '2', '2.5', '.5'")

    model_config = ConfigDict(frozen=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Digits with at most one decimal point."""
        if not v or any(c not in "0123456789." for c in v):
            raise ValueError(f"not a numeric literal: {v!r}")
        if v.count(".") > 1:
            raise ValueError(f"two dots in number: {v!r}")
        if v == ".":
            raise ValueError("invalid number: '.'")
        return v

    def __str__(self) -> str:
        return self.text


class Const(BaseModel):
    """A reserved constant bound by the host: x, y, pi or e."""

    name: str

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v not in RESERVED_CONSTANTS:
            raise ValueError(f"unknown constant {v}")
        return v

    def __str__(self) -> str:
        return self.name


class BinaryExpression(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOperator
    left: Expression
    right: Expression

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.left} {self.op.value} {self.right}"


class UnaryExpression(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOperator
    operand: Expression

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op.value}{self.operand}"


class FunctionCall(BaseModel):
    """
    Function call: name(arg1, arg2, ...).

    The name is the one the user typed (``sin``, not ``gc_sin``). It must
    resolve in the math or builtin registry with a matching arity.
    """

    name: str = Field(description="Function name as written in the formula")
    args: list[Expression] = Field(default_factory=list, description="Arguments")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_signature(self) -> FunctionCall:
        sig = lookup_function(self.name)
        if sig is None:
            raise ValueError(f"unknown function {self.name}")
        if sig.arity != len(self.args):
            raise ValueError(
                f"invalid number of arguments to function {self.name} "
                f"expected {sig.arity} received {len(self.args)}"
            )
        return self

    @property
    def signature(self) -> FunctionSignature:
        """The registry entry this call resolved to."""
        sig = lookup_function(self.name)
        if sig is None:
            raise ValueError(f"unknown function {self.name}")
        return sig

    def __str__(self) -> str:
        args_str = ", ".join(map(str, self.args))
        return f"{self.name}({args_str})"


class Grouping(BaseModel):
    """Parentheses from the source. Has no effect on meaning."""

    inner: Expression

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.inner})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expression = BinaryExpression | UnaryExpression | FunctionCall | Const | Number | Grouping

# Rebuild models for recursive forward references
BinaryExpression.model_rebuild()
UnaryExpression.model_rebuild()
FunctionCall.model_rebuild()
Grouping.model_rebuild()
