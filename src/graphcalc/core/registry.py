"""
Static registries of callable functions and reserved constants.

Math functions are emitted under an intrinsic name with the ``gc_`` prefix
so they never collide with host built-ins of the same name. Builtin helpers
are emitted unchanged. All tables are read-only for the process lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

INTRINSIC_PREFIX = "gc_"
POW_INTRINSIC = f"{INTRINSIC_PREFIX}pow"

# Looked up first. Every math function takes one argument.
MATH_FUNCTIONS: MappingProxyType[str, int] = MappingProxyType(
    {
        "sin": 1,
        "cos": 1,
        "tan": 1,
        "asin": 1,
        "acos": 1,
        "atan": 1,
        "sinh": 1,
        "cosh": 1,
        "tanh": 1,
        "asinh": 1,
        "acosh": 1,
        "atanh": 1,
        "exp": 1,
        "log": 1,
        "exp2": 1,
        "log2": 1,
    }
)

BUILTIN_FUNCTIONS: MappingProxyType[str, int] = MappingProxyType(
    {
        "mod": 2,
        "min": 2,
        "max": 2,
        "floor": 1,
        "ceil": 1,
        "abs": 1,
        "inversesqrt": 1,
        "sqrt": 1,
    }
)

RESERVED_CONSTANTS: frozenset[str] = frozenset({"x", "y", "pi", "e"})


class FunctionKind(StrEnum):
    """Which registry a function name was resolved from."""

    MATH = "math"
    BUILTIN = "builtin"


@dataclass(frozen=True)
class FunctionSignature:
    """A resolved registry entry."""

    name: str
    arity: int
    kind: FunctionKind

    @property
    def emitted_name(self) -> str:
        """Name used in generated code."""
        if self.kind == FunctionKind.MATH:
            return INTRINSIC_PREFIX + self.name
        return self.name


def lookup_function(name: str) -> FunctionSignature | None:
    """Resolve a function name, math registry first, then builtin helpers."""
    if name in MATH_FUNCTIONS:
        return FunctionSignature(name, MATH_FUNCTIONS[name], FunctionKind.MATH)
    if name in BUILTIN_FUNCTIONS:
        return FunctionSignature(name, BUILTIN_FUNCTIONS[name], FunctionKind.BUILTIN)
    return None


def is_reserved_constant(name: str) -> bool:
    return name in RESERVED_CONSTANTS


def host_intrinsics() -> tuple[str, ...]:
    """Intrinsic names the host program must define, in registry order."""
    return tuple(INTRINSIC_PREFIX + name for name in MATH_FUNCTIONS) + (POW_INTRINSIC,)


def registered_functions() -> tuple[FunctionSignature, ...]:
    """Every callable function, math registry first, each in table order."""
    return tuple(
        FunctionSignature(name, arity, FunctionKind.MATH) for name, arity in MATH_FUNCTIONS.items()
    ) + tuple(
        FunctionSignature(name, arity, FunctionKind.BUILTIN)
        for name, arity in BUILTIN_FUNCTIONS.items()
    )
