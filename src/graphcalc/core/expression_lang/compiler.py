"""
Formula compilation pipeline: string → tokens → AST → host expression text.

Also wraps generated text in the host's evaluation function template.
"""

from __future__ import annotations

import logging
from string import Template

from graphcalc.core.errors import FormulaLengthError
from graphcalc.core.expression_lang.codegen import generate
from graphcalc.core.expression_lang.parser import parse_formula

logger = logging.getLogger(__name__)

# The host binds x and y as arguments; pi and e must be defined beside it.
DEFAULT_TEMPLATE = "float func(float x, float y) { return float($expr); }"


def compile_formula(source: str, *, max_length: int | None = None) -> str:
    """Compile a formula into host expression text.

    Args:
        source: Formula as typed by the user, e.g. "sin(x) * y".
        max_length: Reject formulas longer than this many characters.
            ``None`` or ``0`` means no cap.

    Returns:
        Single-line expression text, e.g. "((gc_sin((x)))*y)".

    Raises:
        FormulaLengthError: If the formula exceeds ``max_length``.
        TokenizationError: If the formula holds a malformed number.
        FormulaSyntaxError: If the formula is not a valid expression.
    """
    if max_length and len(source) > max_length:
        raise FormulaLengthError(f"formula longer than {max_length} characters", max_length)

    expr = parse_formula(source)
    text = generate(expr)
    logger.debug("Compiled %r to %r", source, text)
    return text


def check_template(template: str) -> Template:
    """Accept a host template whose only placeholder is ``$expr``.

    Raises:
        ValueError: On a malformed ``$`` placeholder, a missing ``$expr`` or
            any other ``$name``. A literal dollar sign is written ``$$``.
    """
    tmpl = Template(template)
    if not tmpl.is_valid():
        raise ValueError("host template has a malformed $ placeholder (write $$ for a literal $)")
    identifiers = tmpl.get_identifiers()
    if "expr" not in identifiers:
        raise ValueError("host template has no $expr placeholder")
    unknown = [f"${name}" for name in identifiers if name != "expr"]
    if unknown:
        raise ValueError(f"host template has unknown placeholders: {', '.join(unknown)}")
    return tmpl


def embed_expression(expression: str, template: str = DEFAULT_TEMPLATE) -> str:
    """Substitute generated expression text for ``$expr`` in a host template."""
    return check_template(template).substitute(expr=expression)


def compile_function(
    source: str,
    template: str = DEFAULT_TEMPLATE,
    *,
    max_length: int | None = None,
) -> str:
    """Compile a formula and embed it in the host function template."""
    return embed_expression(compile_formula(source, max_length=max_length), template)
