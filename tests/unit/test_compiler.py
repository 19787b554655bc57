"""Tests for host function embedding and the formula length cap."""

from __future__ import annotations

import pytest

from graphcalc.core.errors import FormulaError, FormulaLengthError
from graphcalc.core.expression_lang.compiler import (
    DEFAULT_TEMPLATE,
    check_template,
    compile_formula,
    compile_function,
    embed_expression,
)


class TestEmbedExpression:
    """Generated text is spliced into the host function template."""

    def test_default_template(self) -> None:
        assert embed_expression("x") == "float func(float x, float y) { return float(x); }"

    def test_custom_template(self) -> None:
        template = "double f(double x, double y) { return $expr; }"
        assert embed_expression("(x+y)", template) == "double f(double x, double y) { return (x+y); }"

    def test_template_without_placeholder(self) -> None:
        with pytest.raises(ValueError, match=r"\$expr"):
            embed_expression("x", "float func() { return 0.0; }")

    def test_default_template_has_placeholder(self) -> None:
        assert "$expr" in DEFAULT_TEMPLATE

    def test_other_placeholder_is_rejected(self) -> None:
        with pytest.raises(ValueError, match=r"unknown placeholders: \$other"):
            embed_expression("x", "a $expr $other")

    def test_malformed_placeholder_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="malformed"):
            embed_expression("x", "$expr costs $5")

    def test_escaped_dollar_and_braced_placeholder(self) -> None:
        assert embed_expression("(x+y)", "${expr}; // $$") == "(x+y); // $"

    def test_check_template_accepts_repeated_expr(self) -> None:
        assert check_template("$expr + $expr").substitute(expr="x") == "x + x"


class TestCompileFunction:
    """Whole pipeline from formula to host function."""

    def test_compile_function(self) -> None:
        assert compile_function("sin(x) * 2") == (
            "float func(float x, float y) { return float(((gc_sin((x)))*2.lf)); }"
        )

    def test_compile_function_custom_template(self) -> None:
        assert compile_function("pi", "$expr;") == "pi;"


class TestLengthCap:
    """Callers bound latency by capping the formula length."""

    def test_within_cap(self) -> None:
        assert compile_formula("1+2", max_length=3) == "(1.lf+2.lf)"

    def test_over_cap(self) -> None:
        with pytest.raises(FormulaLengthError, match="longer than 3 characters") as exc_info:
            compile_formula("1+2+3", max_length=3)
        assert exc_info.value.pos == 3
        assert isinstance(exc_info.value, FormulaError)

    def test_zero_disables_cap(self) -> None:
        formula = "x" + "+x" * 300
        assert len(formula) > 512
        assert compile_formula(formula, max_length=0).startswith("(")

    def test_cap_checked_before_tokenizing(self) -> None:
        with pytest.raises(FormulaLengthError):
            compile_formula("1.2.3.4", max_length=2)
