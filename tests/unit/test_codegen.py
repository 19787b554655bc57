"""Tests for host code generation and the compile pipeline."""

from __future__ import annotations

import pytest

from graphcalc.core.errors import FormulaSyntaxError, TokenizationError
from graphcalc.core.expression_lang.codegen import CodegenError, format_number, generate
from graphcalc.core.expression_lang.compiler import compile_formula
from graphcalc.core.expression_lang.parser import parse_formula
from graphcalc.core.ir.expressions import (
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


class TestNumberFormatting:
    """Every emitted number is a double literal."""

    def test_integer_gets_point_and_suffix(self) -> None:
        assert format_number("2") == "2.lf"

    def test_decimal_gets_suffix(self) -> None:
        assert format_number("2.5") == "2.5lf"

    def test_trailing_point_kept(self) -> None:
        assert format_number("3.") == "3.lf"

    def test_leading_point_kept(self) -> None:
        assert format_number(".5") == ".5lf"


class TestGenerate:
    """Tree walk over every node type."""

    def test_binary_operators(self) -> None:
        for op in ("+", "-", "*", "/"):
            expr = BinaryExpression(op=BinaryOperator(op), left=Const(name="x"), right=Number(text="1"))
            assert generate(expr) == f"(x{op}1.lf)"

    def test_power_is_intrinsic_call(self) -> None:
        expr = BinaryExpression(op=BinaryOperator.POWER, left=Const(name="x"), right=Number(text="2"))
        assert generate(expr) == "gc_pow(x,2.lf)"

    def test_unary_renders_as_plus(self) -> None:
        expr = UnaryExpression(op=UnaryOperator.MINUS, operand=Const(name="y"))
        assert generate(expr) == "(+y)"

    def test_math_function_is_prefixed(self) -> None:
        expr = FunctionCall(name="tanh", args=[Const(name="x")])
        assert generate(expr) == "(gc_tanh((x)))"

    def test_builtin_function_keeps_name(self) -> None:
        expr = FunctionCall(name="mod", args=[Const(name="x"), Number(text="2")])
        assert generate(expr) == "(mod((x),(2.lf)))"

    def test_digit_suffixed_math_function(self) -> None:
        # Only reachable from hand-built trees; formulas split "exp2" at the digit.
        expr = FunctionCall(name="exp2", args=[Const(name="x")])
        assert generate(expr) == "(gc_exp2((x)))"

    def test_constants_verbatim(self) -> None:
        for name in ("x", "y", "pi", "e"):
            assert generate(Const(name=name)) == name

    def test_grouping_is_transparent(self) -> None:
        assert generate(Grouping(inner=Const(name="x"))) == "x"
        assert generate(Grouping(inner=Grouping(inner=Number(text="1")))) == "1.lf"

    def test_unknown_node(self) -> None:
        with pytest.raises(CodegenError, match="Unknown expression type"):
            generate("x")  # type: ignore[arg-type]

    def test_deterministic(self) -> None:
        expr = parse_formula("sin(x) * y ** 2 + max(x, y)")
        assert generate(expr) == generate(expr)

    def test_deepest_trees_the_parser_accepts(self) -> None:
        assert generate(parse_formula("(" * 255 + "pi" + ")" * 255)) == "pi"
        chain = generate(parse_formula("x" + "*x" * 511))
        assert chain.startswith("(" * 511 + "x*x)")


class TestCompileFormula:
    """End-to-end formula → host text."""

    @pytest.mark.parametrize(
        ("formula", "expected"),
        [
            ("1+2*3", "(1.lf+(2.lf*3.lf))"),
            ("2**3**2", "gc_pow(gc_pow(2.lf,3.lf),2.lf)"),
            ("sin(x)", "(gc_sin((x)))"),
            ("pi", "pi"),
            ("(1+2)*3", "((1.lf+2.lf)*3.lf)"),
            ("x - y - 1", "((x-y)-1.lf)"),
            ("min(x, y) / 2.5", "((min((x),(y)))/2.5lf)"),
            ("exp(log(x))", "(gc_exp(((gc_log((x))))))"),
            ("floor(x) + ceil(y)", "((floor((x)))+(ceil((y))))"),
            ("inversesqrt(x*x + y*y)", "(inversesqrt((((x*x)+(y*y)))))"),
            ("e ** -x", "gc_pow(e,x)"),
        ],
    )
    def test_examples(self, formula: str, expected: str) -> None:
        assert compile_formula(formula) == expected

    def test_leading_minus_has_no_effect(self) -> None:
        assert compile_formula("-x") == compile_formula("x") == "x"

    def test_whitespace_insensitive(self) -> None:
        assert compile_formula("1 + 2") == compile_formula("1+2")

    def test_errors_propagate(self) -> None:
        with pytest.raises(TokenizationError):
            compile_formula("1.2.3")
        with pytest.raises(FormulaSyntaxError, match="unknown function foo"):
            compile_formula("foo(1)")
        with pytest.raises(FormulaSyntaxError, match="unknown constant z"):
            compile_formula("z")

    def test_digit_suffixed_names_split(self) -> None:
        # Identifiers stop at digits, so exp2 reads as the name exp then 2.
        with pytest.raises(FormulaSyntaxError, match="unknown constant exp"):
            compile_formula("exp2(x)")
        with pytest.raises(FormulaSyntaxError, match="unknown constant log"):
            compile_formula("log2(x)")


def _shape(expr: Expression) -> object:
    """Structure of a tree ignoring groupings and number spelling."""
    if isinstance(expr, Grouping):
        return _shape(expr.inner)
    if isinstance(expr, BinaryExpression):
        return (expr.op, _shape(expr.left), _shape(expr.right))
    if isinstance(expr, Number):
        return float(expr.text)
    if isinstance(expr, Const):
        return expr.name
    raise AssertionError(f"unexpected node {expr!r}")


class TestRoundTrip:
    """Generated text re-parses to the same structure once suffixes are dropped."""

    @pytest.mark.parametrize(
        "formula",
        [
            "1+2*3",
            "(x - y) / 2.5",
            "pi * x + e",
            "x - (y - 1)",
            "1 / 2 / 3 * .5",
            "((x))",
        ],
    )
    def test_round_trip(self, formula: str) -> None:
        generated = compile_formula(formula)
        reparsed = parse_formula(generated.replace("lf", ""))
        assert _shape(reparsed) == _shape(parse_formula(formula))
