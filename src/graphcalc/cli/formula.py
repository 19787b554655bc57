"""
Formula CLI commands.

- compile: formula → host expression text (or full host function)
- tokens: show the token sequence
- ast: show the parsed expression tree
- functions: show what the host program must provide
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from graphcalc.core.errors import FormulaError
from graphcalc.core.expression_lang import (
    compile_formula,
    embed_expression,
    parse_formula,
    tokenize,
)
from graphcalc.core.ir.expressions import (
    BinaryExpression,
    Const,
    Expression,
    FunctionCall,
    Grouping,
    Number,
    UnaryExpression,
)
from graphcalc.core.registry import POW_INTRINSIC, RESERVED_CONSTANTS, registered_functions

console = Console()


def _fail(error: FormulaError) -> typer.Exit:
    typer.echo(error.describe(), err=True)
    return typer.Exit(code=1)


def compile_command(
    ctx: typer.Context,
    formula: str = typer.Argument(..., help="Formula to compile, e.g. 'sin(x) * y'"),
    embed: bool = typer.Option(
        False,
        "--embed",
        "-e",
        help="Wrap the result in the host function template",
    ),
) -> None:
    """Compile a formula into host expression text."""
    config = ctx.obj
    try:
        text = compile_formula(formula, max_length=config.formula.max_length)
    except FormulaError as e:
        raise _fail(e)

    if embed:
        text = embed_expression(text, config.host.template)
    typer.echo(text)


def tokens_command(
    formula: str = typer.Argument(..., help="Formula to tokenize"),
) -> None:
    """Show the tokens of a formula."""
    try:
        tokens = tokenize(formula)
    except FormulaError as e:
        raise _fail(e)

    table = Table(title=f"{len(tokens)} tokens")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for index, tok in enumerate(tokens):
        table.add_row(str(index), str(tok.kind), tok.text)
    console.print(table)


def ast_command(
    formula: str = typer.Argument(..., help="Formula to parse"),
) -> None:
    """Show the expression tree of a formula."""
    try:
        expr = parse_formula(formula)
    except FormulaError as e:
        raise _fail(e)

    typer.echo(str(expr))
    for line in _tree_lines(expr):
        typer.echo(line)


def _tree_lines(expr: Expression, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(expr, BinaryExpression):
        lines = [f"{indent}BinaryExpression {expr.op.value}"]
        lines += _tree_lines(expr.left, depth + 1)
        lines += _tree_lines(expr.right, depth + 1)
        return lines
    if isinstance(expr, UnaryExpression):
        return [f"{indent}UnaryExpression {expr.op.value}", *_tree_lines(expr.operand, depth + 1)]
    if isinstance(expr, FunctionCall):
        lines = [f"{indent}FunctionCall {expr.name}"]
        for arg in expr.args:
            lines += _tree_lines(arg, depth + 1)
        return lines
    if isinstance(expr, Grouping):
        return [f"{indent}Grouping", *_tree_lines(expr.inner, depth + 1)]
    if isinstance(expr, Const):
        return [f"{indent}Const {expr.name}"]
    if isinstance(expr, Number):
        return [f"{indent}Number {expr.text}"]
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def functions_command() -> None:
    """List functions, intrinsics and constants the host must provide."""
    table = Table(title="Functions")
    table.add_column("Function")
    table.add_column("Arity", justify="right")
    table.add_column("Emitted as")
    for sig in registered_functions():
        table.add_row(sig.name, str(sig.arity), sig.emitted_name)
    table.add_row("**", "2", POW_INTRINSIC)
    console.print(table)

    typer.echo(f"Reserved constants: {', '.join(sorted(RESERVED_CONSTANTS))}")
