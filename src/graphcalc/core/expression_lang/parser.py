"""
Recursive descent parser for graphcalc formulas.

Grammar (precedence low to high, every binary level folds to the left):
    expr     → operand (binop operand)*
    binop    → "+" | "-"   <   "*" | "/"   <   "**"
    operand  → "-"* (call | IDENTIFIER | NUMBER | "(" expr ")")
    call     → IDENTIFIER "(" args? ")"
    args     → expr ("," expr)*

Binary operators are folded by precedence climbing over an operator stack,
so the parser only recurses into parenthesised groups and call arguments.
Nesting is capped at MAX_NESTING and the finished tree at MAX_TREE_DEPTH;
both admit every formula of up to 512 characters.

Function names and constants are checked against the static registries as
soon as they are parsed. Error positions are token indices taken after the
most recent consumption, so they only approximate the failing spot.
"""

from __future__ import annotations

import logging

from graphcalc.core.errors import FormulaSyntaxError
from graphcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
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
from graphcalc.core.registry import is_reserved_constant, lookup_function

logger = logging.getLogger(__name__)

# Open groups and call argument lists.
MAX_NESTING = 256
# Height of the finished tree; code generation walks it recursively.
MAX_TREE_DEPTH = 512

_BINARY_OPS: dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.PLUS,
    TokenKind.MINUS: BinaryOperator.MINUS,
    TokenKind.MULT: BinaryOperator.MULT,
    TokenKind.DIV: BinaryOperator.DIV,
    TokenKind.POWER: BinaryOperator.POWER,
}

_PRECEDENCE: dict[BinaryOperator, int] = {
    BinaryOperator.PLUS: 1,
    BinaryOperator.MINUS: 1,
    BinaryOperator.MULT: 2,
    BinaryOperator.DIV: 2,
    BinaryOperator.POWER: 3,
}


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.nesting = 0

    def is_at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def check(self, kind: TokenKind) -> bool:
        return not self.is_at_end() and self.tokens[self.pos].kind == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.tokens[self.pos - 1]

    def match(self, *kinds: TokenKind) -> Token | None:
        for kind in kinds:
            if self.check(kind):
                return self.advance()
        return None

    def error(self, message: str) -> FormulaSyntaxError:
        return FormulaSyntaxError(message, self.pos)

    def expect_paren_end(self) -> None:
        if not self.match(TokenKind.PAREN_END):
            raise self.error("expected paren end")

    # -- Grammar rules --

    def parse(self) -> Expression:
        """A single expression that consumes every token."""
        expr = self.parse_expr()
        if not self.is_at_end():
            raise self.error("trailing data after expression")
        if tree_depth(expr) > MAX_TREE_DEPTH:
            raise self.error("expression nested too deeply")
        return expr

    def parse_expr(self) -> Expression:
        """operand (binop operand)*"""
        self.nesting += 1
        if self.nesting > MAX_NESTING:
            raise self.error("expression nested too deeply")

        operands = [self.parse_operand()]
        operators: list[BinaryOperator] = []
        while op_tok := self.match(*_BINARY_OPS):
            op = _BINARY_OPS[op_tok.kind]
            while operators and _PRECEDENCE[operators[-1]] >= _PRECEDENCE[op]:
                _reduce(operands, operators)
            operators.append(op)
            operands.append(self.parse_operand())
        while operators:
            _reduce(operands, operators)

        self.nesting -= 1
        return operands[0]

    def parse_operand(self) -> Expression:
        """'-'* (IDENTIFIER ('(' args? ')')? | NUMBER | '(' expr ')')

        An identifier is a function name when '(' follows, otherwise it
        must be a reserved constant.
        """
        # The negation is dropped: "-x" compiles exactly like "x".
        while self.match(TokenKind.MINUS):
            pass

        expr: Expression
        if name_tok := self.match(TokenKind.IDENTIFIER):
            if not self.match(TokenKind.PAREN_START):
                if not is_reserved_constant(name_tok.text):
                    raise self.error(f"unknown constant {name_tok.text}")
                return Const(name=name_tok.text)
            expr = self.finish_call(name_tok.text)
        elif tok := self.match(TokenKind.NUMBER):
            expr = Number(text=tok.text)
        elif self.match(TokenKind.PAREN_START):
            inner = self.parse_expr()
            self.expect_paren_end()
            expr = Grouping(inner=inner)
        else:
            raise self.error("expected expression")

        if self.match(TokenKind.PAREN_START):
            raise self.error("expected function name")
        return expr

    def finish_call(self, name: str) -> FunctionCall:
        """args? ')' after the opening parenthesis has been consumed."""
        args: list[Expression] = []
        if not self.check(TokenKind.PAREN_END):
            args.append(self.parse_expr())
            while self.match(TokenKind.COMMA):
                args.append(self.parse_expr())
        self.expect_paren_end()

        sig = lookup_function(name)
        if sig is None:
            raise self.error(f"unknown function {name}")
        if sig.arity != len(args):
            raise self.error(
                f"invalid number of arguments to function {name} "
                f"expected {sig.arity} received {len(args)}"
            )
        return FunctionCall(name=name, args=args)


def _reduce(operands: list[Expression], operators: list[BinaryOperator]) -> None:
    right = operands.pop()
    left = operands.pop()
    operands.append(BinaryExpression(op=operators.pop(), left=left, right=right))


def tree_depth(expr: Expression) -> int:
    """Height of an expression tree, walked without recursion."""
    deepest = 0
    stack: list[tuple[Expression, int]] = [(expr, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node, BinaryExpression):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        elif isinstance(node, UnaryExpression):
            stack.append((node.operand, depth + 1))
        elif isinstance(node, FunctionCall):
            stack.extend((arg, depth + 1) for arg in node.args)
        elif isinstance(node, Grouping):
            stack.append((node.inner, depth + 1))
    return deepest


def parse_tokens(tokens: list[Token]) -> Expression:
    """Parse an already tokenized formula.

    Raises:
        FormulaSyntaxError: If the tokens do not form exactly one expression,
            or nest deeper than MAX_NESTING / MAX_TREE_DEPTH.
    """
    return _Parser(tokens).parse()


def parse_formula(source: str) -> Expression:
    """Parse a formula string into an AST.

    Args:
        source: Formula string (e.g., "sin(x) + y ** 2")

    Returns:
        Parsed expression AST.

    Raises:
        TokenizationError: If the formula holds a malformed number.
        FormulaSyntaxError: If the formula is not a valid expression.
    """
    tokens = tokenize(source)
    expr = parse_tokens(tokens)
    logger.debug("Parsed %r as %s", source, expr)
    return expr
