"""
graphcalc formula language.

Tokenizer, parser and code generator that turn a typed formula into
expression text for the host's evaluation function.

Usage:
    from graphcalc.core.expression_lang import compile_formula

    compile_formula("1+2*3")
    # '(1.lf+(2.lf*3.lf))'
"""

from graphcalc.core.expression_lang.codegen import generate
from graphcalc.core.expression_lang.compiler import (
    DEFAULT_TEMPLATE,
    check_template,
    compile_formula,
    compile_function,
    embed_expression,
)
from graphcalc.core.expression_lang.parser import parse_formula, parse_tokens
from graphcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "DEFAULT_TEMPLATE",
    "Token",
    "TokenKind",
    "check_template",
    "compile_formula",
    "compile_function",
    "embed_expression",
    "generate",
    "parse_formula",
    "parse_tokens",
    "tokenize",
]
