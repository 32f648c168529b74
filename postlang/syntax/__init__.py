"""Syntax — Lexer, directive grammar and parser for PostLang source."""

from postlang.syntax.grammar import DIRECTIVES, DirectiveSpec, get_directive
from postlang.syntax.lexer import LineStream, LogicalLine, classify_line
from postlang.syntax.parser import parse

__all__ = [
    "DIRECTIVES",
    "DirectiveSpec",
    "LineStream",
    "LogicalLine",
    "classify_line",
    "get_directive",
    "parse",
]
