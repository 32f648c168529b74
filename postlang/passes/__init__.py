"""Passes — Pipeline stages for PostLang compilation."""

from postlang.passes.p10_parse import parse_source
from postlang.passes.p20_validate import make_validate_pass
from postlang.passes.p30_generate import generate_output
from postlang.passes.p40_check_total import check_total

__all__ = [
    "parse_source",
    "make_validate_pass",
    "generate_output",
    "check_total",
]
