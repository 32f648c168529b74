"""
Pass 10 — Parse

Builds the Document from source. Any syntax error halts the
pipeline here so validation never mixes with syntax problems.
"""

from postlang.core.context import CompileContext
from postlang.core.logging import get_pass_logger
from postlang.ir.enums import CompileStatus
from postlang.syntax.parser import parse

PASS_NAME = "p10_parse"
log = get_pass_logger(PASS_NAME)


def parse_source(ctx: CompileContext) -> CompileContext:
    """Parse ctx.source into ctx.document."""
    result = parse(ctx.source)
    ctx.document = result.document

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="parsed_source",
        before=f"{len(ctx.source)} chars",
        after=f"{len(result.document.evidence)} evidence items, {len(result.parse_errors)} errors",
    )

    if result.parse_errors:
        ctx.errors.extend(result.parse_errors)
        log.info("parse_failed", errors=len(result.parse_errors))
        ctx.halt(CompileStatus.PARSE_FAILED)

    return ctx
