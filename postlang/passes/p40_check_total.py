"""
Pass 40 — Total Length

Checks the rendered post against the total limit, after generation,
since only the rendered text has a final length.
"""

from postlang.core.context import CompileContext
from postlang.core.logging import get_pass_logger
from postlang.ir.enums import CompileStatus

PASS_NAME = "p40_check_total"
log = get_pass_logger(PASS_NAME)


def check_total(ctx: CompileContext) -> CompileContext:
    """Fail the compile when the output exceeds the total limit."""
    limit = ctx.document.effective_limits().total
    length = len(ctx.output)

    if length > limit:
        ctx.errors.append(f"Output exceeds {limit} chars (has {length})")
        log.info("output_too_long", limit=limit, length=length)
        ctx.halt(CompileStatus.TOO_LONG)

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="checked_total",
        after=f"{length}/{limit} chars",
    )

    return ctx
