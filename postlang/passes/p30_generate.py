"""
Pass 30 — Generate

Renders the validated Document to post text.
"""

from postlang.core.context import CompileContext
from postlang.core.logging import get_pass_logger
from postlang.render.generator import generate

PASS_NAME = "p30_generate"
log = get_pass_logger(PASS_NAME)


def generate_output(ctx: CompileContext) -> CompileContext:
    """Render ctx.document into ctx.output."""
    ctx.output = generate(ctx.document)

    log.verbose("rendered", output_chars=len(ctx.output))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="rendered_post",
        after=f"{len(ctx.output)} chars",
    )

    return ctx
