"""
Pass 20 — Validate

Applies structural and stylistic rules. Warnings are kept whatever
the outcome; errors halt the pipeline before generation.
"""

from postlang.core.context import CompileContext
from postlang.core.logging import get_pass_logger
from postlang.ir.enums import CompileStatus
from postlang.validation.validator import DocumentValidator

PASS_NAME = "p20_validate"
log = get_pass_logger(PASS_NAME)


def make_validate_pass(validator: DocumentValidator):
    """Bind a validator (and its style ruleset) into a pass."""

    def validate_document(ctx: CompileContext) -> CompileContext:
        result = validator.validate(ctx.document)
        ctx.warnings.extend(result.warnings)
        for warning in result.warnings:
            ctx.add_diagnostic(
                level="warning",
                code="LIMIT_WARNING",
                message=warning,
                source=PASS_NAME,
            )

        ctx.add_trace(
            pass_name=PASS_NAME,
            action="validated_document",
            after=f"{len(result.errors)} errors, {len(result.warnings)} warnings",
        )

        if result.errors:
            ctx.errors.extend(result.errors)
            log.info("validation_failed", errors=len(result.errors))
            ctx.halt(CompileStatus.INVALID)

        return ctx

    return validate_document
