"""
Document Validator — Runs every rule and collects all findings.

No rule short-circuits another: a document with five problems gets
five messages in one pass.
"""

from typing import Optional, Sequence

from postlang.core.contracts import Validator
from postlang.core.logging import LogChannel, get_logger
from postlang.ir.schema import Document, ValidationResult
from postlang.policy.engine import StyleEngine
from postlang.validation.lengths import (
    ClaimValidator,
    ContextValidator,
    EvidenceValidator,
    InsightValidator,
    TitleValidator,
)
from postlang.validation.structure import RequiredFieldsValidator
from postlang.validation.style import StyleValidator

log = get_logger(LogChannel.VALIDATE)


def default_validators(engine: Optional[StyleEngine] = None) -> list[Validator]:
    """The standard rule set, in reporting order."""
    return [
        RequiredFieldsValidator(),
        TitleValidator(),
        ClaimValidator(),
        EvidenceValidator(),
        InsightValidator(),
        ContextValidator(),
        StyleValidator(engine),
    ]


class DocumentValidator:
    """Applies structural and stylistic rules against the effective limits."""

    def __init__(
        self,
        engine: Optional[StyleEngine] = None,
        validators: Optional[Sequence[Validator]] = None,
    ) -> None:
        self._validators = list(validators) if validators is not None else default_validators(engine)

    @property
    def validators(self) -> list[Validator]:
        return list(self._validators)

    def validate(self, document: Document) -> ValidationResult:
        limits = document.effective_limits()
        result = ValidationResult()

        for validator in self._validators:
            found = validator.validate(document, limits)
            if found.errors or found.warnings:
                log.verbose(
                    "rule_failed",
                    rule=validator.name,
                    errors=len(found.errors),
                    warnings=len(found.warnings),
                )
            result.extend(found)

        log.info(
            "validation_complete",
            errors=len(result.errors),
            warnings=len(result.warnings),
        )
        return result


_default_validator: Optional[DocumentValidator] = None


def validate(document: Document) -> ValidationResult:
    """Validate a parsed document with the base ruleset."""
    global _default_validator
    if _default_validator is None:
        _default_validator = DocumentValidator()
    return _default_validator.validate(document)
