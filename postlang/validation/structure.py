"""
Structure Validator — Checks that every required directive is present.
"""

from postlang.core.contracts import Validator
from postlang.ir.schema import Document, Limits, ValidationResult


class RequiredFieldsValidator(Validator):
    """Reports a fixed 'Missing <symbol> (<name>)' error per absent field."""

    @property
    def name(self) -> str:
        return "required_fields"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()

        if not document.title:
            result.errors.append("Missing # (title)")
        if not document.claim:
            result.errors.append("Missing ! (claim)")
        if not document.evidence:
            result.errors.append("Missing + (evidence)")
        if not document.insight:
            result.errors.append("Missing > (insight)")
        if not document.source:
            result.errors.append("Missing @ (source)")

        return result
