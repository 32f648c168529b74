"""
Length Validators — Per-field character limits.

Each validator only inspects its field when the field is present;
absence is the structure validator's concern.
"""

from postlang.core.contracts import Validator
from postlang.ir.schema import Document, Limits, ValidationResult

# Fixed, not overridable by ^ directives
MAX_EVIDENCE_ITEMS = 5


def _exceeds(symbol: str, limit: int, length: int) -> str:
    return f"{symbol} exceeds {limit} chars (has {length})"


class TitleValidator(Validator):
    """Title length, and no question or exclamation titles."""

    @property
    def name(self) -> str:
        return "title"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()
        title = document.title
        if not title:
            return result

        if len(title) > limits.title:
            result.errors.append(_exceeds("#", limits.title, len(title)))
        if title.endswith("?"):
            result.errors.append("# cannot be a question")
        if "!" in title:
            result.errors.append("# cannot contain exclamation marks")

        return result


class ClaimValidator(Validator):

    @property
    def name(self) -> str:
        return "claim"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()
        if document.claim and len(document.claim) > limits.claim:
            result.errors.append(_exceeds("!", limits.claim, len(document.claim)))
        return result


class EvidenceValidator(Validator):
    """Item count, and each item's rendered 'value context' length."""

    @property
    def name(self) -> str:
        return "evidence"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()

        if len(document.evidence) > MAX_EVIDENCE_ITEMS:
            result.errors.append(f"+ limited to {MAX_EVIDENCE_ITEMS} items maximum")

        for index, item in enumerate(document.evidence, start=1):
            length = len(item.text)
            if length > limits.evidence:
                result.errors.append(
                    f"+ item {index} exceeds {limits.evidence} chars (has {length})"
                )

        return result


class InsightValidator(Validator):

    @property
    def name(self) -> str:
        return "insight"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()
        if document.insight and len(document.insight) > limits.insight:
            result.errors.append(_exceeds(">", limits.insight, len(document.insight)))
        return result


class ContextValidator(Validator):
    """An over-long context is a warning, never an error."""

    @property
    def name(self) -> str:
        return "context"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()
        if document.context and len(document.context) > limits.context:
            result.warnings.append(_exceeds("?", limits.context, len(document.context)))
        return result
