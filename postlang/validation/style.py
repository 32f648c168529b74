"""
Style Validator — Banned phrases, emoji and exclamation marks.

Scans title, claim, insight, context and every evidence context.
Credential and source are not prose and are never scanned.
"""

from typing import Optional

from postlang.core.contracts import Validator
from postlang.ir.schema import Document, Limits, ValidationResult
from postlang.policy.engine import StyleEngine, get_style_engine


class StyleValidator(Validator):
    """Validates prose fields against the shared style ruleset."""

    def __init__(self, engine: Optional[StyleEngine] = None) -> None:
        self._engine = engine or get_style_engine()

    @property
    def name(self) -> str:
        return "style"

    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        result = ValidationResult()
        text = " ".join(document.prose_fields())
        if not text:
            return result

        findings = self._engine.inspect(text)

        if findings.has_emoji:
            result.errors.append("Emojis are not allowed")

        for phrase in findings.banned_phrases:
            result.errors.append(f'Banned phrase: "{phrase}"')

        if findings.exclamation_count:
            result.errors.append(
                f"Exclamation marks not allowed (found {findings.exclamation_count})"
            )

        return result
