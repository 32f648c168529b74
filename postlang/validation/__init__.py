"""Validation — Structural and stylistic rules for parsed documents."""

from postlang.validation.lengths import MAX_EVIDENCE_ITEMS
from postlang.validation.validator import DocumentValidator, default_validators, validate

__all__ = [
    "MAX_EVIDENCE_ITEMS",
    "DocumentValidator",
    "default_validators",
    "validate",
]
