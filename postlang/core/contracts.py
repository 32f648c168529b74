"""
Contracts — Interfaces for pipeline components.
"""

from abc import ABC, abstractmethod

from postlang.ir.schema import Document, Limits, ValidationResult


class Validator(ABC):
    """Abstract base for document rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Validator name for diagnostics."""
        ...

    @abstractmethod
    def validate(self, document: Document, limits: Limits) -> ValidationResult:
        """
        Check the document against the effective limits.

        Returns:
            ValidationResult (empty if the rule passes)
        """
        ...
