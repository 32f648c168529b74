"""
IR — Intermediate Representation

The Document is the source of truth for a compilation.
Output text is a rendering of the Document.
"""

from postlang.ir.enums import (
    CompileStatus,
    DiagnosticLevel,
    DirectiveKind,
    DirectiveTier,
    LimitName,
    LineKind,
)
from postlang.ir.schema import (
    AnalysisResult,
    AnalysisStructure,
    CompileResult,
    Diagnostic,
    Document,
    EvidenceItem,
    Limits,
    ParseResult,
    Source,
    TraceEntry,
    ValidationReport,
    ValidationResult,
)

__all__ = [
    # Enums
    "CompileStatus",
    "DiagnosticLevel",
    "DirectiveKind",
    "DirectiveTier",
    "LimitName",
    "LineKind",
    # Models
    "AnalysisResult",
    "AnalysisStructure",
    "CompileResult",
    "Diagnostic",
    "Document",
    "EvidenceItem",
    "Limits",
    "ParseResult",
    "Source",
    "TraceEntry",
    "ValidationReport",
    "ValidationResult",
]
