"""
IR Schema — Pydantic models for documents and pipeline results.

The Document is the source of truth for a post; output text is a
rendering of the Document.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from postlang.ir.enums import CompileStatus, DiagnosticLevel

IR_VERSION = "0.1.0"


# ============================================================================
# Document
# ============================================================================

class EvidenceItem(BaseModel):
    """One + directive: a figure and what it measures."""

    value: str = Field(..., description="The figure, e.g. '22%'")
    context: str = Field(..., description="What the figure measures")

    @property
    def text(self) -> str:
        """The rendered form, also used for the length check."""
        return f"{self.value} {self.context}"


class Source(BaseModel):
    """The @ directive."""

    title: str = Field(..., description="Name of the source")
    url: str = Field(..., description="Link, rendered without scheme or www.")
    credibility: Optional[str] = Field(
        None, description="Why this source is credible (optional third segment)"
    )


class Limits(BaseModel):
    """Character limits, with defaults overridable per key by ^ directives."""

    title: int = Field(default=80, gt=0)
    claim: int = Field(default=150, gt=0)
    evidence: int = Field(default=60, gt=0)
    insight: int = Field(default=120, gt=0)
    context: int = Field(default=100, gt=0)
    total: int = Field(default=700, gt=0)


class Document(BaseModel):
    """
    A parsed post.

    Fields are optional because the parser produces a partial document;
    the validator decides which missing fields are errors.
    """

    title: Optional[str] = None
    claim: Optional[str] = None
    evidence: list[EvidenceItem] = Field(default_factory=list)
    insight: Optional[str] = None
    context: Optional[str] = None
    credential: Optional[str] = None
    source: Optional[Source] = None
    limits: dict[str, int] = Field(
        default_factory=dict,
        description="Overrides seen in ^ directives, recognized names only",
    )

    def effective_limits(self) -> Limits:
        """Defaults merged with this document's overrides."""
        return Limits(**self.limits)

    def prose_fields(self) -> list[str]:
        """Text subject to style rules. Credential and source are excluded."""
        parts = [self.title, self.claim, self.insight, self.context]
        parts.extend(item.context for item in self.evidence)
        return [p for p in parts if p]


# ============================================================================
# Pipeline results
# ============================================================================

class ParseResult(BaseModel):
    """Output of the parser."""

    document: Document
    parse_errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.parse_errors


class ValidationResult(BaseModel):
    """Output of the validator."""

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


class ValidationReport(BaseModel):
    """Parse + validate outcome for a source string, without generation."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class TraceEntry(BaseModel):
    """A single pipeline trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None


class Diagnostic(BaseModel):
    """A diagnostic message raised by the engine or a pass."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str


class CompileResult(BaseModel):
    """The complete output of one compilation."""

    version: str = Field(default=IR_VERSION, description="IR schema version")
    request_id: str = Field(..., description="Unique compile ID")
    success: bool
    status: CompileStatus
    output: Optional[str] = Field(None, description="Rendered post, set only on success")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    document: Optional[Document] = None
    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)


# ============================================================================
# Analyzer
# ============================================================================

class AnalysisStructure(BaseModel):
    """Structural elements inferred from plain text."""

    has_title: bool = False
    has_claim: bool = False
    has_evidence: bool = False
    evidence_count: int = Field(
        default=0,
        description=(
            "Evidence signals, not lines: a figure and a bullet marker each count, "
            "so '- 10% up' contributes 2"
        ),
    )
    has_insight: bool = False
    has_source: bool = False


class AnalysisResult(BaseModel):
    """Score and findings for a plain-text post."""

    valid: bool
    score: int = Field(..., ge=0, le=100)
    structure: AnalysisStructure
    issues: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
