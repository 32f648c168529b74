"""
CompileContext — Mutable state passed between pipeline passes.

Each pass reads prior artifacts and mutates only its own fields.
The Document itself is written by the parse pass and only read after.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from postlang.ir.enums import CompileStatus, DiagnosticLevel
from postlang.ir.schema import CompileResult, Diagnostic, Document, TraceEntry


@dataclass
class CompileRequest:
    """Input to the compile pipeline."""

    source: str
    request_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class CompileContext:
    """
    Mutable context passed through pipeline passes.

    A pass that fails its stage sets ``halted`` so the engine stops
    before the next stage; errors and warnings collected so far are
    returned as they are.
    """

    # Input
    request: CompileRequest
    source: str

    # Populated by passes
    document: Optional[Document] = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    output: Optional[str] = None

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    status: CompileStatus = CompileStatus.SUCCESS
    halted: bool = False

    @classmethod
    def from_request(cls, request: CompileRequest) -> "CompileContext":
        """Create a context from a compile request."""
        return cls(request=request, source=request.source)

    def halt(self, status: CompileStatus) -> None:
        """Stop the pipeline after the current pass."""
        self.status = status
        self.halted = True

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
            )
        )

    def add_diagnostic(
        self,
        level: str,
        code: str,
        message: str,
        source: str,
    ) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
            )
        )

    def to_result(self) -> CompileResult:
        """Convert context to final CompileResult."""
        success = self.status == CompileStatus.SUCCESS and self.output is not None
        return CompileResult(
            request_id=self.request.request_id or str(uuid4()),
            success=success,
            status=self.status,
            output=self.output if success else None,
            errors=list(self.errors),
            warnings=list(self.warnings),
            document=self.document,
            trace=self.trace,
            diagnostics=self.diagnostics,
        )
