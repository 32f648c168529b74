"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order, stops at the
first stage that fails, and packages the result.

The engine is NOT where compile logic lives.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from postlang.core.context import CompileContext, CompileRequest
from postlang.core.logging import CompileLogger
from postlang.ir.enums import CompileStatus
from postlang.ir.schema import CompileResult, ValidationReport
from postlang.passes import check_total, generate_output, make_validate_pass, parse_source
from postlang.policy.engine import StyleEngine
from postlang.policy.loader import resolve_ruleset
from postlang.policy.models import StyleRuleset
from postlang.syntax.parser import parse
from postlang.validation.validator import DocumentValidator, validate


# Type alias for a pass function
PassFn = Callable[[CompileContext], CompileContext]


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


def default_pipeline(
    ruleset: Optional[Union[StyleRuleset, str, Path]] = None,
    pipeline_id: str = "default",
) -> Pipeline:
    """
    parse -> validate -> generate -> total length.

    Args:
        ruleset: Style ruleset instance, bundled name or YAML path
            (base ruleset if None)
    """
    validator = DocumentValidator(StyleEngine(resolve_ruleset(ruleset)))
    return Pipeline(
        id=pipeline_id,
        name="PostLang Compile Pipeline",
        passes=[
            parse_source,
            make_validate_pass(validator),
            generate_output,
            check_total,
        ],
    )


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, handles errors, and packages results.
    """

    def __init__(self) -> None:
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def compile(
        self,
        request: CompileRequest,
        pipeline_id: Optional[str] = None,
    ) -> CompileResult:
        """
        Run a compilation.

        Args:
            request: The compile request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            CompileResult with output or errors, trace, and diagnostics
        """
        pipeline_id = pipeline_id or "default"
        ctx = CompileContext.from_request(request)

        if pipeline_id not in self._pipelines:
            ctx.status = CompileStatus.ERROR
            ctx.errors.append(f"Pipeline '{pipeline_id}' not registered")
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_result()

        pipeline = self._pipelines[pipeline_id]
        clog = CompileLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                clog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                clog.pass_end(pass_name)
            except Exception as e:
                clog.pass_error(pass_name, e)
                ctx.status = CompileStatus.ERROR
                ctx.errors.append(f"Internal error in {pass_name}: {e}")
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(pass_name=pass_name, action="error")
                break

            if ctx.halted:
                ctx.add_trace(pass_name=pass_name, action="pipeline_halted")
                break

        clog.compile_complete(
            status=ctx.status.value,
            errors=len(ctx.errors),
            warnings=len(ctx.warnings),
        )

        return ctx.to_result()


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine with the default pipeline registered."""
    global _engine
    if _engine is None:
        _engine = Engine()
        _engine.register_pipeline(default_pipeline())
    return _engine


def compile(source: str, pipeline_id: Optional[str] = None) -> CompileResult:
    """
    Convenience function for simple compilations.

    Args:
        source: PostLang source text
        pipeline_id: Which pipeline to use

    Returns:
        CompileResult
    """
    engine = get_engine()
    request = CompileRequest(source=source)
    return engine.compile(request, pipeline_id)


def validate_source(source: str) -> ValidationReport:
    """
    Parse and validate source without generating output.

    Syntax errors are reported alone; validation only runs on a
    source that parses cleanly.
    """
    parsed = parse(source)
    if not parsed.ok:
        return ValidationReport(valid=False, errors=parsed.parse_errors, warnings=[])
    result = validate(parsed.document)
    return ValidationReport(valid=result.valid, errors=result.errors, warnings=result.warnings)
