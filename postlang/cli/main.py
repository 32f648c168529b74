"""
PostLang CLI — Command-line interface for compiling and analyzing posts.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from postlang import __version__
from postlang.analysis.analyzer import PostAnalyzer
from postlang.core.context import CompileRequest
from postlang.core.engine import Engine, default_pipeline
from postlang.ir.schema import AnalysisResult, CompileResult, Document
from postlang.ir.serialization import analysis_to_json, to_json
from postlang.policy.engine import StyleEngine
from postlang.policy.loader import resolve_ruleset
from postlang.syntax.parser import parse

PRESENT = "yes"
ABSENT = "no"
OPTIONAL_ABSENT = "-"


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="postlang",
        description="Compile PostLang sources into plain-text posts",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"postlang {__version__}",
    )

    # Shared options
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "input",
        type=str,
        help="Path to the input file (use - for stdin)",
    )
    common.add_argument(
        "--ruleset",
        type=str,
        default=None,
        help="Style ruleset: bundled name or path to a YAML file (default: base)",
    )
    common.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: silent, or POSTLANG_LOG_LEVEL env var)",
    )
    common.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels (pipeline,lex,parse,validate,render,analyze,policy,system). Default: all",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    compile_parser = subparsers.add_parser("compile", parents=[common], help="Compile a .post file")
    compile_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    compile_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json (full compile result)",
    )

    subparsers.add_parser("validate", parents=[common], help="Report on a .post file without writing output")

    analyze_parser = subparsers.add_parser("analyze", parents=[common], help="Score a plain-text post")
    analyze_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args)

    try:
        text = read_input(args.input)
    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    if args.command == "compile":
        return run_compile(args, text)
    if args.command == "validate":
        return run_validate(args, text)
    if args.command == "analyze":
        return run_analyze(args, text)

    return 0


def _configure_logging(args: argparse.Namespace) -> None:
    from postlang.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)


def read_input(source: str) -> str:
    """Read a path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(source)
    return path.read_text(encoding="utf-8")


def _compile(args: argparse.Namespace, text: str) -> CompileResult:
    engine = Engine()
    engine.register_pipeline(default_pipeline(args.ruleset))
    return engine.compile(CompileRequest(source=text))


def run_compile(args: argparse.Namespace, text: str) -> int:
    """Run compile command."""
    result = _compile(args, text)

    if args.format == "json":
        _write(to_json(result), args.output)
        return 0 if result.success else 1

    if result.warnings:
        print("Warnings:", file=sys.stderr)
        for warning in result.warnings:
            print(f"  - {warning}", file=sys.stderr)
        print("", file=sys.stderr)

    if not result.success:
        print("Compilation failed:", file=sys.stderr)
        for error in result.errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    _write(result.output, args.output)
    if args.output:
        print(f"Compiled to: {args.output}")
    return 0


def _write(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        print(text)


def run_validate(args: argparse.Namespace, text: str) -> int:
    """Print a structure and length report for a source file."""
    result = _compile(args, text)
    document = parse(text).document
    print(format_validation_report(document, result))
    return 0 if result.success else 1


def format_validation_report(document: Document, result: CompileResult) -> str:
    """Human-readable structure, length and status report."""
    lines = [
        "PostLang Validation Report",
        "==========================",
        "",
        "Structure:",
        f"  # Title:      {PRESENT if document.title else ABSENT}",
        f"  ! Claim:      {PRESENT if document.claim else ABSENT}",
        f"  + Evidence:   {len(document.evidence)} items",
        f"  > Insight:    {PRESENT if document.insight else ABSENT}",
        f"  ? Context:    {PRESENT if document.context else OPTIONAL_ABSENT}",
        f"  * Credential: {PRESENT if document.credential else OPTIONAL_ABSENT}",
        f"  @ Source:     {PRESENT if document.source else ABSENT}",
        "",
    ]

    if document.title or document.claim or document.insight:
        lines.append("Character Counts:")
        for symbol, name, value in (
            ("#", "Title", document.title),
            ("!", "Claim", document.claim),
            (">", "Insight", document.insight),
            ("?", "Context", document.context),
        ):
            if value:
                lines.append(f"  {symbol} {name + ':':<9} {len(value)} chars")
        if result.output:
            lines.append(f"  Total:      {len(result.output)} chars")
        lines.append("")

    if result.warnings:
        lines.append("Warnings:")
        lines.extend(f"  ! {w}" for w in result.warnings)
        lines.append("")

    if result.errors:
        lines.append("Errors:")
        lines.extend(f"  x {e}" for e in result.errors)
        lines.append("")

    lines.append(f"Status: {'VALID' if result.success else 'INVALID'}")
    return "\n".join(lines)


def run_analyze(args: argparse.Namespace, text: str) -> int:
    """Run analyze command."""
    analyzer = PostAnalyzer(StyleEngine(resolve_ruleset(args.ruleset)))
    result = analyzer.analyze(text)

    if args.format == "json":
        print(analysis_to_json(result))
    else:
        print(format_analysis_report(result))

    return 0 if result.valid else 1


def format_analysis_report(result: AnalysisResult) -> str:
    """Human-readable score report."""
    s = result.structure
    lines = [
        "Post Analysis",
        "=============",
        "",
        f"Score: {result.score}/100",
        "",
        "Structure:",
        f"  Title:      {PRESENT if s.has_title else ABSENT}",
        f"  Claim:      {PRESENT if s.has_claim else ABSENT}",
        f"  Evidence:   {s.evidence_count} signals",
        f"  Insight:    {PRESENT if s.has_insight else ABSENT}",
        f"  Source:     {PRESENT if s.has_source else ABSENT}",
        "",
    ]

    for heading, items, marker in (
        ("Issues", result.issues, "x"),
        ("Warnings", result.warnings, "!"),
        ("Suggestions", result.suggestions, "->"),
    ):
        if items:
            lines.append(f"{heading}:")
            lines.extend(f"  {marker} {item}" for item in items)
            lines.append("")

    if result.valid:
        lines.append("Status: VALID PostLang structure")
    else:
        lines.append("Status: Does NOT follow PostLang rules")
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
