"""
Parser — Build a Document from PostLang source in a single pass.

A bad line never aborts the parse: strict directives record a syntax
error and parsing moves on, so one run surfaces every syntax problem.
"""

import re
from typing import Callable

from postlang.core.logging import LogChannel, get_logger
from postlang.ir.enums import DirectiveKind, DirectiveTier, LimitName, LineKind
from postlang.ir.schema import Document, EvidenceItem, ParseResult, Source
from postlang.syntax.grammar import get_directive
from postlang.syntax.lexer import LineStream

log = get_logger(LogChannel.PARSE)

_LIMIT_NAMES = frozenset(name.value for name in LimitName)


def _apply_limit(doc: Document, match: re.Match) -> None:
    key = match.group(1).lower()
    value = int(match.group(2))
    if key not in _LIMIT_NAMES or value <= 0:
        log.debug("limit_ignored", key=key, value=value)
        return
    doc.limits[key] = value


def _apply_title(doc: Document, match: re.Match) -> None:
    doc.title = match.group(1)


def _apply_claim(doc: Document, match: re.Match) -> None:
    doc.claim = match.group(1)


def _apply_evidence(doc: Document, match: re.Match) -> None:
    doc.evidence.append(
        EvidenceItem(value=match.group(1).strip(), context=match.group(2))
    )


def _apply_insight(doc: Document, match: re.Match) -> None:
    doc.insight = match.group(1)


def _apply_context(doc: Document, match: re.Match) -> None:
    doc.context = match.group(1)


def _apply_credential(doc: Document, match: re.Match) -> None:
    doc.credential = match.group(1)


def _apply_source(doc: Document, match: re.Match) -> None:
    doc.source = Source(
        title=match.group(1),
        url=match.group(2),
        credibility=match.group(3),
    )


_APPLY: dict[DirectiveKind, Callable[[Document, re.Match], None]] = {
    DirectiveKind.LIMIT: _apply_limit,
    DirectiveKind.TITLE: _apply_title,
    DirectiveKind.CLAIM: _apply_claim,
    DirectiveKind.EVIDENCE: _apply_evidence,
    DirectiveKind.INSIGHT: _apply_insight,
    DirectiveKind.CONTEXT: _apply_context,
    DirectiveKind.CREDENTIAL: _apply_credential,
    DirectiveKind.SOURCE: _apply_source,
}


def parse(source: str) -> ParseResult:
    """
    Parse PostLang source into a partial Document.

    Singular fields keep their last occurrence; evidence items are
    appended in file order.

    Returns:
        ParseResult with the document and any per-line syntax errors
    """
    document = Document()
    errors: list[str] = []

    for line in LineStream(source):
        spec = get_directive(line.symbol) if line.kind is LineKind.DIRECTIVE else None
        if spec is None:
            log.debug("line_ignored", line=line.number)
            continue

        match = spec.match(line.text)
        if match is None:
            if spec.tier is DirectiveTier.STRICT:
                errors.append(spec.error_message(line.number))
                log.verbose("directive_rejected", line=line.number, kind=spec.kind.value)
            else:
                log.debug("lenient_directive_dropped", line=line.number, kind=spec.kind.value)
            continue

        _APPLY[spec.kind](document, match)

    log.verbose(
        "parse_complete",
        evidence=len(document.evidence),
        limits=len(document.limits),
        errors=len(errors),
    )
    return ParseResult(document=document, parse_errors=errors)
