"""
IR Enums — Directive kinds, tiers, statuses and levels.

No stringly-typed constants scattered across passes.
"""

from enum import Enum


class LineKind(str, Enum):
    """Classification of a physical source line."""

    BLANK = "blank"              # All whitespace, discarded
    COMMENT = "comment"          # Starts with //, discarded
    DIRECTIVE = "directive"      # Starts with a known symbol
    UNRECOGNIZED = "unrecognized"  # Anything else, ignored by the parser


class DirectiveKind(str, Enum):
    """The structural element a directive line describes."""

    LIMIT = "limit"
    TITLE = "title"
    CLAIM = "claim"
    EVIDENCE = "evidence"
    INSIGHT = "insight"
    CONTEXT = "context"
    CREDENTIAL = "credential"
    SOURCE = "source"


class DirectiveTier(str, Enum):
    """
    How a malformed directive is handled.

    - STRICT: a syntax error is reported for the line
    - LENIENT: the line is dropped silently
    """

    STRICT = "strict"
    LENIENT = "lenient"


class LimitName(str, Enum):
    """Limit keys recognized by ^ directives."""

    TITLE = "title"
    CLAIM = "claim"
    EVIDENCE = "evidence"
    INSIGHT = "insight"
    CONTEXT = "context"
    TOTAL = "total"


class CompileStatus(str, Enum):
    """Overall compile status."""

    SUCCESS = "success"
    PARSE_FAILED = "parse_failed"
    INVALID = "invalid"
    TOO_LONG = "too_long"
    ERROR = "error"


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
