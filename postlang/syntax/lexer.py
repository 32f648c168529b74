"""
Lexer — Split source into logical lines and classify them.

Every physical line counts toward the line number, including blank
lines and comments, so errors point at the real source position.
"""

import io
from dataclasses import dataclass
from typing import Iterator

from postlang.core.logging import LogChannel, get_logger
from postlang.ir.enums import LineKind

log = get_logger(LogChannel.LEX)

COMMENT_PREFIX = "//"
DIRECTIVE_SYMBOLS = frozenset("^#!+>?*@")


@dataclass(frozen=True)
class LogicalLine:
    """A trimmed, classified source line."""
    number: int
    text: str
    kind: LineKind

    @property
    def symbol(self) -> str:
        return self.text[:1]


def classify_line(text: str) -> LineKind:
    """Classify an already-trimmed line by its leading characters."""
    if not text:
        return LineKind.BLANK
    if text.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if text[0] in DIRECTIVE_SYMBOLS:
        return LineKind.DIRECTIVE
    return LineKind.UNRECOGNIZED


class LineStream:
    """
    Lazy, restartable sequence of logical lines.

    Blank lines and comments are dropped. Each iteration re-reads the
    source from the start.
    """

    def __init__(self, source: str) -> None:
        self._source = source

    def __iter__(self) -> Iterator[LogicalLine]:
        for number, raw in enumerate(io.StringIO(self._source, newline="\n"), start=1):
            text = raw.strip()
            kind = classify_line(text)
            if kind in (LineKind.BLANK, LineKind.COMMENT):
                continue
            log.debug("line_classified", line=number, kind=kind.value)
            yield LogicalLine(number=number, text=text, kind=kind)
