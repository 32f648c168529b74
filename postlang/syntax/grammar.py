"""
Grammar — One table entry per directive symbol.

Each entry carries its sub-grammar, the usage template shown in
syntax errors, and its tier. The parser consults only the tier to
decide whether a malformed line is reported or dropped.

Quoted strings have no escapes: a string ends at the next double quote.
"""

import re
from dataclasses import dataclass
from typing import Optional

from postlang.ir.enums import DirectiveKind, DirectiveTier

_QUOTED = r'"([^"]+)"'


@dataclass(frozen=True)
class DirectiveSpec:
    """Grammar for one directive symbol."""
    symbol: str
    kind: DirectiveKind
    tier: DirectiveTier
    pattern: re.Pattern
    usage: str = ""

    def match(self, text: str) -> Optional[re.Match]:
        return self.pattern.match(text)

    def error_message(self, line_number: int) -> str:
        return f"Line {line_number}: Invalid {self.kind.value}. Use {self.usage}"


def _quoted_field(symbol: str) -> re.Pattern:
    return re.compile(rf"{re.escape(symbol)}\s*{_QUOTED}")


DIRECTIVES: dict[str, DirectiveSpec] = {
    spec.symbol: spec
    for spec in (
        DirectiveSpec(
            symbol="^",
            kind=DirectiveKind.LIMIT,
            tier=DirectiveTier.LENIENT,
            pattern=re.compile(r"\^\s*([A-Za-z_]\w*)\s+(\d+)"),
            usage="^ name 80",
        ),
        DirectiveSpec(
            symbol="#",
            kind=DirectiveKind.TITLE,
            tier=DirectiveTier.STRICT,
            pattern=_quoted_field("#"),
            usage='# "Your title"',
        ),
        DirectiveSpec(
            symbol="!",
            kind=DirectiveKind.CLAIM,
            tier=DirectiveTier.STRICT,
            pattern=_quoted_field("!"),
            usage='! "Your claim"',
        ),
        DirectiveSpec(
            symbol="+",
            kind=DirectiveKind.EVIDENCE,
            tier=DirectiveTier.STRICT,
            pattern=re.compile(rf"\+\s*([^|]+)\|\s*{_QUOTED}"),
            usage='+ value | "context"',
        ),
        DirectiveSpec(
            symbol=">",
            kind=DirectiveKind.INSIGHT,
            tier=DirectiveTier.STRICT,
            pattern=_quoted_field(">"),
            usage='> "Your insight"',
        ),
        DirectiveSpec(
            symbol="?",
            kind=DirectiveKind.CONTEXT,
            tier=DirectiveTier.LENIENT,
            pattern=_quoted_field("?"),
            usage='? "Background"',
        ),
        DirectiveSpec(
            symbol="*",
            kind=DirectiveKind.CREDENTIAL,
            tier=DirectiveTier.LENIENT,
            pattern=_quoted_field("*"),
            usage='* "Your credential"',
        ),
        DirectiveSpec(
            symbol="@",
            kind=DirectiveKind.SOURCE,
            tier=DirectiveTier.STRICT,
            # Title and URL are required, the quoted credibility segment is optional.
            pattern=re.compile(
                rf"@\s*{_QUOTED}\s*\|\s*([^\s|]+)(?:\s*\|\s*{_QUOTED})?\s*$"
            ),
            usage='@ "Title" | url | "why this source is credible" (last segment optional)',
        ),
    )
}


def get_directive(symbol: str) -> Optional[DirectiveSpec]:
    """Look up the grammar for a directive symbol."""
    return DIRECTIVES.get(symbol)
