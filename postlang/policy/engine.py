"""
Policy Engine — Deterministic style rule evaluation.

One StyleEngine wraps one immutable StyleRuleset and is shared by the
validator and the analyzer, so both apply the same banned phrases,
emoji ranges and punctuation ban.
"""

import re
from dataclasses import dataclass
from typing import Optional

from postlang.policy.loader import get_ruleset
from postlang.policy.models import StyleRuleset


@dataclass(frozen=True)
class StyleFindings:
    """Style violations found in one piece of text."""
    banned_phrases: tuple[str, ...]
    has_emoji: bool
    exclamation_count: int

    @property
    def clean(self) -> bool:
        return not self.banned_phrases and not self.has_emoji and not self.exclamation_count


class StyleEngine:
    """
    Style rule engine.

    Phrase matching is case-insensitive substring containment; each
    phrase is reported at most once, in ruleset order.
    """

    def __init__(self, ruleset: StyleRuleset) -> None:
        self._ruleset = ruleset
        self._phrases = tuple((p, p.lower()) for p in ruleset.banned_phrases)
        if ruleset.emoji_ranges:
            ranges = "".join(r.to_regex() for r in ruleset.emoji_ranges)
            self._emoji_re: Optional[re.Pattern] = re.compile(f"[{ranges}]")
        else:
            self._emoji_re = None

    @property
    def ruleset(self) -> StyleRuleset:
        return self._ruleset

    def find_banned_phrases(self, text: str) -> list[str]:
        """Return every banned phrase contained in text."""
        lowered = text.lower()
        return [phrase for phrase, needle in self._phrases if needle in lowered]

    def has_emoji(self, text: str) -> bool:
        """Check whether text contains any code point from the emoji ranges."""
        return bool(self._emoji_re and self._emoji_re.search(text))

    def count_exclamations(self, text: str) -> int:
        """Count exclamation characters in text."""
        return text.count(self._ruleset.exclamation)

    def inspect(self, text: str) -> StyleFindings:
        """Run every style rule against text."""
        return StyleFindings(
            banned_phrases=tuple(self.find_banned_phrases(text)),
            has_emoji=self.has_emoji(text),
            exclamation_count=self.count_exclamations(text),
        )


_default_engine: Optional[StyleEngine] = None


def get_style_engine() -> StyleEngine:
    """Get or create the style engine for the base ruleset."""
    global _default_engine
    if _default_engine is None:
        _default_engine = StyleEngine(get_ruleset("base"))
    return _default_engine
