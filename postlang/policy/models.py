"""
Policy Models — Data structures for the shared style ruleset.

A ruleset is immutable once loaded: the validator and the analyzer
read the same instance.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmojiRange:
    """An inclusive range of code points treated as emoji."""
    start: int
    end: int

    def to_regex(self) -> str:
        return f"{re.escape(chr(self.start))}-{re.escape(chr(self.end))}"


@dataclass(frozen=True)
class AnalyzerSettings:
    """Thresholds, patterns and penalties used by the plain-text analyzer."""

    # Structure heuristics
    title_max_chars: int = 100
    min_claim_lines: int = 2
    min_insight_lines: int = 3
    min_evidence_lines: int = 2
    long_post_chars: int = 1300
    evidence_pattern: str = r"\d+%|\d+x|\d+\.\d+"
    bullet_pattern: str = r"^[-•*]\s"
    source_pattern: str = r"https?://|arxiv\.org|github\.com|Source:"
    tag_prefix: str = "#"

    # Penalties (subtracted from score_max)
    missing_title_penalty: int = 15
    long_title_penalty: int = 10
    no_evidence_penalty: int = 20
    thin_evidence_penalty: int = 5
    no_source_penalty: int = 15
    short_post_penalty: int = 10
    no_insight_penalty: int = 5
    banned_phrase_penalty: int = 10
    emoji_penalty: int = 10
    exclamation_penalty: int = 5
    question_title_penalty: int = 10
    long_post_penalty: int = 5

    score_min: int = 0
    score_max: int = 100


@dataclass(frozen=True)
class StyleRuleset:
    """A complete style ruleset."""
    version: str
    name: str
    description: str
    banned_phrases: tuple[str, ...]
    emoji_ranges: tuple[EmojiRange, ...]
    exclamation: str = "!"
    analyzer: AnalyzerSettings = field(default_factory=AnalyzerSettings)
