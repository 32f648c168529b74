"""
Analyzer — Score plain text against the PostLang rubric.

Works on finished posts, not markup. Structure is inferred with coarse
line heuristics whose thresholds come from the ruleset's analyzer
settings; style uses the same StyleEngine as the validator.

The score starts at the maximum and every finding subtracts its
penalty. Penalties add up freely and the total is clamped at the end.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from postlang.core.logging import LogChannel, get_logger
from postlang.ir.schema import AnalysisResult, AnalysisStructure
from postlang.policy.engine import StyleEngine, get_style_engine
from postlang.policy.models import AnalyzerSettings

log = get_logger(LogChannel.ANALYZE)


@dataclass
class _Scorecard:
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    penalty: int = 0

    def issue(self, message: str, penalty: int, suggestion: Optional[str] = None) -> None:
        self.issues.append(message)
        self.penalty += penalty
        if suggestion:
            self.suggestions.append(suggestion)

    def warn(self, message: str, penalty: int, suggestion: Optional[str] = None) -> None:
        self.warnings.append(message)
        self.penalty += penalty
        if suggestion:
            self.suggestions.append(suggestion)


class PostAnalyzer:
    """Heuristic structure detection plus shared style rules."""

    def __init__(self, engine: Optional[StyleEngine] = None) -> None:
        self._engine = engine or get_style_engine()
        self._settings: AnalyzerSettings = self._engine.ruleset.analyzer
        self._evidence_re = re.compile(self._settings.evidence_pattern)
        self._bullet_re = re.compile(self._settings.bullet_pattern)
        self._source_re = re.compile(self._settings.source_pattern, re.IGNORECASE)

    @property
    def settings(self) -> AnalyzerSettings:
        return self._settings

    def evidence_signals(self, line: str) -> int:
        """
        Count evidence signals on one line.

        A figure (percentage, multiplier, decimal) and a bullet marker
        are separate signals, so a bulleted figure counts twice.
        """
        return int(bool(self._evidence_re.search(line))) + int(
            bool(self._bullet_re.match(line.strip()))
        )

    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze a plain-text post.

        Returns:
            AnalysisResult; ``valid`` is True when there are no issues
            (warnings don't count)
        """
        s = self._settings
        card = _Scorecard()
        structure = AnalysisStructure()
        lines = [line for line in text.split("\n") if line.strip()]
        first_line = lines[0].strip() if lines else ""

        # Title: the first non-blank line
        if not lines:
            card.issue("No title detected", s.missing_title_penalty)
        elif len(first_line) > s.title_max_chars:
            card.issue(
                f"First line too long for a title (>{s.title_max_chars} chars)",
                s.long_title_penalty,
            )
        else:
            structure.has_title = True

        # Evidence: figures and bullets
        structure.evidence_count = sum(self.evidence_signals(line) for line in lines)
        structure.has_evidence = structure.evidence_count > 0
        if not structure.has_evidence:
            card.issue(
                "No evidence/data points detected",
                s.no_evidence_penalty,
                "Add specific numbers or percentages to support claims",
            )
        elif structure.evidence_count < s.min_evidence_lines:
            card.warn(
                f"Only {structure.evidence_count} evidence point - consider adding more",
                s.thin_evidence_penalty,
            )

        # Source: a URL, a known host, or "Source:" anywhere
        structure.has_source = bool(self._source_re.search(text))
        if not structure.has_source:
            card.issue(
                "No source/attribution detected",
                s.no_source_penalty,
                "Add a source URL or citation",
            )

        # Claim: enough lines to hold one
        if len(lines) >= s.min_claim_lines:
            structure.has_claim = True
        else:
            card.issue("Post too short - no clear claim detected", s.short_post_penalty)

        # Insight: enough prose lines outside tags and source lines
        prose_lines = [
            line for line in lines
            if not line.startswith(s.tag_prefix) and not self._source_re.search(line)
        ]
        if len(prose_lines) >= s.min_insight_lines:
            structure.has_insight = True
        else:
            card.warn(
                "No clear insight/takeaway detected",
                s.no_insight_penalty,
                "Add a concluding insight before the source",
            )

        # Style
        findings = self._engine.inspect(text)
        for phrase in findings.banned_phrases:
            card.issue(f'Contains banned phrase: "{phrase}"', s.banned_phrase_penalty)
        if findings.has_emoji:
            card.issue("Contains emojis", s.emoji_penalty)
        if findings.exclamation_count:
            card.issue(
                f"Contains {findings.exclamation_count} exclamation mark(s)",
                findings.exclamation_count * s.exclamation_penalty,
            )

        if first_line.endswith("?"):
            card.issue("Title is a question (avoid clickbait)", s.question_title_penalty)

        if len(text) > s.long_post_chars:
            card.warn(
                f"Post is long ({len(text)} chars) - consider trimming",
                s.long_post_penalty,
            )

        score = max(s.score_min, min(s.score_max, s.score_max - card.penalty))

        log.info(
            "analysis_complete",
            score=score,
            issues=len(card.issues),
            warnings=len(card.warnings),
            evidence=structure.evidence_count,
        )

        return AnalysisResult(
            valid=not card.issues,
            score=score,
            structure=structure,
            issues=card.issues,
            warnings=card.warnings,
            suggestions=card.suggestions,
        )


_default_analyzer: Optional[PostAnalyzer] = None


def analyze(text: str) -> AnalysisResult:
    """Analyze plain text with the base ruleset."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = PostAnalyzer()
    return _default_analyzer.analyze(text)
