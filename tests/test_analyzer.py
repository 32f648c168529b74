"""
Unit tests for the plain-text analyzer.
"""

import dataclasses

from postlang import analyze, compile
from postlang.analysis import PostAnalyzer
from postlang.ir.schema import AnalysisStructure
from postlang.policy.engine import StyleEngine
from postlang.policy.loader import get_ruleset


GOOD_POST = """Caching cut our p99 latency.

A read-through cache removed most database round trips.

Results:
- 62% lower p99 latency
- 3x more requests per node

Measure before adding infrastructure.

Source: https://example.com/caching"""


class TestRoundTrip:
    """Compiled output should score as a clean post."""

    def test_minimal_post_scores_100(self, minimal_source):
        output = compile(minimal_source).output
        result = analyze(output)

        assert result.valid
        assert result.score == 100
        assert result.issues == []
        assert result.warnings == []

    def test_full_post_scores_100(self, full_source):
        result = analyze(compile(full_source).output)

        assert result.valid
        assert result.score == 100


class TestStructure:
    """Tests for heuristic structure detection."""

    def test_good_post(self):
        result = analyze(GOOD_POST)

        assert result.valid
        assert result.structure.has_title
        assert result.structure.has_claim
        assert result.structure.has_source
        assert result.structure.has_insight
        assert result.structure.evidence_count == 4

    def test_empty_text(self):
        result = analyze("")

        assert not result.valid
        assert "No title detected" in result.issues
        assert "No evidence/data points detected" in result.issues
        assert "No source/attribution detected" in result.issues
        assert "Post too short - no clear claim detected" in result.issues
        assert result.warnings == ["No clear insight/takeaway detected"]
        assert result.score == 100 - 15 - 20 - 15 - 10 - 5

    def test_long_first_line(self):
        result = analyze("x" * 101 + "\nSecond line\nhttps://example.com 10%\n- 2x faster")

        assert "First line too long for a title (>100 chars)" in result.issues
        assert not result.structure.has_title

    def test_single_evidence_signal_warns(self):
        text = "Title\nWe saw 10% gains\nSo measure first\nSource: blog"
        result = analyze(text)

        assert result.structure.evidence_count == 1
        assert result.warnings == ["Only 1 evidence point - consider adding more"]
        assert result.valid
        assert result.score == 95

    def test_bulleted_figure_counts_twice(self):
        analyzer = PostAnalyzer()

        assert analyzer.evidence_signals("- 10% improvement") == 2
        assert analyzer.evidence_signals("10% improvement") == 1
        assert analyzer.evidence_signals("• item") == 1
        assert analyzer.evidence_signals("no figures") == 0

    def test_evidence_count_reports_signals(self):
        """evidence_count sums signals, so one bulleted figure reads as 2."""
        result = analyze("Title\n- 10% up\nSource: blog")

        assert result.structure.evidence_count == 2
        assert not any(w.startswith("Only ") for w in result.warnings)
        assert "signals" in AnalysisStructure.model_fields["evidence_count"].description

    def test_no_evidence_suggestion(self):
        result = analyze("Title\nClaim here\nInsight\nhttps://example.com")

        assert "No evidence/data points detected" in result.issues
        assert "Add specific numbers or percentages to support claims" in result.suggestions

    def test_missing_source(self):
        result = analyze("Title\nUp 10%\n- 2x\nTakeaway")

        assert "No source/attribution detected" in result.issues
        assert "Add a source URL or citation" in result.suggestions
        assert not result.structure.has_source

    def test_hashtags_not_insight(self):
        """Tag lines and source lines don't count toward insight."""
        result = analyze("Title\n#tag one\n#tag two\n- 10% gain\nhttps://example.com")

        assert not result.structure.has_insight
        assert "No clear insight/takeaway detected" in result.warnings
        assert "Add a concluding insight before the source" in result.suggestions


class TestStyle:
    """Tests for style penalties."""

    def test_banned_phrases(self):
        text = GOOD_POST.replace("Measure", "Leverage synergy and measure")
        result = analyze(text)

        assert 'Contains banned phrase: "leverage"' in result.issues
        assert 'Contains banned phrase: "synergy"' in result.issues
        assert result.score == 80

    def test_emoji(self):
        result = analyze(GOOD_POST + " \U0001F680")

        assert result.issues == ["Contains emojis"]
        assert result.score == 90

    def test_exclamations(self):
        result = analyze(GOOD_POST.replace("infrastructure.", "infrastructure!!!"))

        assert result.issues == ["Contains 3 exclamation mark(s)"]
        assert result.score == 85

    def test_question_title(self):
        result = analyze(GOOD_POST.replace("latency.", "latency?", 1))

        assert result.issues == ["Title is a question (avoid clickbait)"]
        assert result.score == 90

    def test_long_post(self):
        text = GOOD_POST + "\n\n" + "More detail. " * 100
        result = analyze(text)

        assert any(w.startswith("Post is long (") for w in result.warnings)
        assert result.valid

    def test_score_clamped_at_zero(self):
        text = "!" * 30
        result = analyze(text)

        assert result.score == 0


class TestSettings:

    def test_thresholds_from_ruleset(self):
        base = get_ruleset("base")
        strict = dataclasses.replace(
            base,
            analyzer=dataclasses.replace(base.analyzer, min_evidence_lines=5),
        )
        result = PostAnalyzer(StyleEngine(strict)).analyze(GOOD_POST)

        assert result.warnings == ["Only 4 evidence point - consider adding more"]
