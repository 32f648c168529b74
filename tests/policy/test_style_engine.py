"""
Unit tests for the style rule engine.
"""

from postlang.policy.engine import StyleEngine, get_style_engine
from postlang.policy.loader import parse_ruleset


class TestBannedPhrases:
    """Tests for banned phrase matching."""

    def test_case_insensitive(self):
        engine = get_style_engine()

        assert engine.find_banned_phrases("A GAME-CHANGER for us") == ["game-changer"]

    def test_substring_match(self):
        """Containment, not word boundaries."""
        engine = get_style_engine()

        assert "leverage" in engine.find_banned_phrases("We leveraged caching")

    def test_each_phrase_once_in_ruleset_order(self):
        engine = get_style_engine()
        found = engine.find_banned_phrases("synergy, revolutionary synergy")

        assert found == ["revolutionary", "synergy"]

    def test_clean_text(self):
        engine = get_style_engine()

        assert engine.find_banned_phrases("Latency fell by 40%") == []


class TestEmoji:

    def test_emoticon(self):
        assert get_style_engine().has_emoji("Shipped \U0001F600")

    def test_dingbat(self):
        assert get_style_engine().has_emoji("Done ✅")

    def test_plain_unicode_is_not_emoji(self):
        assert not get_style_engine().has_emoji("Café → naïve — ok")

    def test_no_ranges(self):
        engine = StyleEngine(parse_ruleset({"name": "none"}))

        assert not engine.has_emoji("\U0001F600")


class TestInspect:

    def test_exclamations_counted(self):
        assert get_style_engine().count_exclamations("Wow! Really!!") == 3

    def test_findings(self):
        findings = get_style_engine().inspect("Exciting news! \U0001F680")

        assert findings.banned_phrases == ("exciting",)
        assert findings.has_emoji
        assert findings.exclamation_count == 1
        assert not findings.clean

    def test_clean(self):
        assert get_style_engine().inspect("Latency fell by 40%.").clean

    def test_custom_ruleset(self):
        engine = StyleEngine(parse_ruleset({"name": "t", "banned_phrases": ["rockstar"]}))

        assert engine.find_banned_phrases("Hiring a rockstar") == ["rockstar"]
        assert engine.find_banned_phrases("A game-changer") == []
