"""
Unit tests for the style ruleset loader.
"""

from pathlib import Path

import pytest

from postlang.policy.loader import (
    clear_cache,
    get_ruleset,
    list_rulesets,
    load_ruleset,
    load_ruleset_from_path,
    parse_analyzer_settings,
    parse_emoji_range,
    parse_ruleset,
    resolve_ruleset,
)
from postlang.policy.models import EmojiRange, StyleRuleset


class TestBundledRuleset:
    """Tests for the base ruleset shipped with the package."""

    def test_base_is_listed(self):
        assert "base" in list_rulesets()

    def test_base_loads(self):
        ruleset = load_ruleset("base")

        assert ruleset.name == "base"
        assert "game-changer" in ruleset.banned_phrases
        assert "move the needle" in ruleset.banned_phrases
        assert len(ruleset.banned_phrases) == 31
        assert EmojiRange(0x1F600, 0x1F64F) in ruleset.emoji_ranges
        assert ruleset.exclamation == "!"

    def test_base_analyzer_settings(self):
        settings = load_ruleset("base").analyzer

        assert settings.title_max_chars == 100
        assert settings.no_evidence_penalty == 20
        assert settings.long_post_chars == 1300

    def test_missing_ruleset(self):
        with pytest.raises(FileNotFoundError):
            load_ruleset("does-not-exist")

    def test_ruleset_is_immutable(self):
        ruleset = load_ruleset("base")

        with pytest.raises(AttributeError):
            ruleset.name = "other"


class TestCache:

    def test_cached_instance_reused(self):
        clear_cache()
        assert get_ruleset("base") is get_ruleset("base")

    def test_clear_cache(self):
        first = get_ruleset("base")
        clear_cache()

        assert get_ruleset("base") is not first


class TestParsing:
    """Tests for parsing ruleset data."""

    def test_minimal_mapping(self):
        ruleset = parse_ruleset({"name": "tiny", "banned_phrases": ["synergy"]})

        assert ruleset.name == "tiny"
        assert ruleset.banned_phrases == ("synergy",)
        assert ruleset.emoji_ranges == ()

    def test_blank_phrase_rejected(self):
        with pytest.raises(ValueError):
            parse_ruleset({"banned_phrases": ["ok", "  "]})

    def test_emoji_range_hex(self):
        assert parse_emoji_range(["2600", "26FF"]) == EmojiRange(0x2600, 0x26FF)

    def test_emoji_range_reversed(self):
        with pytest.raises(ValueError):
            parse_emoji_range(["26FF", "2600"])

    def test_emoji_range_not_hex(self):
        with pytest.raises(ValueError):
            parse_emoji_range(["smile", "26FF"])

    def test_penalties_nested(self):
        settings = parse_analyzer_settings({"title_max_chars": 50, "penalties": {"emoji": 30}})

        assert settings.title_max_chars == 50
        assert settings.emoji_penalty == 30
        assert settings.no_source_penalty == 15

    def test_unknown_setting_rejected(self):
        with pytest.raises(ValueError, match="Unknown analyzer settings"):
            parse_analyzer_settings({"title_max_char": 50})


class TestFromPath:

    def test_load_from_path(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "name: custom\nbanned_phrases:\n  - rockstar\nemoji_ranges: []\n",
            encoding="utf-8",
        )

        ruleset = load_ruleset_from_path(path)

        assert ruleset.name == "custom"
        assert ruleset.banned_phrases == ("rockstar",)

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_ruleset_from_path(path)


class TestResolve:

    def test_none_is_base(self):
        assert resolve_ruleset(None).name == "base"

    def test_instance_passes_through(self):
        ruleset = StyleRuleset(
            version="1", name="x", description="", banned_phrases=(), emoji_ranges=()
        )

        assert resolve_ruleset(ruleset) is ruleset

    def test_name(self):
        assert resolve_ruleset("base").name == "base"

    def test_yaml_path_string(self, tmp_path: Path):
        path = tmp_path / "mine.yml"
        path.write_text("name: mine\n", encoding="utf-8")

        assert resolve_ruleset(str(path)).name == "mine"
