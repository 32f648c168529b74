"""Policy — Shared style rules for the compiler and the analyzer."""

from postlang.policy.engine import StyleEngine, StyleFindings, get_style_engine
from postlang.policy.loader import (
    clear_cache,
    get_ruleset,
    list_rulesets,
    load_ruleset,
    load_ruleset_from_path,
)
from postlang.policy.models import AnalyzerSettings, EmojiRange, StyleRuleset

__all__ = [
    "AnalyzerSettings",
    "EmojiRange",
    "StyleEngine",
    "StyleFindings",
    "StyleRuleset",
    "clear_cache",
    "get_ruleset",
    "get_style_engine",
    "list_rulesets",
    "load_ruleset",
    "load_ruleset_from_path",
]
