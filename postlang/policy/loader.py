"""
Policy Loader — Load and parse style rulesets from YAML files.
"""

from dataclasses import fields
from pathlib import Path
from typing import Optional, Union

import yaml

from postlang.core.logging import LogChannel, get_logger
from postlang.policy.models import AnalyzerSettings, EmojiRange, StyleRuleset

log = get_logger(LogChannel.POLICY)

# Default ruleset directory
RULESETS_DIR = Path(__file__).parent / "rulesets"

_SETTING_NAMES = {f.name for f in fields(AnalyzerSettings)}


def load_ruleset(name: str = "base") -> StyleRuleset:
    """
    Load a style ruleset by name.

    Args:
        name: Ruleset name (without .yaml extension)

    Raises:
        FileNotFoundError: If ruleset file doesn't exist
        ValueError: If ruleset is invalid
    """
    path = RULESETS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Ruleset not found: {path}")
    return load_ruleset_from_path(path)


def load_ruleset_from_path(path: Union[str, Path]) -> StyleRuleset:
    """Load a ruleset from an arbitrary path."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Ruleset {path} must be a mapping, got {type(data).__name__}")

    ruleset = parse_ruleset(data)
    log.info(
        "ruleset_loaded",
        name=ruleset.name,
        path=str(path),
        banned_phrases=len(ruleset.banned_phrases),
        emoji_ranges=len(ruleset.emoji_ranges),
    )
    return ruleset


def parse_ruleset(data: dict) -> StyleRuleset:
    """Parse ruleset from dictionary."""
    phrases = data.get("banned_phrases") or []
    if not all(isinstance(p, str) and p.strip() for p in phrases):
        raise ValueError("banned_phrases must be a list of non-empty strings")

    return StyleRuleset(
        version=str(data.get("version", "1.0")),
        name=data.get("name", "unnamed"),
        description=data.get("description", ""),
        banned_phrases=tuple(p.strip() for p in phrases),
        emoji_ranges=tuple(parse_emoji_range(r) for r in data.get("emoji_ranges") or []),
        exclamation=data.get("exclamation", "!"),
        analyzer=parse_analyzer_settings(data.get("analyzer") or {}),
    )


def parse_emoji_range(data: list) -> EmojiRange:
    """Parse a ["1F600", "1F64F"] pair into an EmojiRange."""
    try:
        start, end = (int(str(v), 16) for v in data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid emoji range {data!r}: {e}") from e
    if start > end:
        raise ValueError(f"Invalid emoji range {data!r}: start after end")
    return EmojiRange(start=start, end=end)


def parse_analyzer_settings(data: dict) -> AnalyzerSettings:
    """
    Parse analyzer settings.

    Penalties are nested under ``penalties`` without the ``_penalty``
    suffix; unknown keys are rejected so a typo can't silently fall
    back to a default.
    """
    values = {k: v for k, v in data.items() if k != "penalties"}
    for key, value in (data.get("penalties") or {}).items():
        values[f"{key}_penalty"] = value

    unknown = set(values) - _SETTING_NAMES
    if unknown:
        raise ValueError(f"Unknown analyzer settings: {sorted(unknown)}")

    return AnalyzerSettings(**values)


def list_rulesets() -> list[str]:
    """List available ruleset names."""
    return sorted(p.stem for p in RULESETS_DIR.glob("*.yaml"))


# Cache for loaded rulesets
_cache: dict[str, StyleRuleset] = {}


def get_ruleset(name: str = "base", use_cache: bool = True) -> StyleRuleset:
    """Get a ruleset, using cache by default."""
    if use_cache and name in _cache:
        return _cache[name]

    ruleset = load_ruleset(name)
    _cache[name] = ruleset
    return ruleset


def clear_cache() -> None:
    """Clear the ruleset cache."""
    _cache.clear()


def resolve_ruleset(ruleset: Optional[Union[StyleRuleset, str, Path]] = None) -> StyleRuleset:
    """Accept a ruleset instance, a bundled ruleset name, or a YAML path."""
    if ruleset is None:
        return get_ruleset()
    if isinstance(ruleset, StyleRuleset):
        return ruleset
    if isinstance(ruleset, Path) or str(ruleset).endswith((".yaml", ".yml")):
        return load_ruleset_from_path(ruleset)
    return get_ruleset(str(ruleset))
