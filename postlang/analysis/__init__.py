"""Analysis — Heuristic scoring of plain-text posts."""

from postlang.analysis.analyzer import PostAnalyzer, analyze

__all__ = ["PostAnalyzer", "analyze"]
