"""
PostLang — A small markup language for structured social-media posts

Compiles title / claim / evidence / insight / source directives into a
plain-text post, enforcing length limits and a shared style ruleset
(no hype phrases, no emoji, no exclamation marks). The analyzer scores
finished plain-text posts against the same rules.

    >>> from postlang import compile
    >>> result = compile('''
    ... # "Smaller models, same accuracy"
    ... ! "Distillation kept 98% of accuracy"
    ... + 4x | "faster inference"
    ... > "Size is no longer the bottleneck"
    ... @ "Paper" | https://arxiv.org/abs/1234.5678
    ... ''')
    >>> result.success
    True
"""

__version__ = "0.1.0"

from postlang.analysis.analyzer import analyze
from postlang.core.engine import compile, validate_source
from postlang.render.generator import generate
from postlang.syntax.parser import parse
from postlang.validation.validator import validate

__all__ = [
    "__version__",
    "analyze",
    "compile",
    "generate",
    "parse",
    "validate",
    "validate_source",
]
