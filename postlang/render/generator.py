"""
Generator — Deterministic rendering of a valid Document.

Same Document always produces the same text. Length against the
total limit is checked by the caller, not here.
"""

import re

from postlang.ir.schema import Document

_SCHEME_RE = re.compile(r"^https?://")
_WWW_RE = re.compile(r"^www\.")

_REQUIRED = ("title", "claim", "insight", "source")


def display_url(url: str) -> str:
    """Strip the http(s) scheme and a leading www. from a URL."""
    return _WWW_RE.sub("", _SCHEME_RE.sub("", url))


class PostGenerator:
    """
    Template-based renderer.

    Layout, one block per element separated by blank lines:
    title, context, claim, results, insight, credential, source.
    """

    def render(self, document: Document) -> str:
        """
        Render a document to post text.

        Raises:
            ValueError: if a required field is missing
        """
        missing = [name for name in _REQUIRED if not getattr(document, name)]
        if missing:
            raise ValueError(f"Cannot render incomplete document, missing: {', '.join(missing)}")

        lines: list[str] = [f"{document.title}.", ""]

        if document.context:
            lines += [document.context, ""]

        lines += [f"{document.claim}.", ""]

        if document.evidence:
            lines.append("Results:")
            lines.extend(f"- {item.value} {item.context}" for item in document.evidence)
            lines.append("")

        lines += [f"{document.insight}.", ""]

        if document.credential:
            lines += [f"[{document.credential}]", ""]

        source = document.source
        lines.append(f"Source: {source.title}")
        if source.credibility:
            lines.append(f"[{source.credibility}]")
        lines.append(display_url(source.url))

        return "\n".join(lines)


_generator = PostGenerator()


def generate(document: Document) -> str:
    """Render a fully valid document to post text."""
    return _generator.render(document)
