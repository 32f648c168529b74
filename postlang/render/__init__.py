"""Render — Output generation for validated documents."""

from postlang.render.generator import PostGenerator, display_url, generate

__all__ = ["PostGenerator", "display_url", "generate"]
