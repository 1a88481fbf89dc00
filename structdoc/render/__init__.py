"""
Documentation Rendering

Turns extracted declarations into Markdown.
"""

from structdoc.render.markdown import normalize_declarations, render_markdown, write_markdown

__all__ = [
    "normalize_declarations",
    "render_markdown",
    "write_markdown",
]
