"""
structdoc - Markdown reference docs for Go structs.

Extracts exported struct declarations from Go source with tree-sitter,
resolves field types and struct tags, and renders the result as Markdown.
"""

__version__ = "0.1.0"
