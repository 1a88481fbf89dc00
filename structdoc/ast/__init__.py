"""
AST-Based Declaration Extraction

Tree-sitter based extraction of struct declarations from Go source files:
parsing, type resolution, and struct tag parsing.
"""

from structdoc.ast.models import Declaration, DocOptions, Field, SourceUnit
from structdoc.ast.parser import GoParser, get_parser
from structdoc.ast.tags import field_display_name, parse_tag
from structdoc.ast.types import (
    Identifier,
    Map,
    Other,
    Pointer,
    Qualified,
    ResolvedType,
    Slice,
    TypeExpr,
    resolve,
    type_expr_from_node,
)

__all__ = [
    # Models
    "Declaration",
    "DocOptions",
    "Field",
    "SourceUnit",
    # Parser
    "GoParser",
    "get_parser",
    # Tags
    "parse_tag",
    "field_display_name",
    # Type resolution
    "TypeExpr",
    "Identifier",
    "Pointer",
    "Slice",
    "Map",
    "Qualified",
    "Other",
    "ResolvedType",
    "resolve",
    "type_expr_from_node",
]
