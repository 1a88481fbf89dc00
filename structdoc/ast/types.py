"""
Type Expression Resolver

Turns a struct field's type into a closed set of expression shapes and
resolves each shape into:

- display:   normalized type string ("*[]Address", "map[string]Contact")
- raw_name:  unqualified type name used for cross-references
- is_record: whether the type names a type declared in the same unit

Pointer, slice and map wrappers pass raw_name and is_record through from the
element (map: from the value), so "*[]Address" still links to Address.
Package-qualified types are never linked: other packages' declarations are
not visible to the resolver.
"""

from dataclasses import dataclass
from typing import AbstractSet, Union

from tree_sitter import Node


@dataclass(frozen=True)
class Identifier:
    name: str
    is_type: bool = False  # Names a type declared in the unit (not a built-in)


@dataclass(frozen=True)
class Pointer:
    elem: "TypeExpr"


@dataclass(frozen=True)
class Slice:
    """Slice or fixed-length array; both display as []elem."""

    elem: "TypeExpr"


@dataclass(frozen=True)
class Map:
    key: "TypeExpr"
    value: "TypeExpr"


@dataclass(frozen=True)
class Qualified:
    package: str
    name: str


@dataclass(frozen=True)
class Other:
    """Any shape without its own rule; kind is the syntax node kind."""

    kind: str


TypeExpr = Union[Identifier, Pointer, Slice, Map, Qualified, Other]


@dataclass(frozen=True)
class ResolvedType:
    display: str
    raw_name: str
    is_record: bool


def _resolve_identifier(expr: Identifier) -> ResolvedType:
    return ResolvedType(expr.name, expr.name, expr.is_type)


def _resolve_pointer(expr: Pointer) -> ResolvedType:
    inner = resolve(expr.elem)
    return ResolvedType("*" + inner.display, inner.raw_name, inner.is_record)


def _resolve_slice(expr: Slice) -> ResolvedType:
    inner = resolve(expr.elem)
    return ResolvedType("[]" + inner.display, inner.raw_name, inner.is_record)


def _resolve_map(expr: Map) -> ResolvedType:
    key = resolve(expr.key)
    value = resolve(expr.value)
    return ResolvedType(f"map[{key.display}]{value.display}", value.raw_name, value.is_record)


def _resolve_qualified(expr: Qualified) -> ResolvedType:
    return ResolvedType(f"{expr.package}.{expr.name}", expr.name, False)


def _resolve_other(expr: Other) -> ResolvedType:
    return ResolvedType(f"<{expr.kind}>", "", False)


_RESOLVERS = {
    Identifier: _resolve_identifier,
    Pointer: _resolve_pointer,
    Slice: _resolve_slice,
    Map: _resolve_map,
    Qualified: _resolve_qualified,
    Other: _resolve_other,
}


def resolve(expr: TypeExpr) -> ResolvedType:
    """
    Resolve a type expression into its display string, raw name and record flag.

    Total over TypeExpr: every wrapper strictly shrinks the expression, so
    recursion always terminates.
    """
    return _RESOLVERS[type(expr)](expr)


# =============================================================================
# tree-sitter conversion
# =============================================================================


def _inner_types(node: Node) -> list[Node]:
    """Named children of a type node, without interleaved comments."""
    return [child for child in node.named_children if child.type != "comment"]


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def type_expr_from_node(node: Node, declared_types: AbstractSet[str]) -> TypeExpr:
    """
    Build a TypeExpr from a tree-sitter-go type node.

    Args:
        node: Type node (the `type` field of a field_declaration)
        declared_types: Names of all types declared in the same unit

    Returns:
        TypeExpr; unsupported shapes become Other(node.type)
    """
    kind = node.type

    if kind == "type_identifier":
        name = _text(node)
        return Identifier(name, name in declared_types)

    if kind == "pointer_type":
        inner = _inner_types(node)
        if inner:
            return Pointer(type_expr_from_node(inner[0], declared_types))

    elif kind in ("slice_type", "array_type"):
        element = node.child_by_field_name("element")
        if element is not None:
            return Slice(type_expr_from_node(element, declared_types))

    elif kind == "map_type":
        key = node.child_by_field_name("key")
        value = node.child_by_field_name("value")
        if key is not None and value is not None:
            return Map(
                type_expr_from_node(key, declared_types),
                type_expr_from_node(value, declared_types),
            )

    elif kind == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if package is not None and name is not None:
            return Qualified(_text(package), _text(name))

    return Other(kind)
