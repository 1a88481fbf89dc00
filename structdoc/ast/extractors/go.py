"""
Go AST Extractor

Extracts exported struct declarations from Go source files using tree-sitter.
"""

import re
from typing import AbstractSet, Optional

from tree_sitter import Node, Tree

from structdoc.ast.extractors.base import LanguageExtractor, register_extractor
from structdoc.ast.models import Declaration, DocOptions, Field
from structdoc.ast.tags import field_display_name, parse_tag
from structdoc.ast.types import resolve, type_expr_from_node

# //go:generate, //line, //export ... are tool directives, not documentation
_DIRECTIVE_RE = re.compile(r"^//(line |extern |export |[a-z0-9]+:[a-z0-9])")


def is_exported(name: str) -> bool:
    """Go visibility: exported iff the first character is upper-case."""
    return name[:1].isupper()


def comment_group_text(comments: list[str]) -> str:
    """
    Text of a comment group with comment markers removed.

    Blank lines at either end are dropped and runs of blank lines collapse
    to one. Non-empty results end with a newline.
    """
    lines: list[str] = []
    for comment in comments:
        if comment.startswith("//"):
            if _DIRECTIVE_RE.match(comment):
                continue
            text = comment[2:]
            if text.startswith(" "):
                text = text[1:]
        elif comment.startswith("/*") and comment.endswith("*/"):
            text = comment[2:-2]
            if text.startswith(" "):
                text = text[1:]
        else:
            text = comment
        lines.extend(line.rstrip() for line in text.split("\n"))

    result: list[str] = []
    for line in lines:
        if line or (result and result[-1]):
            result.append(line)
    while result and not result[-1]:
        result.pop()

    if not result:
        return ""
    return "\n".join(result) + "\n"


class GoExtractor(LanguageExtractor):
    """Extracts struct declarations from Go source files."""

    @property
    def language(self) -> str:
        return "go"

    def extract_declarations(
        self,
        tree: Tree,
        source: bytes,
        options: DocOptions,
        source_file: str = "",
    ) -> list[Declaration]:
        """Extract exported struct types, including grouped and function-local ones."""
        root = tree.root_node
        declared_types = self.collect_type_names(root, source)

        declarations = []
        for node in self.walk_tree(root, "type_spec"):
            declaration = self._extract_declaration(node, source, declared_types, options)
            if declaration:
                declaration.source_file = source_file
                declarations.append(declaration)

        return declarations

    def collect_type_names(self, root: Node, source: bytes) -> set[str]:
        """Names of every type declared in the unit (structs, named types, aliases)."""
        names = set()
        for type_name in ("type_spec", "type_alias"):
            for node in self.walk_tree(root, type_name):
                name_node = node.child_by_field_name("name")
                if name_node is not None:
                    names.add(self.get_node_text(name_node, source))
        return names

    def _extract_declaration(
        self,
        node: Node,
        source: bytes,
        declared_types: AbstractSet[str],
        options: DocOptions,
    ) -> Optional[Declaration]:
        """Extract a Declaration from a type_spec node if it is an exported struct."""
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if name_node is None or type_node is None or type_node.type != "struct_type":
            return None

        name = self.get_node_text(name_node, source)
        if not is_exported(name):
            return None

        fields: list[Field] = []
        field_list = self.find_child(type_node, "field_declaration_list")
        if field_list is not None:
            for child in field_list.children:
                if child.type == "field_declaration":
                    fields.extend(self._extract_fields(child, source, declared_types, options))

        return Declaration(
            name=name,
            comment=self._doc_comment(node, source),
            fields=fields,
            exported=True,
        )

    def _extract_fields(
        self,
        node: Node,
        source: bytes,
        declared_types: AbstractSet[str],
        options: DocOptions,
    ) -> list[Field]:
        """Expand one field_declaration into a Field per declared name."""
        name_nodes = node.children_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if not name_nodes or type_node is None:
            # Embedded field: nothing to key the docs on
            return []

        resolved = resolve(type_expr_from_node(type_node, declared_types))

        tags: dict[str, str] = {}
        tag_node = node.child_by_field_name("tag")
        if tag_node is not None:
            tags = parse_tag(self.get_node_text(tag_node, source))

        comment = comment_group_text(self._trailing_comments(node, source)).strip()

        fields = []
        for name_node in name_nodes:
            declared_name = self.get_node_text(name_node, source)
            fields.append(Field(
                name=field_display_name(declared_name, tags, options.field_name_tag),
                type=resolved.display,
                raw_type=resolved.raw_name if resolved.is_record else "",
                is_struct=resolved.is_record,
                exported=is_exported(declared_name),
                comment=comment,
                tags=dict(tags),
                declared_name=declared_name,
            ))
        return fields

    def _doc_comment(self, node: Node, source: bytes) -> str:
        """
        Leading doc comment of a type_spec.

        In a grouped `type ( ... )` block the comment sits above the type_spec;
        otherwise it sits above the `type` keyword.
        """
        anchor = node
        parent = node.parent
        if parent is not None and parent.type == "type_declaration":
            if self.find_child(parent, "(") is None:
                anchor = parent

        comments = [self.get_node_text(c, source) for c in self._leading_comments(anchor)]
        return comment_group_text(comments)

    def _leading_comments(self, node: Node) -> list[Node]:
        """Comment group ending on the line directly above (or on) the node's first line."""
        comments: list[Node] = []
        line = node.start_point[0]
        sibling = node.prev_named_sibling

        while sibling is not None and sibling.type == "comment":
            if not (line - 1 <= sibling.end_point[0] <= line):
                break
            previous = sibling.prev_named_sibling
            if (
                previous is not None
                and previous.type != "comment"
                and previous.end_point[0] == sibling.start_point[0]
            ):
                # Trailing comment of the preceding code
                break
            comments.insert(0, sibling)
            line = sibling.start_point[0]
            sibling = previous

        return comments

    def _trailing_comments(self, node: Node, source: bytes) -> list[str]:
        """Comments that start on the line where the field declaration ends."""
        code_children = [c for c in node.children if c.type != "comment"]
        end_row = code_children[-1].end_point[0] if code_children else node.end_point[0]

        comments = [
            self.get_node_text(c, source)
            for c in node.children
            if c.type == "comment" and c.start_point[0] == end_row
        ]

        sibling = node.next_named_sibling
        while (
            sibling is not None
            and sibling.type == "comment"
            and sibling.start_point[0] == end_row
        ):
            comments.append(self.get_node_text(sibling, source))
            sibling = sibling.next_named_sibling

        return comments


# Register the extractor
register_extractor(GoExtractor())
