"""
Base Extractor Interface

Abstract base class that language extractors implement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tree_sitter import Node, Tree

from structdoc.ast.models import Declaration, DocOptions


class LanguageExtractor(ABC):
    """
    Abstract base class for language-specific declaration extractors.

    Each language implements this interface to pull record declarations
    out of a parsed syntax tree.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language name (e.g., 'go')."""
        pass

    @abstractmethod
    def extract_declarations(
        self,
        tree: Tree,
        source: bytes,
        options: DocOptions,
        source_file: str = "",
    ) -> list[Declaration]:
        """
        Extract exported record declarations from the AST.

        Args:
            tree: Parsed AST tree
            source: Original source bytes
            options: Read-only run options (field name tag convention)
            source_file: Path recorded on each Declaration

        Returns:
            Declarations in source order
        """
        pass

    # Helper methods for AST traversal

    def get_node_text(self, node: Node, source: bytes) -> str:
        """Extract the text content of an AST node."""
        return source[node.start_byte:node.end_byte].decode("utf-8")

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def walk_tree(self, node: Node, type_name: str) -> list[Node]:
        """
        Walk the tree and find all nodes of a specific type.

        Args:
            node: Starting node
            type_name: Node type to find

        Returns:
            List of matching nodes in document order
        """
        results = []

        def _walk(n: Node):
            if n.type == type_name:
                results.append(n)
            for child in n.children:
                _walk(child)

        _walk(node)
        return results


# Registry of extractors by language
_extractors: dict[str, LanguageExtractor] = {}


def register_extractor(extractor: LanguageExtractor) -> None:
    """Register an extractor for a language."""
    _extractors[extractor.language] = extractor


def get_extractor(language: str) -> Optional[LanguageExtractor]:
    """
    Get the extractor for a language.

    Args:
        language: Language name (go)

    Returns:
        LanguageExtractor or None if unsupported
    """
    return _extractors.get(language)
