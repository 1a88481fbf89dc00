"""
Tree-sitter Parser Wrapper

Parses Go source into tree-sitter trees and reports read and syntax failures
as distinct error kinds.
"""

from pathlib import Path
from typing import Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from structdoc.ast.models import SourceUnit
from structdoc.configs.constants import GO_EXTENSION
from structdoc.configs.logging import get_logger
from structdoc.exceptions import ParseError, ReadError

logger = get_logger("ast.parser")


class GoParser:
    """
    Tree-sitter based parser for Go source files.

    Lazily initializes the Go language and parser on first use.
    """

    def __init__(self):
        self._parser: Optional[Parser] = None
        self._language: Optional[Language] = None

    def _get_parser(self) -> Parser:
        """Get or create the Go Parser."""
        if self._parser is None:
            self._language = Language(tree_sitter_go.language())
            self._parser = Parser(self._language)
        return self._parser

    def is_supported(self, file_path: str) -> bool:
        """Check if a file is a Go source file."""
        return Path(file_path).suffix.lower() == GO_EXTENSION

    def parse(self, source: Union[str, bytes], path: str = "") -> SourceUnit:
        """
        Parse Go source code into a SourceUnit.

        Args:
            source: Source code as text or UTF-8 bytes
            path: Path used to label the unit in errors and output

        Returns:
            SourceUnit holding the source bytes and tree

        Raises:
            ParseError: If the source contains syntax errors
        """
        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._get_parser().parse(data)

        if tree.root_node.has_error:
            error_node = _first_error(tree.root_node)
            line, column = (None, None)
            if error_node is not None:
                line = error_node.start_point[0] + 1
                column = error_node.start_point[1] + 1
            raise ParseError("Syntax error in Go source", path or None, line, column)

        return SourceUnit(path=path, source=data, tree=tree)

    def parse_file(self, file_path: Union[str, Path]) -> SourceUnit:
        """
        Read and parse a Go file.

        Raises:
            ReadError: If the file cannot be read or is not valid UTF-8
            ParseError: If the file contains syntax errors
        """
        path = str(file_path)
        try:
            data = Path(file_path).read_bytes()
            data.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError("Failed to read source file", path, {"error": str(e)}) from e

        logger.debug(f"Parsing {path} ({len(data)} bytes)")
        return self.parse(data, path)


def _first_error(node: Node) -> Optional[Node]:
    """Find the first ERROR or missing node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


# Global parser instance (lazy singleton)
_parser: Optional[GoParser] = None


def get_parser() -> GoParser:
    """Get the global GoParser instance."""
    global _parser
    if _parser is None:
        _parser = GoParser()
    return _parser
