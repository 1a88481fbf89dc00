"""
Data Models for Declaration Extraction

Structured representations of Go struct declarations extracted from source files.
"""

from dataclasses import dataclass, field
from typing import Optional

from tree_sitter import Tree

from structdoc.configs.constants import DEFAULT_SHOW_EXPORTED, DEFAULT_TITLE


@dataclass
class Field:
    """Represents one named member of a struct declaration."""

    name: str  # Display name (tag override or declared identifier)
    type: str  # Normalized type string, e.g. "*[]Address"
    raw_type: str = ""  # Unqualified type name used for cross-references
    is_struct: bool = False  # Type names a user-defined type in the same unit
    exported: bool = False  # Based on the field identifier's casing
    comment: str = ""  # Trailing line comment
    tags: dict[str, str] = field(default_factory=dict)  # tag key -> first segment
    declared_name: str = ""  # Identifier as written in the source


@dataclass
class Declaration:
    """Represents an exported struct type declaration."""

    name: str
    comment: str = ""  # Leading doc comment
    fields: list[Field] = field(default_factory=list)
    exported: bool = True
    source_file: str = ""  # Unit the declaration came from


@dataclass(frozen=True)
class DocOptions:
    """Read-only options for one extraction and rendering run."""

    field_name_tag: Optional[str] = None  # Tag key supplying field display names
    title: str = DEFAULT_TITLE
    show_exported: bool = DEFAULT_SHOW_EXPORTED


@dataclass
class SourceUnit:
    """One parsed Go source file."""

    path: str
    source: bytes
    tree: Tree
