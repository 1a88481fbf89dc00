"""
Documentation Pipeline

Wires the source walker, parser, extractor and renderer together:

    walk .go files -> parse units -> extract declarations -> render Markdown

Units are processed one at a time in sorted path order, so the declaration
order is deterministic. Any read, parse or write error stops the run.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from structdoc.ast.extractors import get_extractor
from structdoc.ast.models import Declaration, DocOptions, SourceUnit
from structdoc.ast.parser import GoParser, get_parser
from structdoc.configs.logging import get_logger
from structdoc.ingest.walker import walk_go_files
from structdoc.render.markdown import write_markdown

logger = get_logger("pipeline")


@dataclass
class GenerateResult:
    """Outcome of a generate run."""

    output_path: Path
    files_parsed: int
    declarations: list[Declaration] = field(default_factory=list)


def load_units(
    source_path: str,
    ignore_patterns: Optional[Iterable[str]] = None,
    parser: Optional[GoParser] = None,
) -> list[SourceUnit]:
    """
    Read and parse every Go file under source_path.

    Raises:
        ReadError: If the path or a file cannot be read
        ParseError: If a file has syntax errors
    """
    parser = parser or get_parser()
    patterns = set(ignore_patterns) if ignore_patterns else None
    return [parser.parse_file(path) for path in walk_go_files(source_path, patterns)]


def extract(units: Iterable[SourceUnit], options: DocOptions) -> list[Declaration]:
    """
    Extract exported struct declarations from parsed units.

    Declarations keep unit order, then source order within a unit. Duplicate
    names across units are all kept.
    """
    extractor = get_extractor("go")
    declarations: list[Declaration] = []

    for unit in units:
        found = extractor.extract_declarations(unit.tree, unit.source, options, unit.path)
        logger.debug(f"{unit.path or '<source>'}: {len(found)} declarations")
        declarations.extend(found)

    return declarations


def generate_docs(
    source_path: str,
    output_path: Union[str, Path],
    options: DocOptions,
    ignore_patterns: Optional[Iterable[str]] = None,
) -> GenerateResult:
    """
    Generate Markdown documentation for the Go structs under source_path.

    Raises:
        ReadError, ParseError: From loading the sources
        WriteError: If the output cannot be written
    """
    units = load_units(source_path, ignore_patterns)
    declarations = extract(units, options)
    written = write_markdown(declarations, output_path, options)

    logger.info(
        f"Documented {len(declarations)} structs from {len(units)} files -> {written}"
    )
    return GenerateResult(
        output_path=written,
        files_parsed=len(units),
        declarations=declarations,
    )
