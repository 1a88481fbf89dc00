"""
Source Walker

File system traversal with filtering for Go source files.
"""

import fnmatch
import os
from pathlib import Path
from typing import Generator, Optional

from structdoc.configs.constants import GO_EXTENSION, MAX_FILE_SIZE
from structdoc.configs.ignore_patterns import load_ignore_patterns
from structdoc.configs.logging import get_logger
from structdoc.exceptions import ReadError

logger = get_logger("ingest.walker")


def walk_go_files(
    root_path: str,
    ignore_patterns: Optional[set[str]] = None,
) -> Generator[Path, None, None]:
    """
    Walk a source tree yielding Go files in sorted order.

    A path to a single file yields just that file.

    Args:
        root_path: Directory (or single .go file) to walk
        ignore_patterns: Additional patterns to ignore (merged with defaults
                         + .structdocignore)

    Yields:
        Path objects for each Go file to process

    Raises:
        ReadError: If root_path does not exist
    """
    root = Path(root_path)
    if not root.exists():
        raise ReadError("Source path does not exist", str(root))

    if root.is_file():
        yield root
        return

    ignore = load_ignore_patterns(str(root), ignore_patterns)

    for dirpath, dirnames, filenames in os.walk(root):
        # Filter out ignored directories (in-place modification keeps os.walk from descending)
        rel_dir = Path(dirpath).relative_to(root)
        dirnames[:] = sorted(
            d
            for d in dirnames
            if not d.startswith((".", "_"))
            and not _matches(d, (rel_dir / d).as_posix(), ignore)
        )

        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename

            # Skip hidden files
            if filename.startswith((".", "_")):
                continue

            if file_path.suffix != GO_EXTENSION:
                continue

            # Check if file matches any ignore pattern
            rel_path = file_path.relative_to(root).as_posix()
            if _matches(filename, rel_path, ignore):
                continue

            # Check file size
            try:
                if file_path.stat().st_size > MAX_FILE_SIZE:
                    logger.warning(f"Skipping large file: {rel_path}")
                    continue
            except OSError as e:
                raise ReadError("Cannot stat source file", str(file_path), {"error": str(e)}) from e

            yield file_path


def _matches(name: str, rel_path: str, patterns: set[str]) -> bool:
    """Check a file or directory against ignore patterns by name or relative path."""
    return any(fnmatch.fnmatch(name, p) or fnmatch.fnmatch(rel_path, p) for p in patterns)
