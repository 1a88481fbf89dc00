"""
structdoc Ignore Patterns

Default patterns and loading logic for .structdocignore files.
Follows .gitignore-style format for filtering files during the source walk.
"""

from pathlib import Path
from typing import Iterable, Optional

from structdoc.configs.constants import PROJECT_IGNORE_NAME
from structdoc.exceptions import ConfigurationError

# --- Default Ignore Patterns ---
# Directories the go tool itself never treats as package sources

DEFAULT_IGNORE_PATTERNS = {
    # Version control
    ".git",
    ".svn",
    ".hg",
    # Go conventions
    "vendor",
    "testdata",
    # Misc
    "node_modules",
}


def _load_ignore_file(path: Path) -> set[str]:
    """Load patterns from an ignore file (like .gitignore format)."""
    if not path.exists():
        return set()
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            "Cannot read ignore file", {"path": str(path), "error": str(e)}
        ) from e

    patterns = set()
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.add(line.rstrip("/"))
    return patterns


def load_ignore_patterns(
    root_path: str,
    extra_patterns: Optional[Iterable[str]] = None,
) -> set[str]:
    """Merge default, configured, and project .structdocignore patterns.

    Args:
        root_path: Root path of the Go sources being documented
        extra_patterns: Patterns from the YAML config's ``ignore`` list

    Returns:
        Set of ignore patterns to use for filtering

    Raises:
        ConfigurationError: If .structdocignore cannot be read
    """
    patterns = set(DEFAULT_IGNORE_PATTERNS)

    if extra_patterns:
        patterns.update(extra_patterns)

    root = Path(root_path)
    if root.is_dir():
        patterns.update(_load_ignore_file(root / PROJECT_IGNORE_NAME))

    return patterns
