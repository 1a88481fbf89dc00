"""
structdoc Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All structdoc-specific exceptions inherit from StructdocError.

Usage:
    from structdoc.exceptions import ParseError, ReadError

    try:
        units = load_units(path)
    except ParseError as e:
        logger.error(f"Parse failed: {e}")
"""


class StructdocError(Exception):
    """Base exception for all structdoc errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(StructdocError):
    """Error in structdoc configuration."""

    pass


# =============================================================================
# Source Errors
# =============================================================================


class SourceError(StructdocError):
    """Base class for errors obtaining a source unit."""

    def __init__(self, message: str, path: str | None = None, details: dict | None = None):
        details = dict(details or {})
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


class ReadError(SourceError):
    """Source unit could not be read or decoded."""

    pass


class ParseError(SourceError):
    """Source unit's syntax could not be parsed into a tree."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        details = {}
        if line is not None:
            details["line"] = line
        if column is not None:
            details["column"] = column
        super().__init__(message, path, details)
        self.line = line
        self.column = column


# =============================================================================
# Output Errors
# =============================================================================


class WriteError(StructdocError):
    """Output destination could not be written."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path
