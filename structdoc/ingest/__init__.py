"""
Source Discovery

Finds the Go files a documentation run reads.
"""

from structdoc.ingest.walker import walk_go_files

__all__ = ["walk_go_files"]
