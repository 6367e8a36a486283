"""
Scan Errors
Only conditions that make a whole scan meaningless are raised to callers.
"""

from pathlib import Path


class ScanError(Exception):
    """Base class for errors that abort a scan."""


class NotADirectoryScanError(ScanError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path is not a directory: {path}")


class MatcherConfigError(ScanError):
    """Raised when a script range expression cannot be turned into a matcher."""
