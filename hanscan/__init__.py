"""
hanscan
Finds hard-coded CJK text in JavaScript/TypeScript sources.
"""

from hanscan.core.results import ScanResult
from hanscan.engine import scan_directory
from hanscan.errors import MatcherConfigError, NotADirectoryScanError, ScanError

__version__ = "0.1.0"

__all__ = [
    "ScanResult",
    "scan_directory",
    "ScanError",
    "NotADirectoryScanError",
    "MatcherConfigError",
]
