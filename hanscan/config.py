"""
Scan Configuration
Defaults for a scan, overridable from the CLI or HANSCAN_* environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from hanscan.analyzers.script_matcher import ScriptMatcher

# CJK Unified Ideographs, the range the tool has always reported on.
DEFAULT_SCRIPT_RANGE = "4e00-9fa5"


def _env_workers() -> Optional[int]:
    value = os.environ.get("HANSCAN_WORKERS", "").strip()
    if not value:
        return None
    try:
        workers = int(value)
    except ValueError:
        return None
    return workers if workers > 0 else None


@dataclass
class ScanConfig:
    script_range: str = field(
        default_factory=lambda: os.environ.get("HANSCAN_RANGE", DEFAULT_SCRIPT_RANGE)
    )
    workers: Optional[int] = field(default_factory=_env_workers)

    def max_workers(self) -> int:
        """Worker pool size, bounded by available parallelism when unset."""
        return self.workers or os.cpu_count() or 1

    def build_matcher(self) -> ScriptMatcher:
        return ScriptMatcher.from_expression(self.script_range)
