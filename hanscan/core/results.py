"""
Scan Results
The externally visible result record and the lock-guarded accumulator that
per-file workers append to.
"""

import threading
from dataclasses import dataclass
from typing import Dict, List, Union


@dataclass(frozen=True)
class ScanResult:
    file_path: str
    line: int
    column: int
    text: str

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "filePath": self.file_path,
            "line": self.line,
            "column": self.column,
            "text": self.text,
        }


class ResultAccumulator:
    """
    Collects ScanResults from concurrent file scans.
    Every append holds the lock; read with snapshot() once all workers finish.
    """

    def __init__(self):
        self._results: List[ScanResult] = []
        self._lock = threading.Lock()

    def append(self, result: ScanResult):
        with self._lock:
            self._results.append(result)

    def snapshot(self) -> List[ScanResult]:
        with self._lock:
            return list(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
