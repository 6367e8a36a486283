"""
Position Mapper
Converts absolute byte offsets in a source file into 1-based line/column pairs.
Columns count bytes since the last newline.
"""

from bisect import bisect_right
from typing import List, Tuple, Union


class LineIndex:
    """Line-start table built once per file."""

    def __init__(self, source: Union[bytes, str]):
        if isinstance(source, str):
            source = source.encode("utf-8", "surrogatepass")

        self.length = len(source)
        self.line_starts: List[int] = [0]
        pos = source.find(b"\n")
        while pos != -1:
            self.line_starts.append(pos + 1)
            pos = source.find(b"\n", pos + 1)

        # A trailing newline does not open another line.
        terminated = not source or source.endswith(b"\n")
        self.line_count = source.count(b"\n") + (0 if terminated else 1)
        self._limit = self.length if terminated else self.length + 1

    def locate(self, offset: int) -> Tuple[int, int]:
        """Return (line, column) for offset, or (line_count + 1, 1) past the end."""
        if offset < 0:
            raise ValueError(f"Negative offset: {offset}")
        if offset >= self._limit:
            return self.line_count + 1, 1

        line = bisect_right(self.line_starts, offset)
        return line, offset - self.line_starts[line - 1] + 1


def line_col(source: Union[bytes, str], offset: int) -> Tuple[int, int]:
    return LineIndex(source).locate(offset)
