"""
Script Matcher
Finds the first code point of a text value that falls inside a configured
set of inclusive code point ranges.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from hanscan.errors import MatcherConfigError

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class CodePointRange:
    start: int
    end: int

    def __contains__(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end

    def __str__(self) -> str:
        if self.start == self.end:
            return f"U+{self.start:04X}"
        return f"U+{self.start:04X}-U+{self.end:04X}"


def _parse_code_point(token: str) -> int:
    token = token.strip()
    upper = token.upper()
    if upper.startswith("U+"):
        token = token[2:]
    elif upper.startswith("0X"):
        token = token[2:]
    if not token:
        raise MatcherConfigError("Empty code point in script range")
    try:
        return int(token, 16)
    except ValueError:
        raise MatcherConfigError(f"Invalid code point: {token!r}") from None


def parse_ranges(expression: str) -> List[CodePointRange]:
    """
    Parse a range expression such as "4e00-9fa5" or "U+3040-U+309F,3000".
    Segments are comma separated; each is a single code point or lo-hi pair.
    """
    ranges = []
    for segment in expression.split(","):
        segment = segment.strip()
        if not segment:
            continue
        if "-" in segment:
            lo, _, hi = segment.partition("-")
            ranges.append(CodePointRange(_parse_code_point(lo), _parse_code_point(hi)))
        else:
            code_point = _parse_code_point(segment)
            ranges.append(CodePointRange(code_point, code_point))
    return ranges


class ScriptMatcher:
    """Locates the first matching code point of a value, as a UTF-8 byte offset."""

    def __init__(self, ranges: Iterable[CodePointRange]):
        self.ranges = tuple(ranges)
        if not self.ranges:
            raise MatcherConfigError("Script range is empty")

        for code_range in self.ranges:
            if not 0 <= code_range.start <= code_range.end <= MAX_CODE_POINT:
                raise MatcherConfigError(f"Invalid script range: {code_range}")

    @classmethod
    def from_expression(cls, expression: str) -> "ScriptMatcher":
        return cls(parse_ranges(expression))

    def matches(self, code_point: int) -> bool:
        return any(code_point in code_range for code_range in self.ranges)

    def find_index(self, value: str) -> Optional[int]:
        """Character index of the first matching code point, or None."""
        for index, ch in enumerate(value):
            if self.matches(ord(ch)):
                return index
        return None

    def find(self, value: str) -> Optional[int]:
        """
        Byte offset (UTF-8) of the first matching code point in value, or None.
        Lone surrogates left over from escape decoding count as three bytes.
        """
        index = self.find_index(value)
        if index is None:
            return None
        return len(value[:index].encode("utf-8", "surrogatepass"))

    def __repr__(self) -> str:
        return f"ScriptMatcher({', '.join(str(r) for r in self.ranges)})"
