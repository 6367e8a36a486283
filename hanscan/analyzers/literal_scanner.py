"""
Literal Scanner
Per-file pipeline: read, parse, extract candidates, match the script range,
map offsets to line/column and hand results to the accumulator.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from hanscan.analyzers.literal_extractor import Candidate, CandidateKind, LiteralExtractor
from hanscan.analyzers.script_matcher import ScriptMatcher
from hanscan.core.ast_parser import SourceParser
from hanscan.core.dialect import Dialect, classify
from hanscan.core.results import ResultAccumulator, ScanResult
from hanscan.utils.positions import LineIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    offset: int
    text: str


def match_candidate(candidate: Candidate, matcher: ScriptMatcher) -> Optional[Match]:
    """
    Match a single candidate.
    Markup text is matched raw but reported trimmed, and dropped if trimming empties it.
    """
    found = matcher.find(candidate.value)
    if found is None:
        return None

    text = candidate.value
    if candidate.kind is CandidateKind.MARKUP_TEXT:
        text = text.strip()
        if not text:
            return None
    return Match(offset=candidate.start + candidate.value_offset + found, text=text)


def match_candidates(candidates: Iterable[Candidate], matcher: ScriptMatcher) -> Iterator[Match]:
    for candidate in candidates:
        match = match_candidate(candidate, matcher)
        if match is not None:
            yield match


class LiteralScanner:
    """Scans one source file at a time; safe to share between worker threads."""

    def __init__(self, matcher: ScriptMatcher, parser: Optional[SourceParser] = None):
        self.matcher = matcher
        self.parser = parser or SourceParser()

    def scan_source(self, source: str, dialect: Dialect, file_path: str = "") -> List[ScanResult]:
        outcome = self.parser.parse(source, dialect)
        if not outcome.ok:
            first = outcome.diagnostics[0]
            logger.debug(
                "Skipping %s: %d parse error(s), first at %d:%d: %s",
                file_path or "<source>", len(outcome.diagnostics),
                first.line, first.column, first.message,
            )
            return []

        candidates = LiteralExtractor(outcome.source).extract(outcome.tree)
        line_index = LineIndex(outcome.source)

        results = []
        for match in match_candidates(candidates, self.matcher):
            line, column = line_index.locate(match.offset)
            results.append(ScanResult(file_path=file_path, line=line, column=column, text=match.text))
        return results

    def scan_file(self, file_path: Path, accumulator: ResultAccumulator, dialect: Optional[Dialect] = None) -> int:
        """
        Scan a file and append its results. Returns the number appended.
        Unsupported, unreadable, non-UTF-8 and unparsable files contribute nothing.
        """
        dialect = dialect or classify(file_path)
        if dialect is None:
            return 0

        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable file %s: %s", file_path, e)
            return 0

        results = self.scan_source(source, dialect, str(file_path))
        for result in results:
            accumulator.append(result)
        return len(results)
