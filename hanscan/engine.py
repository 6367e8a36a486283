"""
Scan Engine
Entry point tying the walker, classifier, parser and matcher together.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from hanscan.analyzers.literal_scanner import LiteralScanner
from hanscan.analyzers.script_matcher import ScriptMatcher
from hanscan.config import ScanConfig
from hanscan.core.ast_parser import SourceParser
from hanscan.core.dialect import classify
from hanscan.core.results import ResultAccumulator, ScanResult
from hanscan.core.scanner import FileScanner, split_patterns
from hanscan.errors import NotADirectoryScanError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanRequest:
    root: Path
    exclude: str = ""

    def validate(self):
        if not self.root.is_dir():
            raise NotADirectoryScanError(self.root)

    def patterns(self) -> List[str]:
        return split_patterns(self.exclude)


def scan_directory(
    root: Union[str, Path],
    exclude: str = "",
    config: Optional[ScanConfig] = None,
    matcher: Optional[ScriptMatcher] = None,
    parser: Optional[SourceParser] = None,
) -> List[ScanResult]:
    """
    Scan every .js/.jsx/.ts/.tsx file under root for literals containing a
    code point of the configured script range.

    Returns the results in no particular order. Raises NotADirectoryScanError
    when root is not a directory and MatcherConfigError for a bad range.
    """
    config = config or ScanConfig()
    request = ScanRequest(Path(root), exclude)
    request.validate()

    matcher = matcher or config.build_matcher()
    scanner = FileScanner(request.root, request.patterns())
    literal_scanner = LiteralScanner(matcher, parser)
    accumulator = ResultAccumulator()

    logger.info("Scanning %s for %r", request.root, matcher)
    file_count = 0
    with ThreadPoolExecutor(max_workers=config.max_workers()) as pool:
        futures = []
        for file_path in scanner.scan():
            dialect = classify(file_path)
            if dialect is None:
                continue
            file_count += 1
            futures.append(pool.submit(literal_scanner.scan_file, file_path, accumulator, dialect))

        for future in futures:
            future.result()

    results = accumulator.snapshot()
    logger.info("Scanned %d file(s), %d match(es)", file_count, len(results))
    return results
