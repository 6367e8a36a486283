"""
File Scanner
Recursively discovers files under a root, honouring .gitignore/.ignore files,
.git/info/exclude, and caller-supplied exclude patterns.
"""

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List, Optional, Tuple

from pathspec import GitIgnoreSpec

from hanscan.errors import NotADirectoryScanError

logger = logging.getLogger(__name__)

# Later files win over earlier ones within a directory.
IGNORE_FILES = (".gitignore", ".ignore")

# (directory relative to root, compiled rules of that directory)
_Rules = Tuple[PurePosixPath, GitIgnoreSpec]


def split_patterns(exclude: str) -> List[str]:
    """Split a comma-separated pattern list, dropping blanks."""
    return [p.strip() for p in exclude.split(",") if p.strip()]


def _read_spec(paths: Iterable[Path]) -> Optional[GitIgnoreSpec]:
    lines: List[str] = []
    for path in paths:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                lines.extend(f.read().splitlines())
        except OSError:
            continue
    if not any(line.strip() and not line.startswith("#") for line in lines):
        return None
    return GitIgnoreSpec.from_lines(_valid_patterns(lines))


def _valid_patterns(patterns: Iterable[str]) -> List[str]:
    """Keep the patterns pathspec can compile; log and drop the rest."""
    valid = []
    for pattern in patterns:
        try:
            GitIgnoreSpec.from_lines([pattern])
        except ValueError as e:
            logger.debug("Ignoring invalid ignore pattern %r: %s", pattern, e)
            continue
        valid.append(pattern)
    return valid


class FileScanner:
    def __init__(self, root_path: Path, exclude_patterns: Iterable[str] = ()):
        root_path = Path(root_path)
        if not root_path.is_dir():
            raise NotADirectoryScanError(root_path)

        self.root_path = root_path
        patterns = _valid_patterns(p for p in exclude_patterns if p)
        self.exclude_spec = GitIgnoreSpec.from_lines(patterns) if patterns else None
        self.info_exclude = _read_spec([root_path / ".git" / "info" / "exclude"])

    def scan(self) -> Iterator[Path]:
        """Lazily yield every non-ignored file below the root."""
        stack: List[Tuple[Path, PurePosixPath, Tuple[_Rules, ...]]] = [
            (self.root_path, PurePosixPath(), ())
        ]
        while stack:
            directory, rel_dir, rules = stack.pop()

            spec = _read_spec(directory / name for name in IGNORE_FILES)
            if spec is not None:
                rules = rules + ((rel_dir, spec),)

            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as e:
                logger.debug("Skipping unreadable directory %s: %s", directory, e)
                continue

            subdirs = []
            for entry in entries:
                rel = rel_dir / entry.name
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = not is_dir and entry.is_file()
                except OSError as e:
                    logger.debug("Skipping %s: %s", entry.path, e)
                    continue

                if self.is_ignored(rel, is_dir, rules):
                    continue
                if is_dir:
                    subdirs.append((Path(entry.path), rel, rules))
                elif is_file:
                    yield Path(entry.path)

            # Depth-first, in name order.
            stack.extend(reversed(subdirs))

    def is_ignored(self, rel: PurePosixPath, is_dir: bool, rules: Tuple[_Rules, ...] = ()) -> bool:
        suffix = "/" if is_dir else ""
        if self.exclude_spec is not None and self.exclude_spec.match_file(rel.as_posix() + suffix):
            return True

        # Deepest ignore file decides; negated patterns re-include.
        for base, spec in reversed(rules):
            local = (rel.relative_to(base) if base.parts else rel).as_posix() + suffix
            result = spec.check_file(local)
            if result.include is not None:
                return result.include

        if self.info_exclude is not None:
            return self.info_exclude.match_file(rel.as_posix() + suffix)
        return False
