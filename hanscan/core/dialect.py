"""
Dialect Classifier
Maps a file extension to the parsing dialect used for it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class Dialect:
    name: str
    module: bool
    jsx: bool
    typescript: bool

    @property
    def grammar(self) -> str:
        """tree-sitter grammar that parses this dialect."""
        if self.typescript:
            return "tsx" if self.jsx else "typescript"
        return "javascript"


# .js keeps JSX enabled; React code routinely lives in plain .js files.
DIALECTS: Dict[str, Dialect] = {
    ".js": Dialect("script", module=False, jsx=True, typescript=False),
    ".jsx": Dialect("jsx", module=True, jsx=True, typescript=False),
    ".ts": Dialect("typescript", module=True, jsx=False, typescript=True),
    ".tsx": Dialect("tsx", module=True, jsx=True, typescript=True),
}


def classify(path: Path) -> Optional[Dialect]:
    """Return the dialect for path, or None for unsupported extensions (case-sensitive)."""
    return DIALECTS.get(Path(path).suffix)
