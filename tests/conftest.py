from pathlib import Path
from typing import Dict, Union

import pytest

from hanscan.analyzers.script_matcher import ScriptMatcher
from hanscan.config import DEFAULT_SCRIPT_RANGE


@pytest.fixture
def make_tree(tmp_path):
    """Write {relative path: text or bytes} under tmp_path and return the root."""

    def _make(files: Dict[str, Union[str, bytes]]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _make


@pytest.fixture
def cjk_matcher():
    return ScriptMatcher.from_expression(DEFAULT_SCRIPT_RANGE)
