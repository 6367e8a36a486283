import os
from pathlib import PurePosixPath

import pytest

from hanscan.core.dialect import DIALECTS, classify
from hanscan.core.scanner import FileScanner, split_patterns
from hanscan.errors import NotADirectoryScanError


def walked(root, patterns=()):
    return sorted(os.path.relpath(p, root).replace(os.sep, "/") for p in FileScanner(root, patterns).scan())


def test_split_patterns_drops_blanks():
    assert split_patterns(" node_modules, ,dist ,") == ["node_modules", "dist"]
    assert split_patterns("") == []


def test_walk_yields_files_lazily_in_all_directories(make_tree):
    root = make_tree({"a.js": "", "sub/b.ts": "", "sub/deeper/c.txt": ""})
    files = FileScanner(root).scan()
    assert not isinstance(files, list)
    assert walked(root) == ["a.js", "sub/b.ts", "sub/deeper/c.txt"]


def test_not_a_directory(tmp_path):
    with pytest.raises(NotADirectoryScanError):
        FileScanner(tmp_path / "nope")


def test_nested_gitignore_is_relative_to_its_directory(make_tree):
    root = make_tree({
        "pkg/.gitignore": "/build\n",
        "pkg/build/out.js": "",
        "build/kept.js": "",
    })
    assert walked(root) == ["build/kept.js", "pkg/.gitignore"]


def test_deeper_ignore_file_can_reinclude(make_tree):
    root = make_tree({
        ".gitignore": "*.gen.js\n",
        "keep/.gitignore": "!*.gen.js\n",
        "keep/a.gen.js": "",
        "b.gen.js": "",
    })
    assert walked(root) == [".gitignore", "keep/.gitignore", "keep/a.gen.js"]


def test_dot_ignore_files_and_git_info_exclude(make_tree):
    root = make_tree({
        ".ignore": "tmp/\n",
        ".git/info/exclude": "secret.js\n",
        "tmp/x.js": "",
        "secret.js": "",
        "app.js": "",
    })
    result = walked(root)
    assert "app.js" in result
    assert "tmp/x.js" not in result
    assert "secret.js" not in result


def test_exclude_patterns_win_over_negations(make_tree):
    root = make_tree({".gitignore": "!vendor/\n", "vendor/lib.js": "", "main.js": ""})
    assert walked(root, ["vendor"]) == [".gitignore", "main.js"]


def test_is_ignored_directory_suffix(make_tree):
    root = make_tree({"x.js": ""})
    scanner = FileScanner(root, ["cache/"])
    assert scanner.is_ignored(PurePosixPath("cache"), is_dir=True)
    assert not scanner.is_ignored(PurePosixPath("cache"), is_dir=False)


@pytest.mark.parametrize("name, grammar, jsx", [
    ("a.js", "javascript", True),
    ("a.jsx", "javascript", True),
    ("a.ts", "typescript", False),
    ("a.tsx", "tsx", True),
])
def test_classify_known_extensions(name, grammar, jsx):
    dialect = classify(name)
    assert dialect.grammar == grammar
    assert dialect.jsx is jsx


@pytest.mark.parametrize("name", ["a.JS", "a.Ts", "a.mjs", "a.d", "Makefile", "a.py"])
def test_classify_unsupported(name):
    assert classify(name) is None


def test_only_ts_and_tsx_are_typed():
    assert {ext for ext, d in DIALECTS.items() if d.typescript} == {".ts", ".tsx"}
    assert not DIALECTS[".js"].module


def test_invalid_lines_in_ignore_files_are_dropped(make_tree):
    root = make_tree({".gitignore": "!\n*.gen.js\n", "a.gen.js": "", "b.js": ""})
    assert walked(root) == [".gitignore", "b.js"]
