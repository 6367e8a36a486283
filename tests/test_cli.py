import json

from typer.testing import CliRunner

from hanscan.main import app

runner = CliRunner()


def test_scan_json_output(make_tree):
    root = make_tree({"a.ts": 'const x = "你好";\n', "b.py": "'中'\n"})
    result = runner.invoke(app, ["scan", str(root), "--format", "json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload) == 1
    assert payload[0]["filePath"].endswith("a.ts")
    assert (payload[0]["line"], payload[0]["column"], payload[0]["text"]) == (1, 12, "你好")


def test_scan_plain_output(make_tree):
    root = make_tree({"a.ts": 'const x = "你好";\n'})
    result = runner.invoke(app, ["scan", str(root), "-f", "plain"])
    assert result.exit_code == 0
    assert "a.ts:1:12" in result.stdout
    assert "你好" in result.stdout


def test_scan_table_output_and_summary(make_tree, monkeypatch):
    root = make_tree({"a.ts": "const x = '[b]中[/b]';\n"})
    monkeypatch.chdir(root)
    result = runner.invoke(app, ["scan", "."])
    assert result.exit_code == 0
    assert "[b]中[/b]" in result.stdout
    assert "1 match(es) in 1 file(s)" in result.stdout


def test_missing_directory_exits_with_error(tmp_path):
    result = runner.invoke(app, ["scan", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Path is not a directory" in result.output


def test_bad_range_exits_with_error(make_tree):
    root = make_tree({"a.ts": "'中'\n"})
    result = runner.invoke(app, ["scan", str(root), "--range", "not-hex"])
    assert result.exit_code == 1


def test_exclude_option(make_tree):
    root = make_tree({"keep/a.ts": "'中'\n", "skip/b.ts": "'文'\n"})
    result = runner.invoke(app, ["scan", str(root), "-e", "skip", "-f", "json"])
    assert [r["text"] for r in json.loads(result.stdout)] == ["中"]


def test_fail_on_match(make_tree):
    root = make_tree({"a.ts": "'中'\n"})
    assert runner.invoke(app, ["scan", str(root), "--fail-on-match"]).exit_code == 2
    clean = make_tree({"sub/b.ts": "'abc'\n"})
    assert runner.invoke(app, ["scan", str(clean / "sub"), "--fail-on-match"]).exit_code == 0


def test_html_and_json_reports(make_tree, tmp_path):
    root = make_tree({"src/a.tsx": "const el = <p>你好 &lt;b&gt;</p>;\n"})
    html_path = tmp_path / "report.html"
    json_path = tmp_path / "report.json"

    assert runner.invoke(app, ["scan", str(root / "src"), "-o", str(html_path)]).exit_code == 0
    page = html_path.read_text(encoding="utf-8")
    assert "你好 &amp;lt;b&amp;gt;" in page
    assert "Files With Matches" in page

    assert runner.invoke(app, ["scan", str(root / "src"), "-o", str(json_path), "-f", "plain"]).exit_code == 0
    assert json.loads(json_path.read_text(encoding="utf-8"))[0]["text"] == "你好 &lt;b&gt;"


def test_dialects_command():
    result = runner.invoke(app, ["dialects"])
    assert result.exit_code == 0
    for ext in (".js", ".jsx", ".ts", ".tsx"):
        assert ext in result.stdout


def test_invalid_exclude_pattern_does_not_abort(make_tree):
    root = make_tree({"a.ts": "'中'\n"})
    result = runner.invoke(app, ["scan", str(root), "-e", "!", "-f", "json"])
    assert result.exit_code == 0
    assert [r["text"] for r in json.loads(result.stdout)] == ["中"]
