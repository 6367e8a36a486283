"""
HTML Report Generator
Renders scan results as a standalone HTML page grouped by file.
"""

import html
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from hanscan.core.results import ScanResult


def sort_results(results: List[ScanResult]) -> List[ScanResult]:
    """Presentation order: file, then line, then column."""
    return sorted(results, key=lambda r: (r.file_path, r.line, r.column, r.text))


class HTMLReportGenerator:

    def generate(self, results: List[ScanResult], output_path: Path, root: str = ""):
        page = self._build_html(results, root)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(page)

    def _build_html(self, results: List[ScanResult], root: str) -> str:
        by_file: Dict[str, List[ScanResult]] = defaultdict(list)
        for result in sort_results(results):
            by_file[result.file_path].append(result)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hard-coded Text Report - {html.escape(root or 'Unknown')}</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #111827;
            color: #e5e7eb;
            min-height: 100vh;
            padding: 2rem;
        }}

        .container {{
            max-width: 1200px;
            margin: 0 auto;
            background: #1f2937;
            border-radius: 12px;
            overflow: hidden;
        }}

        .header {{
            padding: 2rem;
            text-align: center;
        }}

        .header h1 {{ color: #22d3ee; font-size: 2rem; margin-bottom: 0.5rem; }}
        .header p {{ color: #9ca3af; }}

        .stats-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 1.5rem;
            padding: 0 2rem 2rem;
        }}

        .stat-card {{
            background: #111827;
            padding: 1.5rem;
            border-radius: 8px;
            text-align: center;
        }}

        .stat-value {{ font-size: 2.5rem; font-weight: bold; color: #22d3ee; }}
        .stat-label {{ color: #9ca3af; font-size: 0.9rem; text-transform: uppercase; }}

        .section {{ padding: 1rem 2rem 2rem; }}

        .file-title {{
            font-family: 'Courier New', monospace;
            color: #22d3ee;
            margin: 1.5rem 0 0.5rem;
        }}

        table {{ width: 100%; border-collapse: collapse; }}
        td {{ padding: 0.5rem; border-bottom: 1px solid #374151; vertical-align: top; }}
        td.location {{ font-family: 'Courier New', monospace; color: #9ca3af; white-space: nowrap; width: 8rem; }}
        td.text {{ background: #374151; border-radius: 4px; white-space: pre-wrap; }}

        .empty-state {{ text-align: center; padding: 3rem; color: #6b7280; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Hard-coded Text Report</h1>
            <p>{html.escape(root or 'Unknown')}</p>
        </div>

        <div class="stats-grid">
            <div class="stat-card">
                <div class="stat-value">{len(by_file)}</div>
                <div class="stat-label">Files With Matches</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">{len(results)}</div>
                <div class="stat-label">Matches</div>
            </div>
        </div>

        <div class="section">
            {self._render_files(by_file)}
        </div>
    </div>
</body>
</html>"""

    def _render_files(self, by_file: Dict[str, List[ScanResult]]) -> str:
        if not by_file:
            return '<div class="empty-state">No hard-coded text found.</div>'

        sections = []
        for file_path, file_results in by_file.items():
            rows = "".join(
                f'<tr><td class="location">{r.line}:{r.column}</td>'
                f'<td class="text">{html.escape(r.text)}</td></tr>'
                for r in file_results
            )
            sections.append(
                f'<h3 class="file-title">{html.escape(file_path)}</h3>'
                f"<table>{rows}</table>"
            )
        return "\n".join(sections)
