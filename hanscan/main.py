"""
hanscan - Main CLI
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from hanscan.config import DEFAULT_SCRIPT_RANGE, ScanConfig
from hanscan.core.dialect import DIALECTS
from hanscan.core.results import ScanResult
from hanscan.engine import scan_directory
from hanscan.errors import ScanError
from hanscan.utils.html_report_generator import HTMLReportGenerator, sort_results

app = typer.Typer(help="Find hard-coded CJK text in JavaScript/TypeScript sources")
console = Console()


class OutputFormat(str, Enum):
    table = "table"
    plain = "plain"
    json = "json"


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _results_json(results: List[ScanResult]) -> str:
    return json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2)


def _print_results(results: List[ScanResult], output_format: OutputFormat):
    if output_format is OutputFormat.json:
        # plain print: rich markup would mangle brackets in source text
        print(_results_json(results))
        return

    if output_format is OutputFormat.plain:
        for result in results:
            print(result.location)
            print(f"    {result.text}")
        return

    if not results:
        console.print("[green]✓ No hard-coded text found.[/green]")
        return

    table = Table(show_lines=False)
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Text", style="white")
    for result in results:
        table.add_row(Text(result.location), Text(result.text))
    console.print(table)


@app.command()
def scan(
    root: Path = typer.Argument(..., help="Directory to scan"),
    exclude: str = typer.Option("", "--exclude", "-e", help="Comma-separated ignore patterns, e.g. node_modules,dist"),
    script_range: str = typer.Option(
        DEFAULT_SCRIPT_RANGE, "--range", "-r", envvar="HANSCAN_RANGE",
        help="Code point ranges to report, e.g. 4e00-9fa5,3040-30ff",
    ),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", "-f", help="Console output format"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write a report (.html or .json)"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", envvar="HANSCAN_WORKERS", min=1, help="Parallel file workers"),
    fail_on_match: bool = typer.Option(False, "--fail-on-match", help="Exit with status 2 when anything is found"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped files and progress"),
):
    """
    Scan a directory for string literals, template text and JSX text
    containing characters of the configured script.
    """
    _configure_logging(verbose)
    config = ScanConfig(script_range=script_range, workers=workers)

    try:
        results = scan_directory(root, exclude, config=config)
    except ScanError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    results = sort_results(results)
    _print_results(results, output_format)

    if output is not None:
        if output.suffix.lower() in (".html", ".htm"):
            HTMLReportGenerator().generate(results, output, root=str(root))
        else:
            output.write_text(_results_json(results), encoding="utf-8")
        if output_format is OutputFormat.table:
            console.print(f"Report written to {output}")

    if output_format is OutputFormat.table:
        file_count = len({r.file_path for r in results})
        console.print(f"✓ {len(results)} match(es) in {file_count} file(s)")

    if fail_on_match and results:
        raise typer.Exit(2)


@app.command()
def dialects():
    """List the file extensions that are scanned and how they are parsed."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan")
    table.add_column()
    table.add_column(style="dim")
    for ext, dialect in DIALECTS.items():
        features = [name for name, on in (("module", dialect.module), ("jsx", dialect.jsx), ("typescript", dialect.typescript)) if on]
        table.add_row(ext, dialect.grammar, ", ".join(features) or "script")
    console.print(table)


if __name__ == "__main__":
    app()
