"""Analyze command: report migration complexity."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analyzer import AnalysisResult, analyze_files
from . import app
from ._common import (
    CONFIG_OPTION,
    LOG_FILE_OPTION,
    QUIET_OPTION,
    command_errors,
    console,
    resolve_config,
)

_COMPLEXITY_COLORS = {"low": "green", "medium": "yellow", "high": "red"}


@app.command()
def analyze(
    path: Path = typer.Argument(..., help="Path to file or directory to analyze"),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Recursively analyze all JS files"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output in machine-readable JSON format"
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-file details"),
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    Analyze JavaScript files and report migration complexity.

    Complexity is a heuristic from line, function and class counts.
    """
    with command_errors("Analysis"):
        settings = resolve_config(config, verbose=verbose, quiet=quiet, log_file=log_file)
        result = analyze_files(path, recursive=recursive, config=settings)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return

    _print_report(result, show_files=verbose)


def _print_report(result: AnalysisResult, show_files: bool) -> None:
    color = _COMPLEXITY_COLORS[result.complexity]
    console.print("[green]\nAnalysis complete:[/green]")
    console.print(f"Total files: {result.total_files}")
    console.print(f"Total lines: {result.total_lines}")
    console.print(f"Estimated complexity: [{color}]{result.complexity}[/{color}]")
    console.print(f"CommonJS imports: {result.commonjs_imports}")
    console.print(f"ES6 imports: {result.es6_imports}")
    console.print(f"Functions without types: {result.untyped_functions}")

    if not show_files or not result.files:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("File", min_width=24)
    table.add_column("Lines", justify="right")
    table.add_column("require()", justify="right")
    table.add_column("import", justify="right")
    table.add_column("Functions", justify="right")
    table.add_column("Classes", justify="right")
    table.add_column("Complexity")

    for f in result.files:
        file_color = _COMPLEXITY_COLORS[f.complexity]
        table.add_row(
            escape(f.path),
            str(f.lines),
            str(f.commonjs_imports),
            str(f.es6_imports),
            str(f.functions),
            str(f.classes),
            f"[{file_color}]{f.complexity}[/{file_color}]",
        )

    console.print()
    console.print(table)
