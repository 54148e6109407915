"""Migrate command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.rule import Rule

from ..migrator import MigrateOptions
from ..migrator import migrate as run_migration
from . import app
from ._common import (
    CONFIG_OPTION,
    LOG_FILE_OPTION,
    QUIET_OPTION,
    command_errors,
    console,
    resolve_config,
)


@app.command()
def migrate(
    path: Path = typer.Argument(..., help="Path to file or directory to migrate"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-d", help="Preview changes without modifying files"
    ),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Recursively migrate all JS files in directory"
    ),
    skip_config: bool = typer.Option(False, "--skip-config", help="Skip generating tsconfig.json"),
    skip_package: bool = typer.Option(False, "--skip-package", help="Skip updating package.json"),
    project_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Project type (node, nestjs, react, angular)"
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-file progress"),
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    Migrate JavaScript files to TypeScript.

    [bold cyan]Examples:[/bold cyan]

      js-to-ts migrate src/ --recursive

      js-to-ts migrate app.js --dry-run
    """
    console.print("[blue]Starting JavaScript to TypeScript migration...[/blue]")
    console.print(f"[dim]Target: {escape(str(path))}[/dim]")

    with command_errors("Migration"):
        settings = resolve_config(config, project_type, verbose, quiet, log_file)
        options = MigrateOptions(
            dry_run=dry_run,
            recursive=recursive,
            skip_config=skip_config,
            skip_package=skip_package,
            project_type=settings.project_type,
        )
        result = run_migration(path, options, settings)

    if not result.success:
        console.print("[red]\nMigration failed:[/red]")
        console.print(f"[red]{escape(result.error or '')}[/red]")
        return

    for target, text in result.previews.items():
        console.print(f"[yellow]{escape('[DRY RUN]')}[/yellow] Would write: {escape(str(target))}")
        console.print(Rule("Transformed content preview"))
        console.print(text, markup=False, highlight=False)
        console.print(Rule())

    verb = "would migrate" if dry_run else "migrated"
    console.print("[green]\nMigration completed successfully![/green]")
    console.print(f"[dim]Files {verb}: {len(result.migrated_files)}[/dim]")
    for file in result.migrated_files:
        console.print(f"[dim]  - {escape(str(file))}[/dim]")

    if result.failed_files:
        console.print(f"[yellow]Files skipped after errors: {len(result.failed_files)}[/yellow]")
        for file in result.failed_files:
            console.print(f"[yellow]  - {escape(str(file))}[/yellow]")
