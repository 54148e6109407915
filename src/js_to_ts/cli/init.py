"""Init command."""

from pathlib import Path
from typing import Optional

import typer

from ..package_updater import update_package_json
from ..tsconfig import generate_tsconfig
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
def init(
    path: Path = typer.Argument(..., help="Path to project directory", file_okay=False),
    project_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Project type (node, nestjs, react, angular)"
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show metadata changes"),
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """Initialize TypeScript configuration (tsconfig.json, package.json) for a project."""
    console.print("[blue]Initializing TypeScript configuration...[/blue]")

    with command_errors("Initialization"):
        settings = resolve_config(config, project_type, verbose, quiet, log_file)
        generate_tsconfig(path, settings.project_type, filename=settings.tsconfig_name)
        update_package_json(path, settings.project_type, filename=settings.manifest_name)

    console.print("[green]TypeScript configuration initialized successfully![/green]")
