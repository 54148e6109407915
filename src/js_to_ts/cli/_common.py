"""Shared CLI helpers."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console

from ..config import MigrationConfig, load_config
from ..exceptions import JsToTsError
from ..logging_config import get_logger, setup_logging

console = Console()

QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")
LOG_FILE_OPTION = typer.Option(
    None, "--log-file", help="Also append log records to this file", dir_okay=False
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="TOML config file", exists=True, dir_okay=False
)


def resolve_config(
    config: Optional[Path] = None,
    project_type: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> MigrationConfig:
    """Build settings from CLI options and configure logging from their verbosity."""
    overrides = {}
    if project_type is not None:
        overrides["project_type"] = project_type
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    settings = load_config(config_file=config, **overrides)
    setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
        log_file=log_file,
    )
    return settings


@contextmanager
def command_errors(action: str) -> Iterator[None]:
    """Turn errors escaping a command into a printed message and exit code."""
    logger = get_logger()
    try:
        yield
    except typer.Exit:
        raise
    except JsToTsError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]{action} error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print(f"\n[yellow]{action} interrupted[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        logger.exception(f"Unexpected error during {action.lower()}")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
