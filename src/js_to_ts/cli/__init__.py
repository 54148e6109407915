"""CLI entry point, registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="js-to-ts",
    help="js-to-ts - Migrate JavaScript projects to TypeScript",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]js-to-ts[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Migrate JavaScript files to TypeScript and report migration complexity."""


# Import subcommands to register them
from .migrate import migrate as _migrate  # noqa: F401, E402
from .init import init as _init  # noqa: F401, E402
from .analyze import analyze as _analyze  # noqa: F401, E402
