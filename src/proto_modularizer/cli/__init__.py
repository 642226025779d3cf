"""CLI entry point. Registers all subcommands."""

import typer

from .. import __version__

app = typer.Typer(
    name="proto-modularizer",
    help="proto-modularizer - Namespace-based modularization of Protocol Buffer schemas",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"proto-modularizer {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    pass


# Import subcommands to register them
from .graph import graph as _graph  # noqa: F401, E402
from .partition import partition as _partition, plan as _plan  # noqa: F401, E402
from .evaluate import evaluate as _evaluate, compare as _compare  # noqa: F401, E402
