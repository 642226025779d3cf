"""Shared CLI helpers."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console

from ..config import ModularizerConfig, load_config
from ..exceptions import ModularizerError
from ..formatters import BaseFormatter, get_formatter

err_console = Console(stderr=True)

PATH_ARGUMENT = typer.Argument(
    ...,
    help="Root directory of the .proto files",
    exists=True,
    file_okay=False,
    dir_okay=True,
)
FORMAT_OPTION = typer.Option(
    "rich",
    "--format",
    "-f",
    help="Output format: rich (human-readable) or json",
)
NAMING_OPTION = typer.Option(
    None,
    "--naming",
    "-n",
    help="Module naming policy: standard (strip com./org./io.) or full",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")


def resolve_config(
    config: Optional[Path] = None,
    naming: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> ModularizerConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if naming is not None:
        overrides["naming_policy"] = naming
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def resolve_formatter(fmt: str) -> BaseFormatter:
    try:
        return get_formatter(fmt)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")


@contextmanager
def handle_errors(logger: logging.Logger, verbose: bool = False) -> Iterator[None]:
    """Turn library errors into a one-line message and exit status 1."""
    try:
        yield
    except typer.Exit:
        raise
    except ModularizerError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)
