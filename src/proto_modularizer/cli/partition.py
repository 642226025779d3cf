"""Partition and plan commands: modules, build order and build-plan export."""

from pathlib import Path
from typing import Optional

import typer

from ..api import load_graph, modularize, partition_graph
from ..formatters import JsonFormatter
from ..logging_config import setup_logging, verbosity_for
from ..partitioning import create_build_plan, topological_sort
from . import app
from ._common import (
    CONFIG_OPTION,
    FORMAT_OPTION,
    NAMING_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    VERBOSE_OPTION,
    err_console,
    handle_errors,
    resolve_config,
    resolve_formatter,
)


@app.command()
def partition(
    path: Path = PATH_ARGUMENT,
    naming: Optional[str] = NAMING_OPTION,
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Group files into modules by namespace and show the build order.

    [bold cyan]Examples:[/bold cyan]

      proto-modularizer partition protos/

      proto-modularizer partition protos/ --naming full --format json
    """
    logger = setup_logging(verbosity_for(verbose, quiet))
    formatter = resolve_formatter(fmt)

    with handle_errors(logger, verbose):
        settings = resolve_config(config=config, naming=naming, verbose=verbose, quiet=quiet)
        result = partition_graph(load_graph(path, settings), settings)
        formatter.render_partition(result, topological_sort(result.modules))


@app.command()
def plan(
    path: Path = PATH_ARGUMENT,
    naming: Optional[str] = NAMING_OPTION,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the plan to this file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Export the build plan (modules in build order) as JSON.

    Refuses to produce a plan for a partition that fails validation.

    [bold cyan]Examples:[/bold cyan]

      proto-modularizer plan protos/ > plan.json

      proto-modularizer plan protos/ --output plan.json
    """
    logger = setup_logging(verbosity_for(verbose, quiet))

    with handle_errors(logger, verbose):
        settings = resolve_config(config=config, naming=naming, verbose=verbose, quiet=quiet)
        result = modularize(path, settings)
        for error in result.report.errors:
            err_console.print(f"  [red]x[/red] {error}")

        text = JsonFormatter().format_plan(create_build_plan(result.partition, result.report))
        if output is None:
            print(text)
        else:
            output.write_text(text + "\n")
            if not quiet:
                err_console.print(f"Wrote build plan to [green]{output}[/green]")
