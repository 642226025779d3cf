"""Evaluate and compare commands: validation, quality metrics and naming comparison."""

from pathlib import Path
from typing import Optional

import typer

from ..api import load_graph, modularize
from ..evaluation import PartitionEvaluator
from ..logging_config import setup_logging, verbosity_for
from ..partitioning import NamespacePartitioner, get_naming_policy
from . import app
from ._common import (
    CONFIG_OPTION,
    FORMAT_OPTION,
    NAMING_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    VERBOSE_OPTION,
    handle_errors,
    resolve_config,
    resolve_formatter,
)


@app.command()
def evaluate(
    path: Path = PATH_ARGUMENT,
    naming: Optional[str] = NAMING_OPTION,
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Validate the namespace partition and score its quality.

    Exits with status 1 if the partition has validation errors.

    [bold cyan]Examples:[/bold cyan]

      proto-modularizer evaluate protos/

      proto-modularizer evaluate protos/ --format json
    """
    logger = setup_logging(verbosity_for(verbose, quiet))
    formatter = resolve_formatter(fmt)

    with handle_errors(logger, verbose):
        settings = resolve_config(config=config, naming=naming, verbose=verbose, quiet=quiet)
        result = modularize(path, settings)
        formatter.render_evaluation(result.report, result.metrics)
        if not result.report.is_valid:
            raise typer.Exit(1)


@app.command()
def compare(
    path: Path = PATH_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Compare the standard and full naming policies side by side.

    [bold cyan]Examples:[/bold cyan]

      proto-modularizer compare protos/
    """
    logger = setup_logging(verbosity_for(verbose, quiet))
    formatter = resolve_formatter(fmt)

    with handle_errors(logger, verbose):
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        graph = load_graph(path, settings)
        standard = NamespacePartitioner(get_naming_policy("standard", settings)).group(graph)
        full = NamespacePartitioner(get_naming_policy("full", settings)).group(graph)

        report = PartitionEvaluator(graph, settings).compare("standard", standard, "full", full)
        formatter.render_comparison(report)
