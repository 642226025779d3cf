"""Graph command: file-level import graph summary."""

from pathlib import Path
from typing import Optional

from ..api import load_graph
from ..logging_config import setup_logging, verbosity_for
from . import app
from ._common import (
    CONFIG_OPTION,
    FORMAT_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    VERBOSE_OPTION,
    handle_errors,
    resolve_config,
    resolve_formatter,
)


@app.command()
def graph(
    path: Path = PATH_ARGUMENT,
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Show the import graph: statistics, cycles, namespace dependencies.

    [bold cyan]Examples:[/bold cyan]

      proto-modularizer graph protos/

      proto-modularizer graph protos/ --format json
    """
    logger = setup_logging(verbosity_for(verbose, quiet))
    formatter = resolve_formatter(fmt)

    with handle_errors(logger, verbose):
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        formatter.render_graph(load_graph(path, settings))
