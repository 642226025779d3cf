"""
Logging for proto-modularizer.

Library modules log through ``get_logger(__name__)`` and never configure
handlers themselves. The CLI calls ``setup_logging`` once per command with
the verbosity it resolved from its flags. Records go to stderr so JSON
written to stdout stays parseable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "proto_modularizer"

LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def verbosity_for(verbose: bool = False, quiet: bool = False) -> str:
    """Fold --verbose/--quiet into a verbosity name (quiet wins)."""
    if quiet:
        return "quiet"
    return "verbose" if verbose else "normal"


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a")
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    return handler


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route proto_modularizer logging through a rich handler on stderr.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose" (debug,
                   with timestamps and source locations)
        log_file: Optional file that receives the same records

    Returns:
        The proto_modularizer root logger

    Raises:
        ValueError: If verbosity is not a known level name
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    level = LEVELS[verbosity]
    debug = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            markup=False,
            show_time=debug,
            show_path=debug,
        )
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the proto_modularizer namespace (the root one if name is None)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
