"""Report formatters for proto-modularizer: rich terminal output and JSON."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "rich": RichFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered under ``name``.

    Raises:
        ValueError: If no formatter is registered under that name
    """
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}"
        ) from None


__all__ = [
    "FORMATTERS",
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
]
