"""Exception hierarchy for proto-modularizer."""

from .base import ModularizerError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .graph import (
    BuildOrderError,
    DuplicatePathError,
    GraphConstructionError,
    InvalidPartitionError,
    PartitionError,
)
from .scanning import ScanError, SchemaParseError

__all__ = [
    "ModularizerError",
    "GraphConstructionError",
    "DuplicatePathError",
    "PartitionError",
    "InvalidPartitionError",
    "BuildOrderError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "ScanError",
    "SchemaParseError",
]
