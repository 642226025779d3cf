"""Scanning exceptions: unreadable or unparseable schema files."""

from pathlib import Path

from .base import ModularizerError


class ScanError(ModularizerError):
    """Base class for schema scanning errors."""

    pass


class SchemaParseError(ScanError):
    """Raised when a schema file cannot be read or parsed."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Failed to parse schema file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
