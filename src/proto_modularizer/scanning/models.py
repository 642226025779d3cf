"""Data models for the scanning layer."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class FileRecord:
    """Raw observations for a single schema file.

    ``imports`` keeps the declaration order and may reference files that are
    not part of the scanned set.
    """

    path: str
    namespace: Optional[str] = None
    imports: tuple[str, ...] = field(default_factory=tuple)
    message_count: int = 0
    enum_count: int = 0

    def __post_init__(self) -> None:
        if self.message_count < 0 or self.enum_count < 0:
            raise ValueError(f"Type counts must be non-negative for {self.path}")
        # Accept any sequence from callers but store an immutable tuple
        if not isinstance(self.imports, tuple):
            object.__setattr__(self, "imports", tuple(self.imports))
