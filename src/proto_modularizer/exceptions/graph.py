"""Graph and partition exceptions: construction failures, invalid partitions."""

from typing import List

from .base import ModularizerError


class GraphConstructionError(ModularizerError):
    """Base class for errors raised while building a dependency graph."""

    pass


class DuplicatePathError(GraphConstructionError):
    """Raised when two schema records share the same path."""

    def __init__(self, path: str, occurrences: int = 2):
        super().__init__(
            f"Duplicate schema path: {path}",
            details={"path": path, "occurrences": str(occurrences)},
        )
        self.path = path
        self.occurrences = occurrences


class PartitionError(ModularizerError):
    """Base class for errors raised when consuming a partition."""

    pass


class InvalidPartitionError(PartitionError):
    """Raised when a consumer refuses to work with an invalid partition."""

    def __init__(self, errors: List[str]):
        super().__init__(
            f"Partition is invalid ({len(errors)} error(s))",
            details={"first_error": errors[0]} if errors else {},
        )
        self.errors = list(errors)


class BuildOrderError(PartitionError):
    """Raised when modules cannot be ordered for building."""

    def __init__(self, cycles: List[List[str]]):
        rendered = "; ".join(" -> ".join(cycle) for cycle in cycles)
        super().__init__(
            "Cannot determine build order: circular module dependencies",
            details={"cycles": rendered} if rendered else {},
        )
        self.cycles = [list(cycle) for cycle in cycles]
