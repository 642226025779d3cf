"""Data models for the schema dependency graph.

Edges are directed: dependencies_of(A) contains B means A imports B.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from ..scanning.models import FileRecord


@dataclass(frozen=True)
class GraphNode:
    """A schema file inside the dependency graph."""

    record: FileRecord

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def namespace(self) -> Optional[str]:
        return self.record.namespace

    @property
    def imports(self) -> tuple[str, ...]:
        return self.record.imports

    @property
    def message_count(self) -> int:
        return self.record.message_count

    @property
    def enum_count(self) -> int:
        return self.record.enum_count


@dataclass(frozen=True)
class GraphStatistics:
    """Aggregate counts over a dependency graph."""

    total_files: int
    total_namespaces: int
    total_messages: int
    total_enums: int
    total_edges: int
    root_files: int  # no resolved imports
    leaf_files: int  # nothing imports them
    cycle_count: int
    cross_namespace_edges: int
    unresolved_imports: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
