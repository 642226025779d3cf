"""Partition models.

A Partition groups the graph's schema files into named Modules, each with
the set of other module names it depends on.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from functools import cached_property
from typing import Any, Optional

from ..graph.models import GraphNode
from .build_order import find_module_cycles


@dataclass(frozen=True)
class Module:
    """A named group of schema files."""

    name: str
    files: tuple[GraphNode, ...] = field(default_factory=tuple)
    dependencies: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.files, tuple):
            object.__setattr__(self, "files", tuple(self.files))
        if not isinstance(self.dependencies, frozenset):
            object.__setattr__(self, "dependencies", frozenset(self.dependencies))

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def message_count(self) -> int:
        return sum(node.message_count for node in self.files)

    @property
    def enum_count(self) -> int:
        return sum(node.enum_count for node in self.files)

    @property
    def paths(self) -> list[str]:
        return [node.path for node in self.files]

    @property
    def namespace(self) -> Optional[str]:
        """Namespace of the first file, if any."""
        return self.files[0].namespace if self.files else None

    @property
    def namespaces(self) -> list[str]:
        """Distinct declared namespaces of the module's files, sorted."""
        return sorted({node.namespace for node in self.files if node.namespace})

    def __str__(self) -> str:
        return (
            f"Module({self.name}: {self.file_count} files, "
            f"{self.message_count} messages, {self.enum_count} enums)"
        )


@dataclass(frozen=True)
class PartitionStatistics:
    """Summary counts over a partition's modules."""

    total_modules: int
    total_files: int
    total_messages: int
    total_enums: int
    average_files_per_module: float
    smallest_module: int
    largest_module: int
    total_module_dependencies: int
    average_dependencies_per_module: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Partition:
    """A set of modules produced by one partitioning strategy.

    Modules are kept sorted by name so two partitions built from the same
    input compare equal.
    """

    modules: tuple[Module, ...]
    strategy: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", tuple(sorted(self.modules, key=lambda m: m.name)))

    @cached_property
    def _by_name(self) -> dict[str, Module]:
        by_name: dict[str, Module] = {}
        for module in self.modules:
            by_name.setdefault(module.name, module)
        return by_name

    @cached_property
    def _owners(self) -> dict[str, list[str]]:
        owners: dict[str, list[str]] = {}
        for module in self.modules:
            for path in module.paths:
                owners.setdefault(path, []).append(module.name)
        return owners

    @property
    def module_names(self) -> list[str]:
        return [m.name for m in self.modules]

    def get_module(self, name: str) -> Optional[Module]:
        return self._by_name.get(name)

    def owner_of(self, path: str) -> Optional[str]:
        """Name of the module holding ``path`` (first by name if duplicated)."""
        owners = self._owners.get(path)
        return owners[0] if owners else None

    def owners_of(self, path: str) -> list[str]:
        """Names of every module holding ``path``; more than one is invalid."""
        return list(self._owners.get(path, ()))

    def has_circular_dependencies(self) -> bool:
        return bool(find_module_cycles(self.modules))

    def find_root_modules(self) -> list[Module]:
        """Modules with no declared dependencies (foundation modules)."""
        return [m for m in self.modules if not m.dependencies]

    def find_leaf_modules(self) -> list[Module]:
        """Modules that no other module depends on."""
        depended_upon = {dep for m in self.modules for dep in m.dependencies}
        return [m for m in self.modules if m.name not in depended_upon]

    def statistics(self) -> PartitionStatistics:
        sizes = [m.file_count for m in self.modules]
        dep_total = sum(len(m.dependencies) for m in self.modules)
        count = len(self.modules)
        return PartitionStatistics(
            total_modules=count,
            total_files=sum(sizes),
            total_messages=sum(m.message_count for m in self.modules),
            total_enums=sum(m.enum_count for m in self.modules),
            average_files_per_module=sum(sizes) / count if count else 0.0,
            smallest_module=min(sizes, default=0),
            largest_module=max(sizes, default=0),
            total_module_dependencies=dep_total,
            average_dependencies_per_module=dep_total / count if count else 0.0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy,
            "modules": [
                {
                    "name": m.name,
                    "files": m.paths,
                    "dependencies": sorted(m.dependencies),
                    "message_count": m.message_count,
                    "enum_count": m.enum_count,
                }
                for m in self.modules
            ],
        }
