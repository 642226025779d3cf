"""Build plan: the hand-off to a build-file generator.

A plan lists the partition's modules in build order, each with its schema
paths and declared dependencies. Plans are only produced for partitions that
passed validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidPartitionError
from .build_order import require_build_order
from .models import Partition

if TYPE_CHECKING:
    from ..evaluation.models import ValidationReport


@dataclass(frozen=True)
class PlannedModule:
    name: str
    files: tuple[str, ...]
    dependencies: tuple[str, ...]
    message_count: int
    enum_count: int


@dataclass(frozen=True)
class BuildPlan:
    """Modules of a validated partition, ordered so dependencies come first."""

    strategy: str
    modules: tuple[PlannedModule, ...]

    @property
    def build_order(self) -> list[str]:
        return [m.name for m in self.modules]

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy,
            "build_order": self.build_order,
            "modules": [
                {
                    "name": m.name,
                    "files": list(m.files),
                    "dependencies": list(m.dependencies),
                    "message_count": m.message_count,
                    "enum_count": m.enum_count,
                }
                for m in self.modules
            ],
        }


def create_build_plan(partition: Partition, report: ValidationReport) -> BuildPlan:
    """Create a build plan for a partition that passed validation.

    Raises:
        InvalidPartitionError: If the validation report has errors
        BuildOrderError: If the modules cannot be ordered
    """
    if not report.is_valid:
        raise InvalidPartitionError(list(report.errors))

    planned = []
    for name in require_build_order(partition.modules):
        module = partition.get_module(name)
        if module is None:
            continue
        planned.append(
            PlannedModule(
                name=module.name,
                files=tuple(module.paths),
                dependencies=tuple(sorted(module.dependencies)),
                message_count=module.message_count,
                enum_count=module.enum_count,
            )
        )

    return BuildPlan(strategy=partition.strategy, modules=tuple(planned))
