"""Partition validation.

Errors (partition unusable for build generation):
- Completeness: every graph file belongs to some module
- Uniqueness: no file belongs to two modules, no name is used by two modules
- Acyclicity: the module-dependency relation has no cycle
- Resolvability: every declared dependency names a module of the partition
- Import satisfaction: every cross-module import is covered by a declared
  dependency

Warnings: empty modules, isolated modules, unresolved imports.

Validation never raises; it always returns a report.
"""

from __future__ import annotations

from ..graph.dependency_graph import DependencyGraph
from ..partitioning.build_order import duplicate_module_names, find_module_cycles
from ..partitioning.models import Partition
from .models import ValidationReport

_PREVIEW = 5


def validate_partition(
    partition: Partition,
    graph: DependencyGraph,
    report_unresolved_imports: bool = True,
) -> ValidationReport:
    """Check a partition's invariants against its graph.

    Args:
        partition: The partition to check
        graph: The dependency graph the partition was built from
        report_unresolved_imports: Warn about non-builtin imports that match
            no known file

    Returns:
        ValidationReport with errors and warnings in check order
    """
    errors: list[str] = []
    warnings: list[str] = []

    errors.extend(_check_completeness(partition, graph))
    errors.extend(_check_uniqueness(partition))
    errors.extend(_check_module_names(partition))
    errors.extend(_check_acyclic(partition))
    errors.extend(_check_resolvable(partition))
    errors.extend(_check_imports_satisfied(partition, graph))

    empty = [m.name for m in partition.modules if not m.files]
    if empty:
        warnings.append(f"{len(empty)} empty module(s): {empty}")

    depended_upon = {dep for m in partition.modules for dep in m.dependencies}
    isolated = [
        m.name for m in partition.modules if not m.dependencies and m.name not in depended_upon
    ]
    if isolated:
        warnings.append(
            f"{len(isolated)} isolated module(s) with no dependencies or dependents: {isolated}"
        )

    if report_unresolved_imports:
        for path, imports in sorted(graph.unresolved_imports.items()):
            warnings.append(f"File '{path}' has unresolved import(s): {list(imports)}")

    return ValidationReport(errors=tuple(errors), warnings=tuple(warnings))


def _check_completeness(partition: Partition, graph: DependencyGraph) -> list[str]:
    assigned = {path for m in partition.modules for path in m.paths}
    missing = [path for path in graph.paths if path not in assigned]
    if not missing:
        return []
    return [f"{len(missing)} file(s) not assigned to any module: {missing[:_PREVIEW]}"]


def _check_uniqueness(partition: Partition) -> list[str]:
    seen: set[str] = set()
    errors = []
    for module in partition.modules:
        for path in module.paths:
            if path in seen:
                continue
            seen.add(path)
            owners = partition.owners_of(path)
            names = sorted(set(owners))
            if len(names) > 1:
                errors.append(f"File '{path}' exists in {len(names)} modules: {names}")
            elif len(owners) > 1:
                errors.append(
                    f"File '{path}' is listed {len(owners)} times in module '{names[0]}'"
                )
    return errors


def _check_module_names(partition: Partition) -> list[str]:
    return [
        f"Module name '{name}' is used by {count} modules"
        for name, count in duplicate_module_names(partition.modules).items()
    ]


def _check_acyclic(partition: Partition) -> list[str]:
    cycles = find_module_cycles(partition.modules)
    if not cycles:
        return []
    rendered = "; ".join(" -> ".join(cycle + cycle[:1]) for cycle in cycles)
    return [f"Circular dependencies detected between modules: {rendered}"]


def _check_resolvable(partition: Partition) -> list[str]:
    names = set(partition.module_names)
    errors = []
    for module in partition.modules:
        unresolved = sorted(dep for dep in module.dependencies if dep not in names)
        if unresolved:
            errors.append(f"Module '{module.name}' has unresolved dependencies: {unresolved}")
    return errors


def _check_imports_satisfied(partition: Partition, graph: DependencyGraph) -> list[str]:
    errors = []
    for module in partition.modules:
        for path in module.paths:
            for target in graph.dependencies_of(path):
                owners = partition.owners_of(target)
                # Unassigned targets are already reported by the completeness check
                if not owners or any(
                    owner == module.name or owner in module.dependencies for owner in owners
                ):
                    continue
                errors.append(
                    f"Module '{module.name}' file '{path}' imports '{target}' from module "
                    f"'{owners[0]}' without declaring a dependency on it"
                )
    return errors
