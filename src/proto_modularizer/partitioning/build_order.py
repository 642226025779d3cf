"""Build ordering over a partition's module-dependency graph.

An edge "A depends on B" means B must be built before A. Dependency names
that match no module are ignored here; validation reports them separately.
"""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from ..exceptions import BuildOrderError, InvalidPartitionError
from ..graph.algorithms import find_cycles

if TYPE_CHECKING:
    from .models import Module


def _known_dependencies(modules: Sequence[Module]) -> dict[str, list[str]]:
    names = {m.name for m in modules}
    return {m.name: sorted(d for d in m.dependencies if d in names) for m in modules}


def topological_sort(modules: Sequence[Module]) -> Optional[list[str]]:
    """Order modules so every module follows its dependencies (Kahn's algorithm).

    Ties are broken by input order for the initial wave and by name for
    modules that become ready later, so the result is deterministic.

    Returns:
        Module names in build order, or None if the dependencies contain a
        cycle or two modules share a name
    """
    deps = _known_dependencies(modules)

    in_degree: dict[str, int] = {name: len(d) for name, d in deps.items()}
    dependents: dict[str, list[str]] = {name: [] for name in deps}
    for name, targets in deps.items():
        for target in targets:
            dependents[target].append(name)

    queue: deque[str] = deque(name for name in deps if in_degree[name] == 0)
    order: list[str] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for dependent in sorted(dependents[current]):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    # Duplicate names collapse in deps, so compare against the module count
    if len(order) < len(modules):
        return None
    return order


def require_build_order(modules: Sequence[Module]) -> list[str]:
    """Like topological_sort, but raise instead of returning None.

    Raises:
        InvalidPartitionError: If two modules share a name
        BuildOrderError: If the dependencies contain a cycle
    """
    duplicates = duplicate_module_names(modules)
    if duplicates:
        raise InvalidPartitionError(
            [
                f"Module name '{name}' is used by {count} modules"
                for name, count in duplicates.items()
            ]
        )
    order = topological_sort(modules)
    if order is None:
        raise BuildOrderError(find_module_cycles(modules))
    return order


def build_levels(modules: Sequence[Module]) -> list[list[str]]:
    """Split modules into sequential build waves.

    Each level holds the not-yet-built modules whose dependencies are all in
    earlier levels. Modules caught in a cycle never become ready and are
    left out.
    """
    deps = _known_dependencies(modules)
    levels: list[list[str]] = []
    processed: set[str] = set()
    remaining = list(deps)

    while remaining:
        level = sorted(name for name in remaining if all(d in processed for d in deps[name]))
        if not level:
            break
        levels.append(level)
        processed.update(level)
        remaining = [name for name in remaining if name not in processed]

    return levels


def dependency_depths(modules: Sequence[Module]) -> dict[str, int]:
    """Longest dependency chain below each module, in edges.

    A module with no dependencies has depth 0; otherwise depth is one more
    than its deepest dependency. Unknown dependency names count as depth 0.
    Memoized and computed with an explicit stack; an edge back into a module
    still being computed (a cycle) contributes depth 0.
    """
    names = {m.name for m in modules}
    declared = {m.name: sorted(m.dependencies) for m in modules}
    depths: dict[str, int] = {}
    in_progress: set[str] = set()

    for root in declared:
        if root in depths:
            continue
        stack: list[str] = [root]
        while stack:
            current = stack[-1]
            if current in depths:
                stack.pop()
                continue
            in_progress.add(current)
            pending = [
                d for d in declared[current]
                if d in names and d not in depths and d not in in_progress
            ]
            if pending:
                stack.extend(pending)
                continue

            if declared[current]:
                depths[current] = 1 + max(depths.get(d, 0) for d in declared[current])
            else:
                depths[current] = 0
            in_progress.discard(current)
            stack.pop()

    return depths


def max_dependency_depth(modules: Sequence[Module]) -> int:
    return max(dependency_depths(modules).values(), default=0)


def find_module_cycles(modules: Sequence[Module]) -> list[list[str]]:
    """Cycles in the declared module-dependency relation."""
    deps = _known_dependencies(modules)
    return find_cycles(deps, lambda name: deps.get(name, ()))


def duplicate_module_names(modules: Sequence[Module]) -> dict[str, int]:
    """Names used by more than one module, with their counts, sorted by name."""
    counts = Counter(m.name for m in modules)
    return {name: count for name, count in sorted(counts.items()) if count > 1}
