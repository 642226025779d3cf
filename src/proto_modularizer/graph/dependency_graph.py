"""Schema dependency graph construction and queries.

The graph is built once from scanner output and never mutated. Imports that
do not match a scanned file are dropped from the edge set; the ones that are
not runtime-provided (builtin prefixes) are kept aside in
``unresolved_imports`` so validation can report them.
"""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator
from typing import Optional

from ..config import DEFAULT_BUILTIN_PREFIXES
from ..exceptions import DuplicatePathError
from ..logging_config import get_logger
from ..scanning.models import FileRecord
from .algorithms import find_cycles
from .models import GraphNode, GraphStatistics

logger = get_logger(__name__)


class DependencyGraph:
    """Queryable import graph over schema files.

    Args:
        records: Scanner output, one record per schema file
        builtin_prefixes: Path prefixes excluded from the graph and never
            reported as unresolved

    Raises:
        DuplicatePathError: If two kept records share a path
    """

    def __init__(
        self,
        records: Iterable[FileRecord],
        builtin_prefixes: tuple[str, ...] = DEFAULT_BUILTIN_PREFIXES,
    ) -> None:
        self.builtin_prefixes = tuple(builtin_prefixes)

        kept = [r for r in records if not self.is_builtin(r.path)]
        counts = Counter(r.path for r in kept)
        duplicates = sorted(path for path, count in counts.items() if count > 1)
        if duplicates:
            raise DuplicatePathError(duplicates[0], counts[duplicates[0]])

        self._nodes: dict[str, GraphNode] = {r.path: GraphNode(r) for r in kept}

        forward: dict[str, tuple[str, ...]] = {}
        unresolved: dict[str, tuple[str, ...]] = {}
        for path, node in self._nodes.items():
            resolved: list[str] = []
            missing: list[str] = []
            for imp in node.imports:
                if imp in self._nodes:
                    if imp not in resolved:
                        resolved.append(imp)
                elif not self.is_builtin(imp) and imp not in missing:
                    missing.append(imp)
            forward[path] = tuple(resolved)
            if missing:
                unresolved[path] = tuple(missing)
                logger.debug(f"{path}: unresolved imports {missing}")

        reverse: dict[str, list[str]] = {path: [] for path in self._nodes}
        for path, deps in forward.items():
            for dep in deps:
                reverse[dep].append(path)

        self._forward = forward
        self._reverse = {path: tuple(dependents) for path, dependents in reverse.items()}
        self._unresolved = unresolved

        logger.debug(
            f"Built dependency graph: {len(self._nodes)} files, {self.edge_count} edges"
        )

    # ── Basic access ──────────────────────────────────────────────

    def is_builtin(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.builtin_prefixes)

    @property
    def nodes(self) -> tuple[GraphNode, ...]:
        return tuple(self._nodes.values())

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(deps) for deps in self._forward.values())

    @property
    def unresolved_imports(self) -> dict[str, tuple[str, ...]]:
        """Non-builtin imports that matched no scanned file, per importing file."""
        return dict(self._unresolved)

    def get_node(self, path: str) -> Optional[GraphNode]:
        return self._nodes.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    # ── Edge queries ──────────────────────────────────────────────

    def dependencies_of(self, path: str) -> tuple[str, ...]:
        """Files that ``path`` imports (resolved only)."""
        return self._forward.get(path, ())

    def dependents_of(self, path: str) -> tuple[str, ...]:
        """Files that import ``path``."""
        return self._reverse.get(path, ())

    def transitive_dependencies_of(self, path: str) -> set[str]:
        """All files reachable from ``path`` through imports, excluding itself."""
        visited: set[str] = set()
        queue: deque[str] = deque(self.dependencies_of(path))
        while queue:
            current = queue.popleft()
            if current in visited or current == path:
                continue
            visited.add(current)
            queue.extend(d for d in self.dependencies_of(current) if d not in visited)
        return visited

    def find_roots(self) -> list[GraphNode]:
        """Files with no resolved imports."""
        return [node for node in self._nodes.values() if not self._forward[node.path]]

    def find_leaves(self) -> list[GraphNode]:
        """Files that no other file imports."""
        return [node for node in self._nodes.values() if not self._reverse[node.path]]

    def detect_cycles(self) -> list[list[str]]:
        """Find import cycles with a depth-first search.

        Every back-edge (an import of a file currently on the DFS path)
        yields one cycle: the path slice from that file to the current one.

        Returns:
            List of cycles, each a list of paths; empty when acyclic
        """
        return find_cycles(self._nodes, self.dependencies_of)

    # ── Namespace queries ─────────────────────────────────────────

    def namespace_groups(self) -> dict[str, list[GraphNode]]:
        """Group files by namespace, omitting files without one."""
        groups: dict[str, list[GraphNode]] = {}
        for node in self._nodes.values():
            if node.namespace:
                groups.setdefault(node.namespace, []).append(node)
        return groups

    def cross_namespace_edges(self) -> list[tuple[str, str]]:
        """Distinct (source namespace, target namespace) pairs, sorted."""
        pairs: set[tuple[str, str]] = set()
        for path, deps in self._forward.items():
            source_ns = self._nodes[path].namespace
            if not source_ns:
                continue
            for dep in deps:
                target_ns = self._nodes[dep].namespace
                if target_ns and target_ns != source_ns:
                    pairs.add((source_ns, target_ns))
        return sorted(pairs)

    def statistics(self) -> GraphStatistics:
        nodes = self._nodes.values()
        return GraphStatistics(
            total_files=len(self._nodes),
            total_namespaces=len({n.namespace for n in nodes if n.namespace}),
            total_messages=sum(n.message_count for n in nodes),
            total_enums=sum(n.enum_count for n in nodes),
            total_edges=self.edge_count,
            root_files=len(self.find_roots()),
            leaf_files=len(self.find_leaves()),
            cycle_count=len(self.detect_cycles()),
            cross_namespace_edges=len(self.cross_namespace_edges()),
            unresolved_imports=sum(len(v) for v in self._unresolved.values()),
        )
