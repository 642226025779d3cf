"""Partitioning strategies: graph in, Partition out.

Namespace-based strategy:
1. Group files by declared namespace (files without one stay unassigned)
2. Name each group through the naming policy
3. A module depends on every other module owning a namespace that one of
   its files imports
4. Sort modules by name and files by path so output is reproducible
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..graph.dependency_graph import DependencyGraph
from ..graph.models import GraphNode
from ..logging_config import get_logger
from .models import Module, Partition
from .naming import NamingPolicy, standard_naming

logger = get_logger(__name__)


@runtime_checkable
class PartitionStrategy(Protocol):
    """Interface for partitioning strategies."""

    name: str

    def group(self, graph: DependencyGraph) -> Partition: ...


class NamespacePartitioner:
    """Each schema namespace becomes one module."""

    name = "namespace-based"

    def __init__(self, naming: NamingPolicy = standard_naming) -> None:
        self.naming = naming

    def group(self, graph: DependencyGraph) -> Partition:
        module_files: dict[str, list[GraphNode]] = {}
        module_namespaces: dict[str, list[str]] = {}

        for namespace, nodes in sorted(graph.namespace_groups().items()):
            module_name = self.naming(namespace)
            if module_name in module_files:
                logger.warning(
                    f"Namespaces {module_namespaces[module_name]} and '{namespace}' "
                    f"both map to module '{module_name}'; merging"
                )
            module_files.setdefault(module_name, []).extend(nodes)
            module_namespaces.setdefault(module_name, []).append(namespace)

        modules = []
        for module_name, nodes in module_files.items():
            dependencies = self._module_dependencies(module_name, nodes, graph)
            modules.append(
                Module(
                    name=module_name,
                    files=tuple(sorted(nodes, key=lambda n: n.path)),
                    dependencies=frozenset(dependencies),
                )
            )

        unassigned = sum(1 for node in graph if not node.namespace)
        if unassigned:
            logger.debug(f"{unassigned} file(s) without a namespace left unassigned")

        partition = Partition(modules=tuple(modules), strategy=self.name)
        logger.debug(f"Partitioned {len(graph)} files into {len(modules)} modules")
        return partition

    def _module_dependencies(
        self,
        module_name: str,
        nodes: list[GraphNode],
        graph: DependencyGraph,
    ) -> set[str]:
        dependencies: set[str] = set()
        for node in nodes:
            for dep_path in graph.dependencies_of(node.path):
                dep_node = graph.get_node(dep_path)
                dep_namespace = dep_node.namespace if dep_node else None
                if not dep_namespace or dep_namespace == node.namespace:
                    continue
                dep_module = self.naming(dep_namespace)
                if dep_module != module_name:
                    dependencies.add(dep_module)
        return dependencies
