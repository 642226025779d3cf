"""Quality metrics for a partition.

Computes four independent axes:
- Granularity: module size distribution and its Gini coefficient
- Cohesion: distinct namespaces per module, hidden cross-namespace edges
- Coupling: declared module dependencies, dependency depth, fan-in
- Build efficiency: build levels, parallel width, critical path
"""

from __future__ import annotations

from typing import Optional

from ..config import ScoringConfig
from ..graph.dependency_graph import DependencyGraph
from ..logging_config import get_logger
from ..math import Gini, Statistics
from ..partitioning.build_order import build_levels, max_dependency_depth
from ..partitioning.models import Partition
from .models import QualityMetrics
from .scoring import compute_quality_score

logger = get_logger(__name__)


def compute_fan_in(partition: Partition) -> dict[str, int]:
    """Number of modules that declare a dependency on each module."""
    fan_in = {name: 0 for name in partition.module_names}
    for module in partition.modules:
        for dep in module.dependencies:
            if dep in fan_in:
                fan_in[dep] += 1
    return fan_in


def count_cross_namespace_edges_within_modules(
    partition: Partition, graph: DependencyGraph
) -> int:
    """Resolved file edges that stay inside one module but cross namespaces."""
    count = 0
    for module in partition.modules:
        members = set(module.paths)
        for node in module.files:
            for target in graph.dependencies_of(node.path):
                if target not in members:
                    continue
                target_node = graph.get_node(target)
                if target_node is not None and target_node.namespace != node.namespace:
                    count += 1
    return count


def compute_quality_metrics(
    partition: Partition,
    graph: DependencyGraph,
    scoring: Optional[ScoringConfig] = None,
) -> QualityMetrics:
    """Compute the quality metrics and composite score of a partition.

    Args:
        partition: Partition to measure
        graph: The dependency graph the partition was built from
        scoring: Score weights and thresholds (defaults to ScoringConfig())

    Returns:
        QualityMetrics; an empty partition yields zeros throughout
    """
    scoring = scoring or ScoringConfig()
    modules = partition.modules

    sizes = [m.file_count for m in modules]
    gini = Gini.gini_coefficient(sizes) if sizes else 0.0
    average_size = Statistics.mean(sizes)

    namespaces_per_module = Statistics.mean([len(m.namespaces) for m in modules])

    dep_counts = [len(m.dependencies) for m in modules]
    average_dependencies = Statistics.mean(dep_counts)
    depth = max_dependency_depth(modules)
    fan_in = compute_fan_in(partition)

    levels = build_levels(modules)
    max_parallelism = max((len(level) for level in levels), default=0)

    score, breakdown = compute_quality_score(
        gini=gini,
        average_size=average_size,
        namespaces_per_module=namespaces_per_module,
        average_dependencies=average_dependencies,
        max_depth=depth,
        max_parallelism=max_parallelism,
        total_modules=len(modules),
        scoring=scoring,
    )

    logger.debug(
        f"Evaluated {partition.strategy} partition: {len(modules)} modules, "
        f"score {score:.1f}"
    )

    return QualityMetrics(
        total_modules=len(modules),
        total_files=sum(sizes),
        min_module_size=min(sizes, default=0),
        max_module_size=max(sizes, default=0),
        average_module_size=average_size,
        median_module_size=Statistics.median(sizes),
        stddev_module_size=Statistics.pstdev(sizes),
        gini_coefficient=gini,
        namespaces_per_module=namespaces_per_module,
        cross_namespace_edges_within_modules=count_cross_namespace_edges_within_modules(
            partition, graph
        ),
        total_module_dependencies=sum(dep_counts),
        average_dependencies_per_module=average_dependencies,
        max_dependencies_per_module=max(dep_counts, default=0),
        max_dependency_depth=depth,
        average_fan_in=Statistics.mean(list(fan_in.values())),
        max_fan_in=max(fan_in.values(), default=0),
        root_modules=len(partition.find_root_modules()),
        leaf_modules=len(partition.find_leaf_modules()),
        max_parallelism=max_parallelism,
        critical_path_length=depth + 1 if modules else 0,
        build_levels=len(levels),
        quality_score=score,
        score_breakdown=breakdown,
        fan_in=fan_in,
        levels=tuple(tuple(level) for level in levels),
    )
