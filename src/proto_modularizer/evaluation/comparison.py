"""Side-by-side comparison of two partitions of the same graph."""

from __future__ import annotations

from typing import Callable, Optional

from ..config import ScoringConfig
from ..graph.dependency_graph import DependencyGraph
from ..partitioning.models import Partition
from .metrics import compute_quality_metrics
from .models import ComparisonReport, Direction, MetricComparison, QualityMetrics

# (section, label, accessor, direction)
_ROWS: list[tuple[str, str, Callable[[QualityMetrics], float], Direction]] = [
    ("Granularity", "Total Modules", lambda m: m.total_modules, Direction.NEUTRAL),
    ("Granularity", "Avg Module Size", lambda m: m.average_module_size, Direction.NEUTRAL),
    ("Granularity", "Gini Coefficient", lambda m: m.gini_coefficient, Direction.LOWER),
    ("Cohesion", "Namespaces per Module", lambda m: m.namespaces_per_module, Direction.LOWER),
    ("Coupling", "Avg Dependencies", lambda m: m.average_dependencies_per_module, Direction.NEUTRAL),
    ("Coupling", "Max Dependency Depth", lambda m: m.max_dependency_depth, Direction.LOWER),
    ("Build", "Max Parallelism", lambda m: m.max_parallelism, Direction.HIGHER),
    ("Build", "Critical Path", lambda m: m.critical_path_length, Direction.LOWER),
    ("Overall", "Quality Score", lambda m: m.quality_score, Direction.HIGHER),
]


def pick_winner(value_a: float, value_b: float, direction: Direction) -> Optional[str]:
    """Return "a", "b", or None for a tie or a metric with no preferred direction."""
    if direction is Direction.NEUTRAL or value_a == value_b:
        return None
    if direction is Direction.LOWER:
        return "a" if value_a < value_b else "b"
    return "a" if value_a > value_b else "b"


def compare_metrics(
    name_a: str, metrics_a: QualityMetrics, name_b: str, metrics_b: QualityMetrics
) -> ComparisonReport:
    rows = []
    for section, label, accessor, direction in _ROWS:
        value_a = accessor(metrics_a)
        value_b = accessor(metrics_b)
        rows.append(
            MetricComparison(
                section=section,
                label=label,
                value_a=value_a,
                value_b=value_b,
                direction=direction,
                winner=pick_winner(value_a, value_b, direction),
            )
        )
    return ComparisonReport(
        name_a=name_a,
        name_b=name_b,
        metrics_a=metrics_a,
        metrics_b=metrics_b,
        rows=tuple(rows),
    )


def compare_partitions(
    name_a: str,
    partition_a: Partition,
    name_b: str,
    partition_b: Partition,
    graph: DependencyGraph,
    scoring: Optional[ScoringConfig] = None,
) -> ComparisonReport:
    """Evaluate two partitions of ``graph`` and compare them metric by metric."""
    return compare_metrics(
        name_a,
        compute_quality_metrics(partition_a, graph, scoring),
        name_b,
        compute_quality_metrics(partition_b, graph, scoring),
    )
