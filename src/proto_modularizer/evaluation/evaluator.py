"""PartitionEvaluator: validation, metrics and comparison bound to one graph."""

from __future__ import annotations

from typing import Optional

from ..config import ModularizerConfig
from ..graph.dependency_graph import DependencyGraph
from ..partitioning.models import Partition
from .comparison import compare_partitions
from .metrics import compute_quality_metrics
from .models import ComparisonReport, QualityMetrics, ValidationReport
from .validation import validate_partition


class PartitionEvaluator:
    """Evaluate partitions of a single dependency graph.

    Holds only immutable state, so one instance can be shared across threads
    evaluating different partitions.

    Example:
        >>> evaluator = PartitionEvaluator(graph)
        >>> report = evaluator.validate(partition)
        >>> metrics = evaluator.evaluate(partition)
    """

    def __init__(self, graph: DependencyGraph, config: Optional[ModularizerConfig] = None):
        self.graph = graph
        self.config = config or ModularizerConfig()

    def validate(self, partition: Partition) -> ValidationReport:
        return validate_partition(
            partition,
            self.graph,
            report_unresolved_imports=self.config.report_unresolved_imports,
        )

    def evaluate(self, partition: Partition) -> QualityMetrics:
        return compute_quality_metrics(partition, self.graph, self.config.scoring)

    def compare(
        self, name_a: str, partition_a: Partition, name_b: str, partition_b: Partition
    ) -> ComparisonReport:
        return compare_partitions(
            name_a, partition_a, name_b, partition_b, self.graph, self.config.scoring
        )
