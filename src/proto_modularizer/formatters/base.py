"""Base formatter interface for proto-modularizer report rendering."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..evaluation.models import ComparisonReport, QualityMetrics, ValidationReport
from ..graph.dependency_graph import DependencyGraph
from ..partitioning.models import Partition


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    ``render_*`` methods write to stdout; ``format_*`` methods return the
    rendered text.
    """

    @abstractmethod
    def format_graph(self, graph: DependencyGraph) -> str:
        """Graph statistics, cycles and cross-namespace edges."""

    @abstractmethod
    def format_partition(self, partition: Partition, build_order: Optional[List[str]]) -> str:
        """Modules of a partition and the order to build them in."""

    @abstractmethod
    def format_evaluation(self, report: ValidationReport, metrics: QualityMetrics) -> str:
        """Validation outcome and quality metrics of one partition."""

    @abstractmethod
    def format_comparison(self, report: ComparisonReport) -> str:
        """Side-by-side metrics of two partitions."""

    def render_graph(self, graph: DependencyGraph) -> None:
        print(self.format_graph(graph))

    def render_partition(self, partition: Partition, build_order: Optional[List[str]]) -> None:
        print(self.format_partition(partition, build_order))

    def render_evaluation(self, report: ValidationReport, metrics: QualityMetrics) -> None:
        print(self.format_evaluation(report, metrics))

    def render_comparison(self, report: ComparisonReport) -> None:
        print(self.format_comparison(report))
