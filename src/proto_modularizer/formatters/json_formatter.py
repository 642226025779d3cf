"""JSON formatter for proto-modularizer."""

import json
from typing import Any, List, Optional

from ..evaluation.models import ComparisonReport, QualityMetrics, ValidationReport
from ..graph.dependency_graph import DependencyGraph
from ..partitioning.models import Partition
from ..partitioning.plan import BuildPlan
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    @staticmethod
    def _dump(data: Any) -> str:
        return json.dumps(data, indent=2)

    def format_graph(self, graph: DependencyGraph) -> str:
        return self._dump(
            {
                "statistics": graph.statistics().to_dict(),
                "cycles": graph.detect_cycles(),
                "cross_namespace_edges": [list(edge) for edge in graph.cross_namespace_edges()],
                "unresolved_imports": {
                    path: list(imports) for path, imports in graph.unresolved_imports.items()
                },
            }
        )

    def format_partition(self, partition: Partition, build_order: Optional[List[str]]) -> str:
        data = partition.to_dict()
        data["statistics"] = partition.statistics().to_dict()
        data["build_order"] = build_order
        return self._dump(data)

    def format_evaluation(self, report: ValidationReport, metrics: QualityMetrics) -> str:
        return self._dump({"validation": report.to_dict(), "metrics": metrics.to_dict()})

    def format_comparison(self, report: ComparisonReport) -> str:
        return self._dump(report.to_dict())

    def format_plan(self, plan: BuildPlan) -> str:
        return self._dump(plan.to_dict())
