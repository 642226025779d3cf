"""Partition evaluation: validation, quality metrics, comparison."""

from .comparison import compare_metrics, compare_partitions
from .evaluator import PartitionEvaluator
from .metrics import compute_quality_metrics
from .models import (
    ComparisonReport,
    Direction,
    MetricComparison,
    QualityMetrics,
    ScoreBreakdown,
    ValidationReport,
)
from .scoring import compute_quality_score
from .validation import validate_partition

__all__ = [
    "ComparisonReport",
    "Direction",
    "MetricComparison",
    "PartitionEvaluator",
    "QualityMetrics",
    "ScoreBreakdown",
    "ValidationReport",
    "compare_metrics",
    "compare_partitions",
    "compute_quality_metrics",
    "compute_quality_score",
    "validate_partition",
]
