"""Evaluation result models: validation reports, quality metrics, comparisons."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Literal, Optional


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of checking a partition against the graph it was built from.

    Errors make the partition unusable for build generation; warnings are
    observations the caller may ignore.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-axis terms of the composite score, each on a 0-100 scale."""

    granularity: float
    cohesion: float
    coupling: float
    build_efficiency: float


@dataclass(frozen=True)
class QualityMetrics:
    """Structural quality snapshot of one partition."""

    # Granularity
    total_modules: int
    total_files: int
    min_module_size: int
    max_module_size: int
    average_module_size: float
    median_module_size: float
    stddev_module_size: float
    gini_coefficient: float  # 0 = balanced, towards 1 = one module holds everything

    # Cohesion
    namespaces_per_module: float  # 1.0 = every module is namespace-pure
    cross_namespace_edges_within_modules: int

    # Coupling
    total_module_dependencies: int
    average_dependencies_per_module: float
    max_dependencies_per_module: int
    max_dependency_depth: int  # longest chain, in edges
    average_fan_in: float
    max_fan_in: int

    # Build efficiency
    root_modules: int
    leaf_modules: int
    max_parallelism: int  # widest build level
    critical_path_length: int  # longest chain, in modules
    build_levels: int

    quality_score: float
    score_breakdown: ScoreBreakdown

    fan_in: dict[str, int] = field(default_factory=dict)
    levels: tuple[tuple[str, ...], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["levels"] = [list(level) for level in self.levels]
        return data


class Direction(Enum):
    """Which way a metric improves."""

    LOWER = "lower"
    HIGHER = "higher"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class MetricComparison:
    """One row of a side-by-side comparison."""

    section: str
    label: str
    value_a: float
    value_b: float
    direction: Direction
    winner: Optional[Literal["a", "b"]] = None


@dataclass(frozen=True)
class ComparisonReport:
    """Side-by-side metrics for two partitions of the same graph."""

    name_a: str
    name_b: str
    metrics_a: QualityMetrics
    metrics_b: QualityMetrics
    rows: tuple[MetricComparison, ...]

    def winner_name(self, row: MetricComparison) -> Optional[str]:
        if row.winner == "a":
            return self.name_a
        if row.winner == "b":
            return self.name_b
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "a": self.name_a,
            "b": self.name_b,
            "rows": [
                {
                    "section": row.section,
                    "metric": row.label,
                    "values": {"a": row.value_a, "b": row.value_b},
                    "better": row.direction.value,
                    "winner": self.winner_name(row),
                }
                for row in self.rows
            ],
        }
