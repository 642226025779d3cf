"""Composite quality score.

Four terms, each on a 0-100 scale:
- Granularity: (1 - gini) * 70, plus 30 when the mean module size is in the
  sweet spot
- Cohesion: (2 - min(namespaces_per_module, 2)) * 50
- Coupling: half for average dependencies, half for max depth, each
  saturating at the configured limit
- Build efficiency: widest build level as a share of all modules

The weighted sum is clamped to [0, 100].
"""

from __future__ import annotations

from ..config import ScoringConfig
from ..math import Statistics
from .models import ScoreBreakdown


def granularity_term(gini: float, average_size: float, scoring: ScoringConfig) -> float:
    balance = (1.0 - gini) * 70.0
    in_sweet_spot = scoring.sweet_spot_min <= average_size <= scoring.sweet_spot_max
    return balance + (30.0 if in_sweet_spot else 0.0)


def cohesion_term(namespaces_per_module: float) -> float:
    return (2.0 - min(namespaces_per_module, 2.0)) * 50.0


def coupling_term(average_dependencies: float, max_depth: int, scoring: ScoringConfig) -> float:
    dependency_part = 1.0 - min(average_dependencies / scoring.dependency_saturation, 1.0)
    depth_part = 1.0 - min(max_depth / scoring.depth_saturation, 1.0)
    return dependency_part * 50.0 + depth_part * 50.0


def build_term(max_parallelism: int, total_modules: int) -> float:
    return max_parallelism / max(total_modules, 1) * 100.0


def compute_quality_score(
    *,
    gini: float,
    average_size: float,
    namespaces_per_module: float,
    average_dependencies: float,
    max_depth: int,
    max_parallelism: int,
    total_modules: int,
    scoring: ScoringConfig,
) -> tuple[float, ScoreBreakdown]:
    """Combine the four axes into one score.

    Returns:
        Tuple of (score clamped to [0, 100], per-term breakdown)
    """
    breakdown = ScoreBreakdown(
        granularity=granularity_term(gini, average_size, scoring),
        cohesion=cohesion_term(namespaces_per_module),
        coupling=coupling_term(average_dependencies, max_depth, scoring),
        build_efficiency=build_term(max_parallelism, total_modules),
    )
    weighted = (
        breakdown.granularity * scoring.granularity_weight
        + breakdown.cohesion * scoring.cohesion_weight
        + breakdown.coupling * scoring.coupling_weight
        + breakdown.build_efficiency * scoring.build_weight
    )
    return Statistics.clamp(weighted, 0.0, 100.0), breakdown
