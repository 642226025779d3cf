"""Partitioning: namespace grouping, naming policies, build ordering."""

from .build_order import (
    build_levels,
    dependency_depths,
    duplicate_module_names,
    find_module_cycles,
    max_dependency_depth,
    require_build_order,
    topological_sort,
)
from .models import Module, Partition, PartitionStatistics
from .naming import (
    NamingPolicy,
    full_preserving_naming,
    get_naming_policy,
    make_standard_naming,
    standard_naming,
)
from .plan import BuildPlan, PlannedModule, create_build_plan
from .strategies import NamespacePartitioner, PartitionStrategy

__all__ = [
    "BuildPlan",
    "Module",
    "NamespacePartitioner",
    "NamingPolicy",
    "Partition",
    "PartitionStatistics",
    "PartitionStrategy",
    "PlannedModule",
    "build_levels",
    "create_build_plan",
    "dependency_depths",
    "duplicate_module_names",
    "find_module_cycles",
    "full_preserving_naming",
    "get_naming_policy",
    "make_standard_naming",
    "max_dependency_depth",
    "require_build_order",
    "standard_naming",
    "topological_sort",
]
