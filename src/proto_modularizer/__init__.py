"""
proto-modularizer - Namespace-based modularization of Protocol Buffer schemas

Builds a file-level import graph over a tree of .proto files, groups the
files into modules by declared package, derives inter-module dependencies,
validates the result and scores its structural quality. The partition and
its build order are the input a build-file generator works from.
"""

__version__ = "0.3.0"

from .api import ModularizationResult, load_graph, modularize, partition_graph
from .evaluation import PartitionEvaluator, QualityMetrics, ValidationReport
from .graph import DependencyGraph
from .partitioning import Module, NamespacePartitioner, Partition, topological_sort
from .scanning import FileRecord

__all__ = [
    "modularize",  # Main entry point
    "load_graph",
    "partition_graph",
    "ModularizationResult",
    "DependencyGraph",
    "FileRecord",
    "Module",
    "NamespacePartitioner",
    "Partition",
    "PartitionEvaluator",
    "QualityMetrics",
    "ValidationReport",
    "topological_sort",
]
