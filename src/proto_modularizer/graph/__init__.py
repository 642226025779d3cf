"""Schema dependency graph: construction, traversal, cycle detection."""

from .dependency_graph import DependencyGraph
from .models import GraphNode, GraphStatistics

__all__ = ["DependencyGraph", "GraphNode", "GraphStatistics"]
