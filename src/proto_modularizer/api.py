"""Public API for proto-modularizer.

Example:
    >>> from proto_modularizer import modularize
    >>>
    >>> result = modularize("protos/")
    >>> result.report.is_valid
    True
    >>> result.build_order[0]
    'square-common'
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import ModularizerConfig, load_config
from .evaluation import PartitionEvaluator, QualityMetrics, ValidationReport
from .graph import DependencyGraph
from .logging_config import get_logger
from .partitioning import NamespacePartitioner, Partition, get_naming_policy, topological_sort
from .scanning import ProtoScanner

logger = get_logger(__name__)


@dataclass(frozen=True)
class ModularizationResult:
    """Everything one partitioning run produces."""

    graph: DependencyGraph
    partition: Partition
    report: ValidationReport
    metrics: QualityMetrics
    build_order: Optional[list[str]]


def load_graph(path: Union[str, Path], config: ModularizerConfig) -> DependencyGraph:
    """Scan a directory of .proto files into a dependency graph.

    Raises:
        InvalidPathError: If path is not a directory
        DuplicatePathError: If two records share a path
    """
    records = ProtoScanner(Path(path), config).scan()
    return DependencyGraph(records, builtin_prefixes=config.builtin_prefixes)


def partition_graph(
    graph: DependencyGraph, config: ModularizerConfig, naming: Optional[str] = None
) -> Partition:
    """Group a graph by namespace using the configured (or given) naming policy."""
    policy = get_naming_policy(naming or config.naming_policy, config)
    return NamespacePartitioner(naming=policy).group(graph)


def modularize(
    path: Union[str, Path] = ".",
    config: Optional[ModularizerConfig] = None,
    naming: Optional[str] = None,
) -> ModularizationResult:
    """Scan, partition, validate and evaluate a proto tree.

    Args:
        path: Root directory of the .proto files
        config: Configuration (defaults to load_config())
        naming: Naming policy name overriding config.naming_policy

    Returns:
        ModularizationResult; build_order is None if modules form a cycle
    """
    config = config or load_config()
    graph = load_graph(path, config)
    partition = partition_graph(graph, config, naming)

    evaluator = PartitionEvaluator(graph, config)
    report = evaluator.validate(partition)
    metrics = evaluator.evaluate(partition)
    build_order = topological_sort(partition.modules)

    logger.debug(
        f"Modularized {len(graph)} files into {len(partition.modules)} modules "
        f"(valid={report.is_valid})"
    )
    return ModularizationResult(
        graph=graph,
        partition=partition,
        report=report,
        metrics=metrics,
        build_order=build_order,
    )
