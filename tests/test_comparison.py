"""Tests for partition comparison and the PartitionEvaluator facade."""

import pytest

from proto_modularizer.config import ModularizerConfig
from proto_modularizer.evaluation import (
    Direction,
    PartitionEvaluator,
    compare_partitions,
)
from proto_modularizer.evaluation.comparison import pick_winner
from proto_modularizer.graph import DependencyGraph
from proto_modularizer.partitioning import NamespacePartitioner, Partition, full_preserving_naming
from proto_modularizer.scanning import FileRecord

LABELS = [
    "Total Modules",
    "Avg Module Size",
    "Gini Coefficient",
    "Namespaces per Module",
    "Avg Dependencies",
    "Max Dependency Depth",
    "Max Parallelism",
    "Critical Path",
    "Quality Score",
]


class TestPickWinner:
    def test_lower_is_better(self):
        assert pick_winner(0.1, 0.3, Direction.LOWER) == "a"
        assert pick_winner(0.3, 0.1, Direction.LOWER) == "b"

    def test_higher_is_better(self):
        assert pick_winner(80, 60, Direction.HIGHER) == "a"
        assert pick_winner(60, 80, Direction.HIGHER) == "b"

    def test_tie(self):
        assert pick_winner(2, 2, Direction.HIGHER) is None

    def test_neutral(self):
        assert pick_winner(1, 9, Direction.NEUTRAL) is None


class TestComparePartitions:
    def test_rows(self, square_graph, square_partition):
        full = NamespacePartitioner(full_preserving_naming).group(square_graph)
        report = compare_partitions("standard", square_partition, "full", full, square_graph)
        assert [row.label for row in report.rows] == LABELS
        directions = {row.label: row.direction for row in report.rows}
        assert directions["Gini Coefficient"] is Direction.LOWER
        assert directions["Max Parallelism"] is Direction.HIGHER
        assert directions["Total Modules"] is Direction.NEUTRAL

    def test_naming_policies_tie_on_fixture(self, square_graph, square_partition):
        full = NamespacePartitioner(full_preserving_naming).group(square_graph)
        report = compare_partitions("standard", square_partition, "full", full, square_graph)
        assert all(row.winner is None for row in report.rows)
        assert report.metrics_a.quality_score == pytest.approx(report.metrics_b.quality_score)

    def test_winner_by_direction(self, make_module):
        graph = DependencyGraph(
            [FileRecord(f"{i}.proto", "p") for i in range(6)]
        )
        paths = [f"{i}.proto" for i in range(6)]
        balanced = Partition(
            (make_module("x", paths[:3]), make_module("y", paths[3:])), "balanced"
        )
        lopsided = Partition(
            (make_module("x", paths[:5]), make_module("y", paths[5:], {"x"})), "lopsided"
        )
        report = compare_partitions("balanced", balanced, "lopsided", lopsided, graph)
        rows = {row.label: row for row in report.rows}

        assert rows["Gini Coefficient"].winner == "a"
        assert rows["Max Dependency Depth"].winner == "a"
        assert rows["Max Parallelism"].winner == "a"
        assert rows["Critical Path"].winner == "a"
        assert rows["Quality Score"].winner == "a"
        assert rows["Avg Dependencies"].winner is None
        assert report.winner_name(rows["Quality Score"]) == "balanced"
        assert report.winner_name(rows["Total Modules"]) is None

    def test_to_dict(self, square_graph, square_partition):
        report = compare_partitions(
            "one", square_partition, "two", square_partition, square_graph
        )
        data = report.to_dict()
        assert data["a"] == "one"
        assert data["b"] == "two"
        assert data["rows"][0]["metric"] == "Total Modules"
        assert data["rows"][0]["values"] == {"a": 7, "b": 7}
        assert data["rows"][2]["better"] == "lower"
        assert data["rows"][0]["winner"] is None

    def test_to_dict_names_do_not_clash_with_columns(self, square_graph, square_partition):
        report = compare_partitions(
            "winner", square_partition, "metric", square_partition, square_graph
        )
        row = report.to_dict()["rows"][0]
        assert row["metric"] == "Total Modules"
        assert row["winner"] is None
        assert row["values"] == {"a": 7, "b": 7}


class TestPartitionEvaluator:
    def test_validate_uses_config_toggle(self, layered_graph):
        partition = NamespacePartitioner().group(layered_graph)
        loud = PartitionEvaluator(layered_graph)
        silent = PartitionEvaluator(
            layered_graph, ModularizerConfig(report_unresolved_imports=False)
        )
        assert loud.validate(partition).has_warnings
        assert not silent.validate(partition).has_warnings

    def test_evaluate(self, square_graph, square_partition):
        metrics = PartitionEvaluator(square_graph).evaluate(square_partition)
        assert metrics.total_modules == 7
        assert 0.0 <= metrics.quality_score <= 100.0

    def test_compare(self, square_graph, square_partition):
        full = NamespacePartitioner(full_preserving_naming).group(square_graph)
        report = PartitionEvaluator(square_graph).compare(
            "standard", square_partition, "full", full
        )
        assert report.name_a == "standard"
        assert report.name_b == "full"
        assert len(report.rows) == len(LABELS)
