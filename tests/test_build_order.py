"""Tests for build ordering over module dependencies."""

import pytest

from proto_modularizer.exceptions import BuildOrderError, InvalidPartitionError
from proto_modularizer.partitioning import (
    build_levels,
    dependency_depths,
    duplicate_module_names,
    find_module_cycles,
    max_dependency_depth,
    require_build_order,
    topological_sort,
)


@pytest.fixture
def diamond(make_module):
    """A depends on B and C; B and C each depend on D."""
    return [
        make_module("A", dependencies={"B", "C"}),
        make_module("B", dependencies={"D"}),
        make_module("C", dependencies={"D"}),
        make_module("D"),
    ]


@pytest.fixture
def two_cycle(make_module):
    return [make_module("A", dependencies={"B"}), make_module("B", dependencies={"A"})]


class TestTopologicalSort:
    def test_diamond(self, diamond):
        order = topological_sort(diamond)
        assert order == ["D", "B", "C", "A"]
        assert order.index("D") < order.index("B")
        assert order.index("D") < order.index("C")
        assert order[-1] == "A"

    def test_two_node_cycle_returns_none(self, two_cycle):
        assert topological_sort(two_cycle) is None

    def test_partial_cycle_returns_none(self, make_module):
        modules = [
            make_module("root"),
            make_module("x", dependencies={"root", "y"}),
            make_module("y", dependencies={"x"}),
        ]
        assert topological_sort(modules) is None

    def test_unknown_dependencies_ignored(self, make_module):
        modules = [make_module("a", dependencies={"ghost"}), make_module("b", dependencies={"a"})]
        assert topological_sort(modules) == ["a", "b"]

    def test_initial_wave_in_input_order(self, make_module):
        modules = [make_module("z"), make_module("a"), make_module("m")]
        assert topological_sort(modules) == ["z", "a", "m"]

    def test_empty(self):
        assert topological_sort([]) == []

    def test_duplicate_names_return_none(self, make_module):
        modules = [make_module("x", ["a.proto"]), make_module("x", ["b.proto"])]
        assert topological_sort(modules) is None

    def test_every_module_after_its_dependencies(self, square_partition):
        order = topological_sort(square_partition.modules)
        position = {name: i for i, name in enumerate(order)}
        for module in square_partition.modules:
            for dep in module.dependencies:
                assert position[dep] < position[module.name]


class TestRequireBuildOrder:
    def test_returns_order(self, diamond):
        assert require_build_order(diamond) == ["D", "B", "C", "A"]

    def test_raises_on_cycle(self, two_cycle):
        with pytest.raises(BuildOrderError) as exc_info:
            require_build_order(two_cycle)
        assert exc_info.value.cycles == [["A", "B"]]

    def test_raises_on_duplicate_names(self, make_module):
        modules = [make_module("x", ["a.proto"]), make_module("x", ["b.proto"])]
        with pytest.raises(InvalidPartitionError) as exc_info:
            require_build_order(modules)
        assert exc_info.value.errors == ["Module name 'x' is used by 2 modules"]


class TestDuplicateModuleNames:
    def test_none(self, diamond):
        assert duplicate_module_names(diamond) == {}

    def test_counts(self, make_module):
        modules = [make_module("b"), make_module("a"), make_module("b"), make_module("b")]
        assert duplicate_module_names(modules) == {"b": 3}


class TestBuildLevels:
    def test_diamond(self, diamond):
        assert build_levels(diamond) == [["D"], ["B", "C"], ["A"]]

    def test_levels_sorted(self, make_module):
        modules = [make_module("z"), make_module("b"), make_module("a", dependencies={"z"})]
        assert build_levels(modules) == [["b", "z"], ["a"]]

    def test_cycle_stops_without_progress(self, make_module):
        modules = [
            make_module("root"),
            make_module("x", dependencies={"root", "y"}),
            make_module("y", dependencies={"x"}),
        ]
        assert build_levels(modules) == [["root"]]

    def test_empty(self):
        assert build_levels([]) == []


class TestDependencyDepth:
    def test_diamond(self, diamond):
        assert dependency_depths(diamond) == {"A": 2, "B": 1, "C": 1, "D": 0}
        assert max_dependency_depth(diamond) == 2

    def test_unknown_dependency_counts_as_zero(self, make_module):
        modules = [make_module("a", dependencies={"ghost"})]
        assert dependency_depths(modules) == {"a": 1}

    def test_cycle_terminates(self, two_cycle):
        depths = dependency_depths(two_cycle)
        assert set(depths) == {"A", "B"}
        assert max(depths.values()) <= 2

    def test_long_chain(self, make_module):
        n = 3000
        modules = [
            make_module(f"m{i}", dependencies={f"m{i + 1}"} if i + 1 < n else set())
            for i in range(n)
        ]
        assert max_dependency_depth(modules) == n - 1

    def test_empty(self):
        assert max_dependency_depth([]) == 0


class TestFindModuleCycles:
    def test_acyclic(self, diamond):
        assert find_module_cycles(diamond) == []

    def test_two_cycle(self, two_cycle):
        assert find_module_cycles(two_cycle) == [["A", "B"]]
