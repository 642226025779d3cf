"""Shared test fixtures for proto-modularizer tests."""

from pathlib import Path

import pytest

from proto_modularizer.graph import DependencyGraph, GraphNode
from proto_modularizer.partitioning import Module, NamespacePartitioner
from proto_modularizer.scanning import FileRecord, ProtoScanner

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def square_root() -> Path:
    """23 proto files across 7 com.square.* namespaces."""
    return FIXTURES / "square_protos"


@pytest.fixture
def square_graph(square_root):
    return DependencyGraph(ProtoScanner(square_root).scan())


@pytest.fixture
def square_partition(square_graph):
    return NamespacePartitioner().group(square_graph)


@pytest.fixture
def layered_records():
    """Three namespaces: api -> service -> model, plus an unresolved import."""
    return [
        FileRecord("model/user.proto", "com.acme.model", (), message_count=2, enum_count=1),
        FileRecord("model/order.proto", "com.acme.model", ("model/user.proto",), 1, 0),
        FileRecord(
            "service/users.proto",
            "com.acme.service",
            ("model/user.proto", "google/protobuf/empty.proto"),
            message_count=3,
        ),
        FileRecord(
            "api/gateway.proto",
            "com.acme.api",
            ("service/users.proto", "model/order.proto", "vendor/missing.proto"),
            message_count=1,
        ),
    ]


@pytest.fixture
def layered_graph(layered_records):
    return DependencyGraph(layered_records)


@pytest.fixture
def cyclic_records():
    """a -> b -> c -> a, plus d -> a."""
    return [
        FileRecord("a.proto", "pkg.one", ("b.proto",)),
        FileRecord("b.proto", "pkg.one", ("c.proto",)),
        FileRecord("c.proto", "pkg.two", ("a.proto",)),
        FileRecord("d.proto", "pkg.two", ("a.proto",)),
    ]


@pytest.fixture
def make_module():
    """Build a Module from plain paths and dependency names."""

    def _make(name, paths=(), dependencies=(), namespace=None):
        files = tuple(GraphNode(FileRecord(p, namespace or name)) for p in paths)
        return Module(name=name, files=files, dependencies=frozenset(dependencies))

    return _make
