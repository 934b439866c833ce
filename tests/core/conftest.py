"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def alice():
    """Person node with a name and two types."""
    from tests.core.graph_test_helpers import make_node, text

    return make_node(
        "http://example.org/alice",
        types=["Person", "Agent"],
        properties=[("name", text("Alice")), ("name", text("Alicia"))],
    )


@pytest.fixture
def empty_node():
    """Fresh Node instance."""
    from ldgraph.graph import Node

    return Node()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any LDGRAPH_* variables from the environment."""
    import os

    for name in list(os.environ):
        if name.startswith("LDGRAPH_"):
            monkeypatch.delenv(name)
    return monkeypatch
