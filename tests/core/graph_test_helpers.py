"""Test helpers for node testing.

Factories that build nodes from plain data, so tests can build the same
node through different insertion histories.
"""

from __future__ import annotations

from typing import Iterable

from ldgraph.graph import Node
from ldgraph.keys import Reference
from ldgraph.objects import Value

SCHEMA = "http://schema.org/"


def iri(name: str) -> Reference:
    """schema.org reference for a short name."""
    return Reference(f"{SCHEMA}{name}")


def text(value: str, language: str | None = None) -> Value:
    """String literal value."""
    return Value(value, language=language)


def make_node(
    node_id: str | None = None,
    types: Iterable[str] = (),
    properties: Iterable[tuple[str, object]] = (),
    reverse: Iterable[tuple[str, object]] = (),
) -> Node:
    """Build a node by inserting properties in the given order.

    Args:
        node_id: Absolute id (or None for an anonymous node).
        types: Short type names, expanded with iri().
        properties: (short property name, value) pairs.
        reverse: (short property name, value) pairs for reverse properties.
    """
    node = Node(id=Reference(node_id) if node_id is not None else None)
    for type_name in types:
        node.add_type(iri(type_name))
    for prop, value in properties:
        node.insert(iri(prop), value)
    for prop, value in reverse:
        node.insert_reverse(iri(prop), value)
    return node


def values_string(node: Node, prop: str) -> str:
    """Sorted, comma separated literals of a property's values."""
    return ", ".join(sorted(str(v.value) for v in node.get(iri(prop))))
