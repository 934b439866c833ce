"""Node - A node object of an expanded linked-data graph.

This module provides:
- ReverseTarget: Which property map reverse insertion writes to
- Node: Identity, types, forward/reverse properties, embedded graph and
  included set of a node, with order-independent equality and hashing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from ldgraph.direction import Direction
from ldgraph.keys import AnyKey, Property, key_iri
from ldgraph.utilities.hashing import hash_map_of_sets, hash_set_opt

if TYPE_CHECKING:
    from ldgraph.config import ConfigLoader
    from ldgraph.objects import Object

logger = logging.getLogger(__name__)


class ReverseTarget(Enum):
    """Property map written by insert_reverse() and insert_all_reverse().

    - REVERSE: the node's reverse properties (default)
    - FORWARD: the forward properties, as older producers did
    """

    REVERSE = "reverse"
    FORWARD = "forward"


def _insert_values(
    target: dict[Any, set[Any]], prop: Property, values: Iterable[Object]
) -> None:
    """Add values to target[prop], creating the entry only if values is non-empty."""
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        return
    node_values = target.get(prop)
    if node_values is None:
        node_values = {first}
        node_values.update(it)
        target[prop] = node_values
    else:
        node_values.add(first)
        node_values.update(it)


@dataclass(eq=False)
class Node:
    """A node object.

    Nodes are built empty and filled in with the insertion methods. Two
    nodes are equal when all their fields are equal, with every set-valued
    field compared by membership only; `types` is the one ordered
    collection. The hash follows the same rule, so equal nodes hash equal
    whatever order their values were inserted in.

    A node placed in a set (another node's values, graph or included set)
    must not be mutated afterwards.

    Attributes:
        id: Identity of the node, None for anonymous nodes.
        language: Language tag for the node's literal content.
        direction: Base direction override.
        expanded_property: Set when the node stands in for a reverse
            expanded property.
        reverse_target: Map used by reverse insertion. Not part of the
            node's value.
    """

    id: AnyKey | None = None
    language: str | None = None
    direction: Direction | None = None
    expanded_property: AnyKey | None = None
    reverse_target: ReverseTarget = field(default=ReverseTarget.REVERSE, repr=False)

    # Internal storage (prefixed)
    _types: list[AnyKey] = field(default_factory=list)
    _graph: set[Object] | None = None
    _included: set[Object] | None = None
    _properties: dict[Property, set[Object]] = field(default_factory=dict)
    _reverse_properties: dict[Property, set[Object]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: ConfigLoader) -> Node:
        """Create an empty node using configured construction options."""
        return cls(reverse_target=config.reverse_target())

    # Types
    @property
    def types(self) -> tuple[AnyKey, ...]:
        """Declared types in insertion order."""
        return tuple(self._types)

    def add_type(self, type_key: AnyKey) -> None:
        """Append a type reference (order is kept)."""
        self._types.append(type_key)

    # Embedded graph and included set
    @property
    def graph(self) -> frozenset[Object] | None:
        """Embedded graph, or None if this node is not a graph."""
        if self._graph is None:
            return None
        return frozenset(self._graph)

    @property
    def included(self) -> frozenset[Object] | None:
        """Included node set, or None if absent."""
        if self._included is None:
            return None
        return frozenset(self._included)

    def set_graph(self, objects: Iterable[Object]) -> None:
        """Replace the embedded graph (an empty graph is still present)."""
        self._graph = set(objects)

    def insert_graph(self, obj: Object) -> None:
        """Add an object to the embedded graph, creating it if absent."""
        if self._graph is None:
            self._graph = set()
        self._graph.add(obj)

    def set_included(self, objects: Iterable[Object]) -> None:
        """Replace the included set (an empty set is still present)."""
        self._included = set(objects)

    def insert_included(self, obj: Object) -> None:
        """Add an object to the included set, creating it if absent."""
        if self._included is None:
            self._included = set()
        self._included.add(obj)

    # Predicates and projections
    def is_empty(self) -> bool:
        """Test if the node is empty.

        It is empty if every field except for `id` is empty.
        """
        return (
            not self._types
            and self._graph is None
            and self._included is None
            and self.language is None
            and self.direction is None
            and self.expanded_property is None
            and not self._properties
            and not self._reverse_properties
        )

    def into_unnamed_graph(self) -> set[Object] | None:
        """Take the embedded graph out of a pure graph wrapper.

        A pure graph wrapper has no id, no types and a graph, and nothing
        else. On success the graph is handed over to the caller and the
        node no longer holds it.

        Returns:
            The embedded graph, or None (node untouched) if this node is
            not a pure graph wrapper.
        """
        if (
            self.id is None
            and not self._types
            and self._graph is not None
            and self._included is None
            and self.language is None
            and self.direction is None
            and self.expanded_property is None
            and not self._properties
            and not self._reverse_properties
        ):
            graph, self._graph = self._graph, None
            return graph
        logger.debug("Node %r is not an unnamed graph", self.id)
        return None

    def as_iri(self) -> str | None:
        """Absolute identifier of the node, if its id has one."""
        return key_iri(self.id)

    def as_identity_string(self) -> str | None:
        """String form of the node's absolute identifier, if any."""
        iri = self.as_iri()
        if iri is None:
            return None
        return str(iri)

    # Forward properties
    def get(self, prop: Property) -> Iterator[Object]:
        """Iterate over the values of a property.

        Order is unspecified. Yields nothing if the property is absent.
        """
        values = self._properties.get(prop)
        if values is not None:
            yield from values

    def has_property(self, prop: Property) -> bool:
        """Check if the node has at least one value for prop."""
        return prop in self._properties

    def property_count(self) -> int:
        """Return number of distinct forward properties."""
        return len(self._properties)

    def iter_properties(self) -> Iterator[tuple[Property, frozenset[Object]]]:
        """Iterate over (property, values) pairs."""
        for prop, values in self._properties.items():
            yield prop, frozenset(values)

    def insert(self, prop: Property, value: Object) -> None:
        """Add a value to a property; re-adding a present value is a no-op."""
        node_values = self._properties.get(prop)
        if node_values is None:
            self._properties[prop] = {value}
        else:
            node_values.add(value)

    def insert_all(self, prop: Property, values: Iterable[Object]) -> None:
        """Add several values to a property.

        Nothing happens when values is empty; in particular no entry is
        created for prop.
        """
        _insert_values(self._properties, prop, values)

    # Reverse properties
    def _reverse_map(self) -> dict[Property, set[Object]]:
        if self.reverse_target is ReverseTarget.FORWARD:
            return self._properties
        return self._reverse_properties

    def get_reverse(self, prop: Property) -> Iterator[Object]:
        """Iterate over the values of a reverse property."""
        values = self._reverse_properties.get(prop)
        if values is not None:
            yield from values

    def has_reverse_property(self, prop: Property) -> bool:
        """Check if the node has at least one value for reverse prop."""
        return prop in self._reverse_properties

    def iter_reverse_properties(self) -> Iterator[tuple[Property, frozenset[Object]]]:
        """Iterate over (reverse property, values) pairs."""
        for prop, values in self._reverse_properties.items():
            yield prop, frozenset(values)

    def insert_reverse(self, reverse_prop: Property, reverse_value: Object) -> None:
        """Add a value to a reverse property (see ReverseTarget)."""
        _insert_values(self._reverse_map(), reverse_prop, (reverse_value,))

    def insert_all_reverse(
        self, reverse_prop: Property, reverse_values: Iterable[Object]
    ) -> None:
        """Add several values to a reverse property; no-op when empty."""
        _insert_values(self._reverse_map(), reverse_prop, reverse_values)

    # Value semantics
    def __eq__(self, other: object) -> bool:
        """Structural equality; sets compare by membership."""
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.id == other.id
            and self._types == other._types
            and self._graph == other._graph
            and self._included == other._included
            and self.language == other.language
            and self.direction == other.direction
            and self.expanded_property == other.expanded_property
            and self._properties == other._properties
            and self._reverse_properties == other._reverse_properties
        )

    def __hash__(self) -> int:
        """Hash independent of the insertion order of set members."""
        return hash(
            (
                self.id,
                tuple(self._types),
                hash_set_opt(self._graph),
                hash_set_opt(self._included),
                self.language,
                self.direction,
                self.expanded_property,
                hash_map_of_sets(self._properties),
                hash_map_of_sets(self._reverse_properties),
            )
        )
