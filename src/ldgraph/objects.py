"""Objects - Non-node objects that can appear as property values.

An object in an expanded document is one of:
- Value: a literal with optional datatype, language and direction
- ListObject: an ordered list of objects
- Node: see ldgraph.graph.node

All three are hashable with structural equality, so they can be stored
together in the value sets of a node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Union

from ldgraph.direction import Direction
from ldgraph.keys import AnyKey

if TYPE_CHECKING:
    from ldgraph.graph.node import Node

Literal = Union[str, int, float, bool, None]


@dataclass(frozen=True, eq=False)
class Value:
    """A literal value.

    Attributes:
        value: The literal itself.
        type: Datatype key, if any.
        language: Language tag for string literals.
        direction: Base direction for string literals.
        index: Index annotation, if any.
    """

    value: Literal
    type: AnyKey | None = None
    language: str | None = None
    direction: Direction | None = None
    index: str | None = None

    def _identity(self) -> tuple[Any, ...]:
        # True == 1 in Python but not in a document
        return (
            type(self.value).__name__,
            self.value,
            self.type,
            self.language,
            self.direction,
            self.index,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def as_str(self) -> str | None:
        """Return the literal if it is a string."""
        if isinstance(self.value, str):
            return self.value
        return None


@dataclass(frozen=True)
class ListObject:
    """An ordered list of objects; order takes part in equality."""

    items: tuple[Object, ...] = field(default_factory=tuple)
    index: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, items: Iterable[Object], index: str | None = None) -> ListObject:
        """Build a list object from any iterable."""
        return cls(tuple(items), index)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


Object = Union[Value, "Node", ListObject]
