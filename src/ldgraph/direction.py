"""Direction - Base text direction of literal content.

Provides:
- Direction: the two recognized base directions
- UnrecognizedDirection: raised when a token is not a direction
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Any


class UnrecognizedDirection(ValueError):
    """A token that is neither "ltr" nor "rtl".

    Attributes:
        token: The rejected input, exactly as given.
    """

    def __init__(self, token: Any):
        super().__init__(f"Unrecognized direction: {token!r}")
        self.token = token


@total_ordering
class Direction(Enum):
    """Base direction of text (ordered by declaration)."""

    LTR = "ltr"
    RTL = "rtl"

    @classmethod
    def parse(cls, token: str) -> Direction:
        """Parse a direction token.

        Matching is exact: no case folding or whitespace stripping.

        Args:
            token: "ltr" or "rtl".

        Returns:
            The matching Direction.

        Raises:
            UnrecognizedDirection: If token is anything else.
        """
        if token == "ltr":
            return cls.LTR
        if token == "rtl":
            return cls.RTL
        raise UnrecognizedDirection(token)

    def render(self) -> str:
        """Return the token form of this direction."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        order = Direction._member_names_
        return order.index(self.name) < order.index(other.name)
