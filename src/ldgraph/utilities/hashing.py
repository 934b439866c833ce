"""Hashing - Order-independent hashes for sets and maps of sets.

Python's iteration order over a set depends on insertion history, so two
equal sets can enumerate differently. The helpers here hash through
frozenset, whose hash shuffles each member hash before combining them
order-independently.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Optional

# Hashed in place of a missing optional set, so that None and an empty set
# hash differently.
_ABSENT = ("ldgraph.absent",)


def hash_set(items: Iterable[Hashable]) -> int:
    """Hash a set of hashable items by membership only."""
    return hash(frozenset(items))


def hash_set_opt(items: Optional[Iterable[Hashable]]) -> int:
    """Hash an optional set; None hashes to a fixed marker."""
    if items is None:
        return hash(_ABSENT)
    return hash_set(items)


def hash_map_of_sets(mapping: Mapping[Hashable, Iterable[Hashable]]) -> int:
    """Hash a mapping of key -> set of values, ignoring entry order.

    Each entry becomes the pair (key, hash_set(values)); the pairs are
    hashed as a frozenset, so a value moved from one key to another
    changes the hash.

    Args:
        mapping: Mapping whose values are sets of hashable items.

    Returns:
        Hash depending only on the set of (key, value set) pairs.
    """
    return hash(frozenset((key, hash_set(values)) for key, values in mapping.items()))
