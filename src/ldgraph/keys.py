"""Keys - Opaque identity and property keys.

Nodes never inspect keys beyond hashing, comparing and asking for an
absolute identifier. Any hashable value satisfying the Key protocol can be
used; the concrete keys here cover the common cases:
- Reference: a resolved identifier
- BlankId: a blank node identifier ("_:b0")
- Invalid: text that could not be resolved to an identifier
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Hashable, Protocol, Union, runtime_checkable

# RFC 3986 scheme followed by ":"
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

BLANK_PREFIX = "_:"


def is_absolute(text: str) -> bool:
    """Check whether text is in absolute identifier form (has a scheme)."""
    return not text.startswith(BLANK_PREFIX) and _SCHEME_RE.match(text) is not None


@runtime_checkable
class Key(Protocol):
    """Capability required of identity and property keys."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...

    def iri(self) -> str | None:
        """Absolute identifier for this key, if it has one."""
        ...

    def as_str(self) -> str: ...


@dataclass(frozen=True)
class Reference:
    """A resolved identifier (usually an IRI)."""

    value: str

    def iri(self) -> str | None:
        if is_absolute(self.value):
            return self.value
        return None

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BlankId:
    """Blank node identifier, stored without its "_:" prefix."""

    name: str

    @classmethod
    def parse(cls, text: str) -> BlankId:
        """Parse the prefixed form "_:name".

        Raises:
            ValueError: If text is not a blank node identifier.
        """
        if not text.startswith(BLANK_PREFIX) or len(text) == len(BLANK_PREFIX):
            raise ValueError(f"Not a blank node identifier: {text!r}")
        return cls(text[len(BLANK_PREFIX) :])

    def iri(self) -> str | None:
        return None

    def as_str(self) -> str:
        return f"{BLANK_PREFIX}{self.name}"

    def __str__(self) -> str:
        return self.as_str()


@dataclass(frozen=True)
class Invalid:
    """Key text that did not resolve to an identifier."""

    text: str

    def iri(self) -> str | None:
        return None

    def as_str(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


# Properties are keys; plain strings are accepted as keys too.
Property = Union[Key, str]
AnyKey = Union[Key, str, Hashable]


def key_iri(key: AnyKey | None) -> str | None:
    """Return the absolute identifier of any accepted key form.

    Args:
        key: A Key, a plain string, or None.

    Returns:
        The absolute identifier, or None when the key has none.
    """
    if key is None:
        return None
    if isinstance(key, str):
        return key if is_absolute(key) else None
    iri = getattr(key, "iri", None)
    if callable(iri):
        return iri()
    return None
