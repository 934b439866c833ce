"""
ldgraph - Node objects for expanded linked-data documents

ldgraph models the node objects of an expanded JSON-LD style document:
identity, types, forward and reverse properties, embedded graphs and
included sets. Nodes compare and hash structurally, independent of the
order their values were inserted in, so they can be deduplicated inside
sets.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ldgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__author__ = "Anspar"
__license__ = "MIT"

from ldgraph.direction import Direction, UnrecognizedDirection
from ldgraph.graph import Node, ReverseTarget
from ldgraph.keys import BlankId, Invalid, Key, Reference
from ldgraph.objects import ListObject, Object, Value

__all__ = [
    "__version__",
    "BlankId",
    "Direction",
    "Invalid",
    "Key",
    "ListObject",
    "Node",
    "Object",
    "Reference",
    "ReverseTarget",
    "UnrecognizedDirection",
    "Value",
]
