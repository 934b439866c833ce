"""Graph module - Node objects of expanded documents.

Exports:
- Node: A node object with order-independent equality and hashing
- ReverseTarget: Which map reverse insertion writes to
"""

from ldgraph.graph.node import Node, ReverseTarget

__all__ = [
    "Node",
    "ReverseTarget",
]
