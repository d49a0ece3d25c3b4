"""
Graph subsystem for contentgraph.

Defines the registry data model and the store that enforces its
consistency and authorization rules:
- node registration and activation
- dual-view (outgoing/incoming) link storage
- creator-or-owner mutation gating
"""

from contentgraph.graph.graph_schema import Node, Link
from contentgraph.graph.graph_store import GraphStore
from contentgraph.graph.access import can_mutate
from contentgraph.graph.errors import (
    GraphRegistryError,
    InvalidArgumentError,
    InvalidIdError,
    DuplicateIdError,
    NotFoundError,
    UnauthorizedError,
    IndexOutOfRangeError,
)

__all__ = [
    "Node",
    "Link",
    "GraphStore",
    "can_mutate",
    "GraphRegistryError",
    "InvalidArgumentError",
    "InvalidIdError",
    "DuplicateIdError",
    "NotFoundError",
    "UnauthorizedError",
    "IndexOutOfRangeError",
]
