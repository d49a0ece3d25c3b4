from __future__ import annotations

from contentgraph.graph.errors import UnauthorizedError
from contentgraph.graph.graph_schema import Node


def can_mutate(node: Node, caller: str, system_owner: str) -> bool:
    """
    Creator-or-owner rule shared by every node and link mutation.
    """
    return caller == system_owner or caller == node.creator


def require_mutator(
    node: Node,
    caller: str,
    system_owner: str,
    *,
    action: str,
) -> None:
    if not can_mutate(node, caller, system_owner):
        raise UnauthorizedError(caller, f"{action} on node {node.id!r}")


def require_owner(caller: str, system_owner: str, *, action: str) -> None:
    if caller != system_owner:
        raise UnauthorizedError(caller, action)
