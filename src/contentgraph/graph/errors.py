from __future__ import annotations

from typing import Literal, Optional


class GraphRegistryError(Exception):
    """
    Base class for every error raised by the registry.

    A raised error means the call had no effect.
    """


class InvalidArgumentError(GraphRegistryError, ValueError):
    """Zero/empty identifier or identity where a real one is required."""


class InvalidIdError(InvalidArgumentError):
    """Node id is the zero/empty sentinel."""

    def __init__(self, node_id: Optional[str]) -> None:
        super().__init__(f"invalid node id: {node_id!r}")
        self.node_id = node_id


class DuplicateIdError(GraphRegistryError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"node already registered: {node_id!r}")
        self.node_id = node_id


class NotFoundError(GraphRegistryError, KeyError):
    """
    Referenced node (or link) does not exist.

    `side` names the missing endpoint of a link operation
    ("from" or "to"); it is None for single-node lookups.
    """

    def __init__(
        self,
        node_id: str,
        *,
        side: Optional[Literal["from", "to"]] = None,
        kind: str = "node",
    ) -> None:
        if side is not None:
            message = f"{side} {kind} not found: {node_id!r}"
        else:
            message = f"{kind} not found: {node_id!r}"
        super().__init__(message)
        self.node_id = node_id
        self.side = side
        self.kind = kind

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnauthorizedError(GraphRegistryError, PermissionError):
    def __init__(self, caller: str, action: str) -> None:
        super().__init__(f"{caller!r} may not {action}")
        self.caller = caller
        self.action = action


class IndexOutOfRangeError(GraphRegistryError, IndexError):
    def __init__(self, node_id: str, index: int, size: int) -> None:
        super().__init__(
            f"link index {index} out of range for {node_id!r} ({size} outgoing links)"
        )
        self.node_id = node_id
        self.index = index
        self.size = size
