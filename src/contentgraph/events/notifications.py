from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class Notification:
    """
    Base for registry notifications.

    Emitted synchronously, and only after a mutation committed.
    """

    name: ClassVar[str] = "Notification"

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.name, **asdict(self)}


@dataclass(frozen=True)
class NodeRegistered(Notification):
    name: ClassVar[str] = "NodeRegistered"

    id: str
    creator: str
    label: str
    uri: str
    timestamp: int


@dataclass(frozen=True)
class NodeStatusUpdated(Notification):
    name: ClassVar[str] = "NodeStatusUpdated"

    id: str
    is_active: bool
    timestamp: int


@dataclass(frozen=True)
class LinkCreated(Notification):
    name: ClassVar[str] = "LinkCreated"

    from_id: str
    to_id: str
    relation: str
    timestamp: int


@dataclass(frozen=True)
class LinkStatusUpdated(Notification):
    name: ClassVar[str] = "LinkStatusUpdated"

    from_id: str
    to_id: str
    relation: str
    is_active: bool
    timestamp: int


@dataclass(frozen=True)
class OwnershipTransferred(Notification):
    name: ClassVar[str] = "OwnershipTransferred"

    previous_owner: str
    new_owner: str
