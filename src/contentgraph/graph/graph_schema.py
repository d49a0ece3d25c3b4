from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict
from uuid import uuid4


@dataclass(frozen=True)
class Node:
    """
    Registered vertex of the content graph.

    Identity fields never change after registration; toggling
    activity produces a new record with the same identity.
    """

    id: str
    creator: str
    label: str
    uri: str
    created_at: int
    is_active: bool = True

    @staticmethod
    def create(
        id: str,
        creator: str,
        label: str,
        uri: str,
        created_at: int,
    ) -> "Node":
        return Node(
            id=id,
            creator=creator,
            label=label,
            uri=uri,
            created_at=created_at,
            is_active=True,
        )

    @property
    def is_registered(self) -> bool:
        return bool(self.creator)

    def with_active(self, active: bool) -> "Node":
        return replace(self, is_active=active)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "creator": self.creator,
            "label": self.label,
            "uri": self.uri,
            "created_at": self.created_at,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class Link:
    """
    Directed, labeled edge between two registered nodes.

    The same record backs both the outgoing view of `from_id`
    and the incoming view of `to_id`.
    """

    id: str

    from_id: str
    to_id: str
    relation: str

    created_at: int
    is_active: bool = True

    @staticmethod
    def create(
        from_id: str,
        to_id: str,
        relation: str,
        created_at: int,
    ) -> "Link":
        return Link(
            id=str(uuid4()),
            from_id=from_id,
            to_id=to_id,
            relation=relation,
            created_at=created_at,
            is_active=True,
        )

    def with_active(self, active: bool) -> "Link":
        return replace(self, is_active=active)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "from_id": self.from_id,
            "to_id": self.to_id,
            "relation": self.relation,
            "created_at": self.created_at,
            "is_active": self.is_active,
        }
