from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

import networkx as nx

from contentgraph.config.settings import RegistryConfig
from contentgraph.events.event_bus import EventBus
from contentgraph.events.notifications import (
    LinkCreated,
    LinkStatusUpdated,
    NodeRegistered,
    NodeStatusUpdated,
    OwnershipTransferred,
)
from contentgraph.graph.access import require_mutator, require_owner
from contentgraph.graph.errors import (
    DuplicateIdError,
    GraphRegistryError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidIdError,
    NotFoundError,
)
from contentgraph.graph.graph_schema import Link, Node
from contentgraph.utils.helpers import safe_max, safe_mean
from contentgraph.utils.ids import is_zero_identifier

F = TypeVar("F", bound=Callable[..., Any])


def _logged(operation: str, *, exclusive: bool) -> Callable[[F], F]:
    """
    Logs rejected calls; `exclusive` calls also run under the write lock.
    """

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(self: "GraphStore", *args: Any, **kwargs: Any) -> Any:
            try:
                if exclusive:
                    with self._lock:
                        return fn(self, *args, **kwargs)
                return fn(self, *args, **kwargs)
            except GraphRegistryError as exc:
                logging.getLogger("contentgraph.registry").warning(
                    "%s rejected: %s: %s",
                    operation,
                    type(exc).__name__,
                    exc,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def _mutation(operation: str) -> Callable[[F], F]:
    return _logged(operation, exclusive=True)


def _query(operation: str) -> Callable[[F], F]:
    return _logged(operation, exclusive=False)


class GraphStore:
    """
    Authoritative content graph registry.

    Nodes and links live in a networkx MultiDiGraph: one vertex per
    node id, one keyed edge per link id. Ordered link-id lists give
    the outgoing and incoming views in creation order; both views
    resolve to the same edge record, so they cannot disagree on
    `is_active`.

    Mutations are serialized by one store-wide lock. Each one checks
    all preconditions before writing anything, so a raised error
    leaves the store untouched and emits nothing.

    Reads never take the lock. Records are frozen and replaced with a
    single assignment, and every index only grows, with a record
    stored before its id is published into a list. A reader therefore
    sees either the state before a write or the state after it.
    """

    def __init__(
        self,
        config: RegistryConfig,
        *,
        events: Optional[EventBus] = None,
    ) -> None:
        self.config = config
        self.events = events if events is not None else EventBus()

        if self._is_zero(config.initial_owner):
            raise InvalidArgumentError("initial owner must be a non-empty identity")

        self._graph = nx.MultiDiGraph()
        self._outgoing: Dict[str, List[str]] = {}
        self._incoming: Dict[str, List[str]] = {}
        self._authored: Dict[str, List[str]] = {}
        self._link_endpoints: Dict[str, Tuple[str, str]] = {}
        self._owner = config.initial_owner
        self._lock = threading.RLock()
        self.metadata: Dict[str, Any] = {}

    # -------------------- Ownership --------------------

    @property
    def owner(self) -> str:
        return self._owner

    @_mutation("transfer_ownership")
    def transfer_ownership(self, new_owner: str, caller: str) -> None:
        require_owner(caller, self._owner, action="transfer ownership")
        if self._is_zero(new_owner):
            raise InvalidArgumentError("new owner must be a non-empty identity")

        previous = self._owner
        self._owner = new_owner

        logging.getLogger("contentgraph.registry").info(
            "ownership transferred %s -> %s", previous, new_owner
        )
        self.events.emit(
            OwnershipTransferred(previous_owner=previous, new_owner=new_owner)
        )

    # -------------------- Nodes --------------------

    @_mutation("register_node")
    def register_node(self, id: str, label: str, uri: str, caller: str) -> None:
        if self._is_zero(id):
            raise InvalidIdError(id)
        if self._is_zero(caller):
            raise InvalidArgumentError("caller must be a non-empty identity")
        if self._lookup(id) is not None:
            raise DuplicateIdError(id)

        now = self._now()
        node = Node.create(id=id, creator=caller, label=label, uri=uri, created_at=now)

        # Adjacency lists exist before the node becomes visible.
        self._outgoing[id] = []
        self._incoming[id] = []
        self._graph.add_node(id, data=node)
        self._authored.setdefault(caller, []).append(id)

        logging.getLogger("contentgraph.registry").info(
            "node registered id=%s creator=%s", id, caller
        )
        self.events.emit(
            NodeRegistered(id=id, creator=caller, label=label, uri=uri, timestamp=now)
        )

    @_mutation("set_node_active")
    def set_node_active(self, id: str, active: bool, caller: str) -> None:
        node = self._require(id)
        require_mutator(node, caller, self._owner, action="set node status")

        now = self._now()
        self._graph.nodes[id]["data"] = node.with_active(active)

        logging.getLogger("contentgraph.registry").info(
            "node status id=%s active=%s by=%s", id, active, caller
        )
        self.events.emit(NodeStatusUpdated(id=id, is_active=active, timestamp=now))

    @_query("get_node")
    def get_node(self, id: str) -> Node:
        return self._require(id)

    def has_node(self, id: str) -> bool:
        return self._lookup(id) is not None

    @_query("get_nodes_of")
    def get_nodes_of(self, user: str) -> List[str]:
        return list(self._authored.get(user, ()))

    # -------------------- Links --------------------

    @_mutation("create_link")
    def create_link(self, from_id: str, to_id: str, relation: str, caller: str) -> str:
        source = self._require(from_id, side="from")
        self._require(to_id, side="to")
        require_mutator(source, caller, self._owner, action="create link")

        link = Link.create(
            from_id=from_id,
            to_id=to_id,
            relation=relation,
            created_at=self._now(),
        )

        # Record first, then publish its id into both views.
        self._graph.add_edge(from_id, to_id, key=link.id, data=link)
        self._link_endpoints[link.id] = (from_id, to_id)
        self._outgoing[from_id].append(link.id)
        self._incoming[to_id].append(link.id)

        logging.getLogger("contentgraph.registry").info(
            "link created %s -[%s]-> %s by=%s", from_id, relation, to_id, caller
        )
        self.events.emit(
            LinkCreated(
                from_id=from_id,
                to_id=to_id,
                relation=relation,
                timestamp=link.created_at,
            )
        )
        return link.id

    @_mutation("set_link_active")
    def set_link_active(self, from_id: str, index: int, active: bool, caller: str) -> None:
        source = self._require(from_id)
        outgoing = self._outgoing[from_id]
        if isinstance(index, bool) or not 0 <= index < len(outgoing):
            raise IndexOutOfRangeError(from_id, index, len(outgoing))
        require_mutator(source, caller, self._owner, action="set link status")

        link_id = outgoing[index]
        link = self._edge(link_id)
        now = self._now()

        # Both views hold the link id, so this single write updates them together.
        self._graph.edges[link.from_id, link.to_id, link_id]["data"] = link.with_active(active)

        logging.getLogger("contentgraph.registry").info(
            "link status %s[%d] -> %s active=%s by=%s",
            from_id,
            index,
            link.to_id,
            active,
            caller,
        )
        self.events.emit(
            LinkStatusUpdated(
                from_id=from_id,
                to_id=link.to_id,
                relation=link.relation,
                is_active=active,
                timestamp=now,
            )
        )

    @_query("get_outgoing_links")
    def get_outgoing_links(self, id: str) -> List[Link]:
        self._require(id)
        return [self._edge(link_id) for link_id in list(self._outgoing[id])]

    @_query("get_incoming_links")
    def get_incoming_links(self, id: str) -> List[Link]:
        self._require(id)
        return [self._edge(link_id) for link_id in list(self._incoming[id])]

    @_query("get_link")
    def get_link(self, link_id: str) -> Link:
        if link_id not in self._link_endpoints:
            raise NotFoundError(link_id, kind="link")
        return self._edge(link_id)

    # -------------------- Adjacency --------------------

    @_query("neighbors")
    def neighbors(self, id: str) -> List[str]:
        self._require(id)
        links = [self._edge(link_id) for link_id in list(self._outgoing[id])]
        return list(dict.fromkeys(link.to_id for link in links))

    @_query("predecessors")
    def predecessors(self, id: str) -> List[str]:
        self._require(id)
        links = [self._edge(link_id) for link_id in list(self._incoming[id])]
        return list(dict.fromkeys(link.from_id for link in links))

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return len(self._graph)

    def link_count(self) -> int:
        return len(self._link_endpoints)

    def stats(self) -> Dict[str, Any]:
        nodes = [n for n in map(self._lookup, list(self._outgoing)) if n is not None]
        links = [self._edge(link_id) for link_id in list(self._link_endpoints)]
        out_degrees = [len(self._outgoing[n.id]) for n in nodes]

        return {
            "nodes": len(nodes),
            "active_nodes": sum(1 for n in nodes if n.is_active),
            "links": len(links),
            "active_links": sum(1 for link in links if link.is_active),
            "creators": len(self._authored),
            "mean_out_degree": safe_mean(out_degrees),
            "max_out_degree": int(safe_max(out_degrees)),
            "owner": self._owner,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_zero(self, value: Optional[str]) -> bool:
        identity = self.config.identity
        return is_zero_identifier(
            value,
            sentinels=identity.zero_sentinels,
            hex_prefix=identity.hex_prefix,
        )

    def _now(self) -> int:
        return int(self.config.clock())

    def _lookup(self, id: str) -> Optional[Node]:
        attrs = self._graph.nodes.get(id)
        # networkx inserts the attribute dict before filling it
        node: Optional[Node] = attrs.get("data") if attrs is not None else None
        # Existence is decided by the creator field.
        return node if node is not None and node.is_registered else None

    def _require(self, id: str, *, side: Optional[str] = None) -> Node:
        node = self._lookup(id)
        if node is None:
            raise NotFoundError(id, side=side)  # type: ignore[arg-type]
        return node

    def _edge(self, link_id: str) -> Link:
        from_id, to_id = self._link_endpoints[link_id]
        return self._graph.edges[from_id, to_id, link_id]["data"]
