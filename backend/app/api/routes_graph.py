from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from backend.app.api.schemas import (
    EventOut,
    EventPage,
    GraphStatsResponse,
    OwnerResponse,
    TransferOwnershipRequest,
)
from backend.app.dependencies import (
    get_caller,
    get_config,
    get_event_bus,
    get_registry,
)
from contentgraph.events.event_bus import EventBus
from contentgraph.graph.graph_store import GraphStore

router = APIRouter()


@router.get("/graph/stats", response_model=GraphStatsResponse)
def graph_stats(registry: GraphStore = Depends(get_registry)):
    return GraphStatsResponse(**registry.stats(), metadata=registry.metadata)


@router.get("/users/{user}/nodes", response_model=List[str])
def nodes_of(user: str, registry: GraphStore = Depends(get_registry)):
    return registry.get_nodes_of(user)


@router.get("/owner", response_model=OwnerResponse)
def current_owner(registry: GraphStore = Depends(get_registry)):
    return OwnerResponse(owner=registry.owner)


@router.post("/owner/transfer", response_model=OwnerResponse)
def transfer_ownership(
    request: TransferOwnershipRequest,
    caller: str = Depends(get_caller),
    registry: GraphStore = Depends(get_registry),
):
    registry.transfer_ownership(request.new_owner, caller=caller)
    return OwnerResponse(owner=registry.owner)


@router.get("/events", response_model=EventPage)
def events(
    since: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    name: Optional[str] = None,
    bus: EventBus = Depends(get_event_bus),
):
    if limit is None:
        limit = get_config().events_page_limit
    page = bus.filter(name=name, since=since)[:limit]
    next_sequence = page[-1].sequence + 1 if page else max(since, len(bus))

    return EventPage(
        events=[
            EventOut(
                sequence=recorded.sequence,
                event=recorded.name,
                payload=recorded.event.to_dict(),
            )
            for recorded in page
        ],
        next_sequence=next_sequence,
    )
