from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    CreateLinkRequest,
    CreateLinkResponse,
    LinkOut,
    SetActiveRequest,
)
from backend.app.dependencies import get_caller, get_registry
from contentgraph.graph.graph_store import GraphStore

router = APIRouter()


@router.post("", response_model=CreateLinkResponse, status_code=201)
def create_link(
    request: CreateLinkRequest,
    caller: str = Depends(get_caller),
    registry: GraphStore = Depends(get_registry),
):
    link_id = registry.create_link(
        request.from_id,
        request.to_id,
        request.relation,
        caller=caller,
    )
    return CreateLinkResponse(
        id=link_id,
        from_id=request.from_id,
        to_id=request.to_id,
        relation=request.relation,
    )


@router.put("/{from_id}/{index}/active", response_model=LinkOut)
def set_link_active(
    from_id: str,
    index: int,
    request: SetActiveRequest,
    caller: str = Depends(get_caller),
    registry: GraphStore = Depends(get_registry),
):
    registry.set_link_active(from_id, index, request.active, caller=caller)
    return LinkOut(**registry.get_outgoing_links(from_id)[index].to_dict())
