from typing import List

from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    LinkOut,
    NodeOut,
    RegisterNodeRequest,
    SetActiveRequest,
)
from backend.app.dependencies import get_caller, get_registry
from contentgraph.graph.graph_store import GraphStore

router = APIRouter()


@router.post("", response_model=NodeOut, status_code=201)
def register_node(
    request: RegisterNodeRequest,
    caller: str = Depends(get_caller),
    registry: GraphStore = Depends(get_registry),
):
    registry.register_node(request.id, request.label, request.uri, caller=caller)
    return NodeOut(**registry.get_node(request.id).to_dict())


@router.get("/{node_id}", response_model=NodeOut)
def get_node(node_id: str, registry: GraphStore = Depends(get_registry)):
    return NodeOut(**registry.get_node(node_id).to_dict())


@router.put("/{node_id}/active", response_model=NodeOut)
def set_node_active(
    node_id: str,
    request: SetActiveRequest,
    caller: str = Depends(get_caller),
    registry: GraphStore = Depends(get_registry),
):
    registry.set_node_active(node_id, request.active, caller=caller)
    return NodeOut(**registry.get_node(node_id).to_dict())


@router.get("/{node_id}/outgoing", response_model=List[LinkOut])
def outgoing_links(node_id: str, registry: GraphStore = Depends(get_registry)):
    return [LinkOut(**link.to_dict()) for link in registry.get_outgoing_links(node_id)]


@router.get("/{node_id}/incoming", response_model=List[LinkOut])
def incoming_links(node_id: str, registry: GraphStore = Depends(get_registry)):
    return [LinkOut(**link.to_dict()) for link in registry.get_incoming_links(node_id)]
