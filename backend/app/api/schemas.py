from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field


class RegisterNodeRequest(BaseModel):
    id: str
    label: str = ""
    uri: str = ""


class SetActiveRequest(BaseModel):
    active: bool


class CreateLinkRequest(BaseModel):
    from_id: str
    to_id: str
    relation: str


class CreateLinkResponse(BaseModel):
    id: str
    from_id: str
    to_id: str
    relation: str


class TransferOwnershipRequest(BaseModel):
    new_owner: str


class NodeOut(BaseModel):
    id: str
    creator: str
    label: str
    uri: str
    created_at: int
    is_active: bool


class LinkOut(BaseModel):
    id: str
    from_id: str
    to_id: str
    relation: str
    created_at: int
    is_active: bool


class OwnerResponse(BaseModel):
    owner: str


class GraphStatsResponse(BaseModel):
    nodes: int
    active_nodes: int
    links: int
    active_links: int
    creators: int
    mean_out_degree: float
    max_out_degree: int
    owner: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EventOut(BaseModel):
    sequence: int
    event: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str
    detail: str
    side: Optional[str] = None


class EventPage(BaseModel):
    events: List[EventOut]
    next_sequence: int
