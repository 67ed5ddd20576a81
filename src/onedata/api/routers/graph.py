"""
onedata.api.routers.graph

Graph read endpoints used by the dashboard.

Responsibilities:
- Return the full node/edge snapshot.
- Return one node joined with its routine (or null).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from onedata.api.deps import graph_service
from onedata.api.schemas import EdgeOut, GraphOut, NodeDetailOut, NodeOut, RoutineOut
from onedata.errors import StoreError
from onedata.services.graph_service import GraphQueryService

router = APIRouter(prefix="/api", tags=["graph"])


@router.get("/graph", response_model=GraphOut)
async def get_graph(svc: GraphQueryService = Depends(graph_service)) -> GraphOut:
    try:
        snapshot = await svc.get_graph()
    except StoreError as exc:
        raise StoreError("Failed to fetch graph data") from exc
    return GraphOut(
        nodes=[NodeOut.model_validate(n) for n in snapshot.nodes],
        edges=[EdgeOut.model_validate(e) for e in snapshot.edges],
    )


@router.get("/nodes/{node_id}", response_model=NodeDetailOut)
async def get_node(
    node_id: str,
    svc: GraphQueryService = Depends(graph_service),
) -> NodeDetailOut:
    try:
        detail = await svc.get_node_detail(node_id)
    except StoreError as exc:
        raise StoreError("Failed to fetch node details") from exc
    return NodeDetailOut(
        **NodeOut.model_validate(detail.node).model_dump(),
        routine=RoutineOut.model_validate(detail.routine) if detail.routine else None,
    )
