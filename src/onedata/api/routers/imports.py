"""
onedata.api.routers.imports

Bulk graph import.

Responsibilities:
- Accept nodes, edges and routines in one request.
- Delegate to `ObjectStore.import_graph` (all-or-nothing, referentially checked).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from onedata.api.deps import store_dep
from onedata.api.schemas import GraphImportRequest, GraphImportResponse
from onedata.db.store import ObjectStore
from onedata.observability.logging import get_logger

router = APIRouter(prefix="/api", tags=["import"])

log = get_logger(__name__)


@router.post("/import", response_model=GraphImportResponse, status_code=HTTP_201_CREATED)
async def import_graph(
    body: GraphImportRequest,
    store: ObjectStore = Depends(store_dep),
) -> GraphImportResponse:
    counts = await store.import_graph(
        nodes=[n.to_record() for n in body.nodes],
        edges=[e.to_record() for e in body.edges],
        routines=[r.to_record() for r in body.routines],
    )
    log.info("graph_imported", **counts)
    return GraphImportResponse(**counts)
