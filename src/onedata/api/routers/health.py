"""
onedata.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with store connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from onedata.api.deps import store_dep
from onedata.db.store import ObjectStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(store: ObjectStore = Depends(store_dep)) -> dict[str, str]:
    # Raises StoreError (-> 500) when the database is unreachable.
    await store.ping()
    return {"status": "ready"}
