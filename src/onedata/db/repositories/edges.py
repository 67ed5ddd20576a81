from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from onedata.db.models import Edge
from onedata.db.records import EdgeRecord


class EdgeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Edge]:
        return list((await self._session.execute(select(Edge))).scalars().all())

    async def get(self, edge_id: str) -> Edge | None:
        return await self._session.get(Edge, edge_id)

    async def count(self) -> int:
        return int((await self._session.execute(select(func.count(Edge.id)))).scalar_one())

    async def add(self, record: EdgeRecord) -> Edge:
        edge = Edge(
            id=record.id,
            source_id=record.source_id,
            target_id=record.target_id,
            type=record.type,
        )
        self._session.add(edge)
        await self._session.flush()
        return edge
