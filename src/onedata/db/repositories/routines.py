"""
onedata.db.repositories.routines

Repository for `AbapRoutine` entities.

Responsibilities:
- Look up the routine owned by a node.
- Record conversion results (converted SQL + status) on an existing routine.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from onedata.db.models import AbapRoutine, RoutineStatus
from onedata.db.records import RoutineRecord


class RoutineRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, routine_id: str) -> AbapRoutine | None:
        return await self._session.get(AbapRoutine, routine_id)

    async def count(self) -> int:
        return int((await self._session.execute(select(func.count(AbapRoutine.id)))).scalar_one())

    async def get_by_node(self, node_id: str) -> AbapRoutine | None:
        # One routine per node is the convention but not a constraint; pick the first by id.
        stmt = (
            select(AbapRoutine)
            .where(AbapRoutine.node_id == node_id)
            .order_by(AbapRoutine.id)
            .limit(1)
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def add(self, record: RoutineRecord) -> AbapRoutine:
        routine = AbapRoutine(
            id=record.id,
            node_id=record.node_id,
            routine_type=record.routine_type,
            abap_code=record.abap_code,
            converted_sql=None,
            status=RoutineStatus.pending,
        )
        self._session.add(routine)
        await self._session.flush()
        return routine

    async def set_conversion(self, *, node_id: str, sql: str, status: RoutineStatus) -> bool:
        routine = await self.get_by_node(node_id)
        if routine is None:
            return False
        routine.converted_sql = sql
        routine.status = status
        return True
