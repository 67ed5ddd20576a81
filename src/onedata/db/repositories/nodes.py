"""
onedata.db.repositories.nodes

Repository for `Node` entities.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from onedata.db.models import DeploymentStatus, Node
from onedata.db.records import NodeRecord


class NodeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Node]:
        return list((await self._session.execute(select(Node))).scalars().all())

    async def get(self, node_id: str) -> Node | None:
        return await self._session.get(Node, node_id)

    async def count(self) -> int:
        return int((await self._session.execute(select(func.count(Node.id)))).scalar_one())

    async def add(self, record: NodeRecord) -> Node:
        node = Node(
            id=record.id,
            technical_name=record.technical_name,
            type=record.type,
            description=record.description,
            deployment_status=DeploymentStatus.pending,
        )
        self._session.add(node)
        await self._session.flush()
        return node

    async def set_deployment_status(self, node_id: str, status: DeploymentStatus) -> bool:
        node = await self._session.get(Node, node_id)
        if node is None:
            return False
        node.deployment_status = status
        return True
