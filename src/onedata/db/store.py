"""
onedata.db.store

ObjectStore: the explicitly constructed persistence handle for the graph.

Responsibilities:
- Own the async engine/sessionmaker with an open/close lifecycle.
- Create tables and load the demonstration fixture on first open.
- Run each operation in its own session and commit immediately.
- Check referential existence on every insert (the engine does not).
- Translate SQLAlchemy failures into `StoreError`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from types import TracebackType

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from onedata.db.models import AbapRoutine, DeploymentStatus, Edge, Node, RoutineStatus
from onedata.db.records import EdgeRecord, NodeRecord, RoutineRecord
from onedata.db.repositories.edges import EdgeRepo
from onedata.db.repositories.nodes import NodeRepo
from onedata.db.repositories.routines import RoutineRepo
from onedata.db.seed import SEED_EDGES, SEED_NODES, SEED_ROUTINES
from onedata.db.session import create_engine, create_sessionmaker, create_tables
from onedata.errors import InvalidInput, NotFound, StoreError
from onedata.observability.logging import get_logger
from onedata.settings import Settings

log = get_logger(__name__)


class ObjectStore:
    def __init__(self, *, database_url: str, seed: bool = True) -> None:
        self._database_url = database_url
        self._seed = seed
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ObjectStore:
        return cls(database_url=settings.database_url, seed=settings.seed_on_startup)

    # -- lifecycle -----------------------------------------------------------

    async def open(self) -> None:
        if self._engine is not None:
            return
        engine = create_engine(self._database_url)
        try:
            await create_tables(engine)
        except SQLAlchemyError as exc:
            await engine.dispose()
            raise StoreError("Failed to initialise the object store") from exc
        self._engine = engine
        self._sessionmaker = create_sessionmaker(engine)
        if self._seed:
            await self.seed_if_empty()

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    async def __aenter__(self) -> ObjectStore:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Session scope for one store operation.
        Uncommitted work is rolled back when the scope exits with an error.
        """

        if self._sessionmaker is None:
            raise StoreError("Object store is not open")
        async with self._sessionmaker() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                await session.rollback()
                log.error("store_error", error=str(exc))
                raise StoreError("Object store operation failed") from exc
            except BaseException:
                await session.rollback()
                raise

    async def ping(self) -> None:
        async with self.session() as session:
            await session.execute(text("SELECT 1"))

    # -- reads ---------------------------------------------------------------

    async def list_nodes(self) -> list[Node]:
        async with self.session() as session:
            return await NodeRepo(session).list_all()

    async def list_edges(self) -> list[Edge]:
        async with self.session() as session:
            return await EdgeRepo(session).list_all()

    async def get_node(self, node_id: str) -> Node | None:
        async with self.session() as session:
            return await NodeRepo(session).get(node_id)

    async def get_routine_by_node(self, node_id: str) -> AbapRoutine | None:
        async with self.session() as session:
            return await RoutineRepo(session).get_by_node(node_id)

    # -- updates -------------------------------------------------------------

    async def upsert_routine_conversion(
        self, node_id: str, sql: str, status: RoutineStatus
    ) -> bool:
        # Never creates a routine; returns False when the node owns none.
        async with self.session() as session:
            updated = await RoutineRepo(session).set_conversion(
                node_id=node_id, sql=sql, status=status
            )
            if updated:
                await session.commit()
            return updated

    async def set_deployment_status(self, node_id: str, status: DeploymentStatus) -> bool:
        async with self.session() as session:
            updated = await NodeRepo(session).set_deployment_status(node_id, status)
            if updated:
                await session.commit()
            return updated

    # -- checked inserts -----------------------------------------------------

    async def add_node(self, record: NodeRecord) -> Node:
        async with self.session() as session:
            node = await _insert_node(session, record)
            await session.commit()
            return node

    async def add_edge(self, record: EdgeRecord) -> Edge:
        async with self.session() as session:
            edge = await _insert_edge(session, record)
            await session.commit()
            return edge

    async def add_routine(self, record: RoutineRecord) -> AbapRoutine:
        async with self.session() as session:
            routine = await _insert_routine(session, record)
            await session.commit()
            return routine

    async def import_graph(
        self,
        *,
        nodes: Iterable[NodeRecord] = (),
        edges: Iterable[EdgeRecord] = (),
        routines: Iterable[RoutineRecord] = (),
    ) -> dict[str, int]:
        """
        Insert a batch in dependency order inside one transaction.
        Any failed check discards the whole batch.
        """

        counts = {"nodes": 0, "edges": 0, "routines": 0}
        async with self.session() as session:
            for node in nodes:
                await _insert_node(session, node)
                counts["nodes"] += 1
            for edge in edges:
                await _insert_edge(session, edge)
                counts["edges"] += 1
            for routine in routines:
                await _insert_routine(session, routine)
                counts["routines"] += 1
            await session.commit()
        return counts

    async def seed_if_empty(self) -> bool:
        # Any leftover row (even edges/routines without nodes) means the file is not fresh.
        async with self.session() as session:
            existing = {
                "nodes": await NodeRepo(session).count(),
                "edges": await EdgeRepo(session).count(),
                "routines": await RoutineRepo(session).count(),
            }
        if any(existing.values()):
            if not existing["nodes"]:
                log.warning("seeding_skipped", reason="orphan rows present", **existing)
            return False
        log.info("seeding_store", nodes=len(SEED_NODES), edges=len(SEED_EDGES))
        await self.import_graph(nodes=SEED_NODES, edges=SEED_EDGES, routines=SEED_ROUTINES)
        return True


async def _insert_node(session: AsyncSession, record: NodeRecord) -> Node:
    repo = NodeRepo(session)
    if await repo.get(record.id) is not None:
        raise InvalidInput(f"Node {record.id} already exists")
    return await repo.add(record)


async def _insert_edge(session: AsyncSession, record: EdgeRecord) -> Edge:
    repo = EdgeRepo(session)
    if await repo.get(record.id) is not None:
        raise InvalidInput(f"Edge {record.id} already exists")
    await _require_node(session, record.source_id)
    await _require_node(session, record.target_id)
    return await repo.add(record)


async def _insert_routine(session: AsyncSession, record: RoutineRecord) -> AbapRoutine:
    repo = RoutineRepo(session)
    if await repo.get(record.id) is not None:
        raise InvalidInput(f"Routine {record.id} already exists")
    await _require_node(session, record.node_id)
    return await repo.add(record)


async def _require_node(session: AsyncSession, node_id: str) -> None:
    if await NodeRepo(session).get(node_id) is None:
        raise NotFound(f"Node {node_id} not found")


# --- Module Notes -----------------------------------------------------------
# Concurrent conversions of the same node are last-writer-wins; no row locks are taken.
