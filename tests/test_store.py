"""
tests.test_store

ObjectStore behaviour: seeding, referential checks, conversion/deployment writes.
"""

from __future__ import annotations

import pytest

from onedata.db.models import DeploymentStatus, Edge, RoutineStatus
from onedata.db.records import EdgeRecord, NodeRecord, RoutineRecord
from onedata.db.store import ObjectStore
from onedata.errors import InvalidInput, NotFound, StoreError


@pytest.mark.asyncio
async def test_first_open_loads_fixture(store: ObjectStore) -> None:
    nodes = await store.list_nodes()
    edges = await store.list_edges()

    assert len(nodes) == 7
    assert len(edges) == 5
    assert {n.deployment_status for n in nodes} == {DeploymentStatus.pending}
    assert await store.get_routine_by_node("n2") is not None
    assert await store.get_routine_by_node("n5") is not None


@pytest.mark.asyncio
async def test_seeding_is_idempotent(database_url: str) -> None:
    async with ObjectStore(database_url=database_url):
        pass
    async with ObjectStore(database_url=database_url) as reopened:
        assert await reopened.seed_if_empty() is False
        assert len(await reopened.list_nodes()) == 7
        assert len(await reopened.list_edges()) == 5


@pytest.mark.asyncio
async def test_open_without_seed_leaves_store_empty(database_url: str) -> None:
    async with ObjectStore(database_url=database_url, seed=False) as empty:
        assert await empty.list_nodes() == []


@pytest.mark.asyncio
async def test_orphan_rows_block_seeding_without_failing_open(database_url: str) -> None:
    async with ObjectStore(database_url=database_url, seed=False) as bare:
        async with bare.session() as session:
            # Written around the checked path to mimic a partially cleaned file.
            session.add(Edge(id="e1", source_id="n2", target_id="n1", type="TRANSFORMATION"))
            await session.commit()

    async with ObjectStore(database_url=database_url) as reopened:
        assert await reopened.list_nodes() == []
        assert [e.id for e in await reopened.list_edges()] == ["e1"]


@pytest.mark.asyncio
async def test_every_edge_endpoint_resolves(store: ObjectStore) -> None:
    for edge in await store.list_edges():
        assert await store.get_node(edge.source_id) is not None
        assert await store.get_node(edge.target_id) is not None


@pytest.mark.asyncio
async def test_get_node_missing_returns_none(store: ObjectStore) -> None:
    assert await store.get_node("does-not-exist") is None
    assert await store.get_routine_by_node("does-not-exist") is None


@pytest.mark.asyncio
async def test_upsert_conversion_updates_owned_routine(store: ObjectStore) -> None:
    assert await store.upsert_routine_conversion("n2", "SELECT 1", RoutineStatus.converted)

    routine = await store.get_routine_by_node("n2")
    assert routine is not None
    assert routine.converted_sql == "SELECT 1"
    assert routine.status == RoutineStatus.converted


@pytest.mark.asyncio
async def test_upsert_conversion_without_routine_is_noop(store: ObjectStore) -> None:
    # n1 has no routine: nothing is created and nothing fails.
    assert await store.upsert_routine_conversion("n1", "SELECT 1", RoutineStatus.converted) is False
    assert await store.get_routine_by_node("n1") is None


@pytest.mark.asyncio
async def test_set_deployment_status(store: ObjectStore) -> None:
    assert await store.set_deployment_status("n3", DeploymentStatus.deployed)
    node = await store.get_node("n3")
    assert node is not None
    assert node.deployment_status == DeploymentStatus.deployed

    assert await store.set_deployment_status("missing", DeploymentStatus.deployed) is False


@pytest.mark.asyncio
async def test_add_edge_rejects_dangling_endpoint(store: ObjectStore) -> None:
    with pytest.raises(NotFound):
        await store.add_edge(EdgeRecord("e99", "n1", "ghost", "DTP"))
    assert all(e.id != "e99" for e in await store.list_edges())


@pytest.mark.asyncio
async def test_add_routine_rejects_unknown_node(store: ObjectStore) -> None:
    with pytest.raises(NotFound):
        await store.add_routine(RoutineRecord("r99", "ghost", "ENDLOOP."))


@pytest.mark.asyncio
async def test_add_node_rejects_duplicate_id(store: ObjectStore) -> None:
    with pytest.raises(InvalidInput):
        await store.add_node(NodeRecord("n1", "DUP", "CUBE"))


@pytest.mark.asyncio
async def test_add_node_accepts_unknown_type(store: ObjectStore) -> None:
    node = await store.add_node(NodeRecord("n8", "ZIOBJ_MAT", "IOBJ", "Material"))
    assert node.type == "IOBJ"
    assert (await store.get_node("n8")) is not None


@pytest.mark.asyncio
async def test_import_graph_is_all_or_nothing(store: ObjectStore) -> None:
    with pytest.raises(NotFound):
        await store.import_graph(
            nodes=[NodeRecord("n10", "ZFI_O10", "ADSO")],
            edges=[EdgeRecord("e10", "n10", "n404", "TRANSFORMATION")],
        )
    assert await store.get_node("n10") is None


@pytest.mark.asyncio
async def test_import_graph_resolves_references_within_batch(store: ObjectStore) -> None:
    counts = await store.import_graph(
        nodes=[NodeRecord("n10", "ZFI_O10", "ADSO"), NodeRecord("n11", "ZFI_C10", "CUBE")],
        edges=[EdgeRecord("e10", "n10", "n11", "TRANSFORMATION")],
        routines=[RoutineRecord("r10", "n10", "ENDLOOP.", "END")],
    )
    assert counts == {"nodes": 2, "edges": 1, "routines": 1}
    routine = await store.get_routine_by_node("n10")
    assert routine is not None
    assert routine.status == RoutineStatus.pending
    assert routine.converted_sql is None


@pytest.mark.asyncio
async def test_closed_store_raises_store_error(database_url: str) -> None:
    s = ObjectStore(database_url=database_url)
    with pytest.raises(StoreError):
        await s.list_nodes()
