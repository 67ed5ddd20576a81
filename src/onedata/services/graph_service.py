"""
onedata.services.graph_service

Read-only projections of the object graph for the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass

from onedata.db.models import AbapRoutine, Edge, Node
from onedata.db.store import ObjectStore
from onedata.errors import NotFound


@dataclass(frozen=True, slots=True)
class GraphSnapshot:
    nodes: list[Node]
    edges: list[Edge]


@dataclass(frozen=True, slots=True)
class NodeDetail:
    node: Node
    routine: AbapRoutine | None


class GraphQueryService:
    def __init__(self, *, store: ObjectStore) -> None:
        self._store = store

    async def get_graph(self) -> GraphSnapshot:
        nodes = await self._store.list_nodes()
        edges = await self._store.list_edges()
        return GraphSnapshot(nodes=nodes, edges=edges)

    async def get_node_detail(self, node_id: str) -> NodeDetail:
        node = await self._store.get_node(node_id)
        if node is None:
            raise NotFound("Node not found")
        routine = await self._store.get_routine_by_node(node_id)
        return NodeDetail(node=node, routine=routine)
