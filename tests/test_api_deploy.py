from __future__ import annotations

import httpx
import pytest


@pytest.mark.asyncio
async def test_deploy_marks_node_deployed(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/deploy", json={"nodeId": "n4"})
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Deployed to Dataform successfully"}

    assert (await client.get("/api/nodes/n4")).json()["deployment_status"] == "DEPLOYED"


@pytest.mark.asyncio
async def test_deploy_is_idempotent(client: httpx.AsyncClient) -> None:
    first = await client.post("/api/deploy", json={"nodeId": "n4"})
    second = await client.post("/api/deploy", json={"nodeId": "n4"})
    assert first.status_code == second.status_code == 200

    nodes = (await client.get("/api/graph")).json()["nodes"]
    deployed = [n["id"] for n in nodes if n["deployment_status"] == "DEPLOYED"]
    assert deployed == ["n4"]


@pytest.mark.asyncio
async def test_deploy_unknown_node_is_404(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/deploy", json={"nodeId": "ghost"})
    assert r.status_code == 404
    assert r.json() == {"error": "Node not found"}


@pytest.mark.asyncio
async def test_deploy_without_node_id_is_400(client: httpx.AsyncClient) -> None:
    r = await client.post("/api/deploy", json={})
    assert r.status_code == 400
