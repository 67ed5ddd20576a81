"""
onedata.services.deployment_service

Deployment status updater. Flips the node label only; nothing is pushed anywhere.
"""

from __future__ import annotations

from onedata.db.models import DeploymentStatus
from onedata.db.store import ObjectStore
from onedata.errors import InvalidInput, NotFound
from onedata.observability.logging import get_logger

log = get_logger(__name__)


class DeploymentService:
    def __init__(self, *, store: ObjectStore, target: str) -> None:
        self._store = store
        self._target = target

    async def deploy(self, node_id: str | None) -> str:
        if not node_id:
            raise InvalidInput("No node id provided")
        updated = await self._store.set_deployment_status(node_id, DeploymentStatus.deployed)
        if not updated:
            raise NotFound("Node not found")
        log.info("node_deployed", node_id=node_id, target=self._target)
        return f"Deployed to {self._target} successfully"
