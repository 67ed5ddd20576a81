from __future__ import annotations

from fastapi import APIRouter, Depends

from onedata.api.deps import deployment_service
from onedata.api.schemas import DeployRequest, DeployResponse
from onedata.errors import StoreError
from onedata.services.deployment_service import DeploymentService

router = APIRouter(prefix="/api", tags=["deployment"])


@router.post("/deploy", response_model=DeployResponse)
async def deploy_node(
    body: DeployRequest,
    svc: DeploymentService = Depends(deployment_service),
) -> DeployResponse:
    try:
        message = await svc.deploy(body.nodeId)
    except StoreError as exc:
        raise StoreError("Deployment failed") from exc
    return DeployResponse(success=True, message=message)
