from __future__ import annotations

from fastapi import APIRouter, Depends

from onedata.api.deps import conversion_service
from onedata.api.schemas import ConvertRequest, ConvertResponse
from onedata.services.conversion_service import ConversionService

router = APIRouter(prefix="/api", tags=["conversion"])


@router.post("/convert", response_model=ConvertResponse)
async def convert_routine(
    body: ConvertRequest,
    svc: ConversionService = Depends(conversion_service),
) -> ConvertResponse:
    # InvalidInput -> 400, ConversionFailed -> 500 (see exception handlers in api.app).
    sql = await svc.convert(node_id=body.nodeId, abap_code=body.abapCode)
    return ConvertResponse(sql=sql)
