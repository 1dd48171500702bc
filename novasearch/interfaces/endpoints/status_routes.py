import logging

from fastapi import APIRouter, Depends

from novasearch.application.services.status_service import StatusService
from novasearch.interfaces.schemas import Response
from novasearch.interfaces.schemas.search import StatusResponse
from novasearch.interfaces.service_dependencies import get_status_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/status", tags=["Status"])


@router.get(
    "",
    response_model=Response[StatusResponse],
    summary="Service health",
    description="Liveness of the API and its cache backend.",
)
async def get_status(
    status_service: StatusService = Depends(get_status_service),
) -> Response:
    statuses = await status_service.check_all()
    data = StatusResponse(cache_backend=status_service.cache_backend, services=statuses)

    if any(item.status == "error" for item in statuses):
        return Response.fail(503, "Some services are unhealthy", data)

    return Response.success(msg="ok", data=data)
