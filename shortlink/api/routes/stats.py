from fastapi import APIRouter, Depends, Path

from shortlink.api import schemas
from shortlink.api.dependencies import get_stats_service
from shortlink.services.stats import StatsService

router = APIRouter(tags=["stats"])


@router.get(
    "/stats/{name}",
    response_model=schemas.LinkResponse,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "URL not found"},
        500: {"model": schemas.ErrorResponse, "description": "Internal server error"},
    }
)
async def get_link_stats(
    name: str = Path(..., description="The short name of the link"),
    stats_service: StatsService = Depends(get_stats_service),
):
    record = await stats_service.get_link_stats(name)
    return schemas.LinkResponse(
        message="Statistics retrieved successfully.",
        data=record,
    )
