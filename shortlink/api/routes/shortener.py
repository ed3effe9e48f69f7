from typing import Optional

from fastapi import APIRouter, Depends, status

from shortlink.api import schemas
from shortlink.api.dependencies import get_client_ip, get_shorten_request, get_shortener_service
from shortlink.services.shortener import ShortenerService

router = APIRouter(tags=["shortener"])


@router.post(
    "/shorten",
    response_model=schemas.LinkResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Missing field, invalid URL or name, or name taken"},
        500: {"model": schemas.ErrorResponse, "description": "Internal server error"},
    }
)
async def create_short_link(
    body: schemas.ShortenRequest = Depends(get_shorten_request),
    client_ip: Optional[str] = Depends(get_client_ip),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    record = await shortener_service.create_link(
        target_url=body.url,
        name=body.name,
        client_ip=client_ip,
    )
    return schemas.LinkResponse(
        message="Short URL created successfully!",
        data=record,
    )
