"""Short link redirection endpoint with visit tracking."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, status
from starlette.responses import RedirectResponse

from shortlink.api import schemas
from shortlink.api.dependencies import get_client_ip, get_shortener_service
from shortlink.services.shortener import ShortenerService

router = APIRouter(tags=["redirect"])


@router.get(
    "/{name}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "URL not found"},
        500: {"model": schemas.ErrorResponse, "description": "Internal server error"},
    }
)
async def redirect_to_target_url(
    name: str = Path(..., description="The short name of the link"),
    client_ip: Optional[str] = Depends(get_client_ip),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """Record the visit, then redirect to the target URL."""
    record = await shortener_service.resolve_link(name, client_ip=client_ip)
    return RedirectResponse(url=record.target_url, status_code=status.HTTP_302_FOUND)
