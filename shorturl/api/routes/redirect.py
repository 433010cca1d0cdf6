"""URL redirection endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.api import schemas
from shorturl.api.dependencies import get_shortener_service
from shorturl.db.session import get_db
from shorturl.services.shortener import ShortenedURLService
from shorturl.services.exceptions import StoreError, URLNotFoundError

# Create router with tags
router = APIRouter(tags=["redirect"])


@router.get(
    "/{short_url}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "Unknown short code"},
        500: {"model": schemas.ErrorResponse, "description": "Store failure"},
    }
)
async def redirect_to_long_url(
    short_url: str,
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
):
    """Redirect to the long URL stored under a short code."""
    try:
        url = await shortener_service.get_url_for_redirect(db, short_url)
    except URLNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return RedirectResponse(url=url.long_url, status_code=status.HTTP_302_FOUND)
