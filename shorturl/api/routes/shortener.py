from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.api import schemas
from shorturl.api.dependencies import get_shortener_service
from shorturl.db.session import get_db
from shorturl.services.shortener import ShortenedURLService
from shorturl.services.exceptions import MissingURLError, StoreError

router = APIRouter(tags=["shortener"])


@router.post(
    "/generate",
    response_model=schemas.GenerateResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Missing URL"},
        422: {"model": schemas.ValidationErrorResponse, "description": "Malformed request body"},
        500: {"model": schemas.ErrorResponse, "description": "Store failure"},
    }
)
async def generate_short_url(
    payload: Optional[schemas.GenerateRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
):
    long_url = payload.url if payload is not None else None
    try:
        url = await shortener_service.create_short_url(db=db, long_url=long_url)
        return schemas.GenerateResponse(
            short_url=url.short_url,
            created_at=url.created_at,
            expires_at=url.expires_at,
            long_url=url.long_url,
        )
    except MissingURLError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
