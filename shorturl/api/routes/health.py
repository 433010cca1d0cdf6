"""Liveness and greeting endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from shorturl.api.dependencies import get_settings
from shorturl.core.config import Settings

router = APIRouter(tags=["health"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def greeting(settings: Settings = Depends(get_settings)):
    return f"Hello {settings.NAME}!"


@router.get(
    "/health",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
)
async def liveness_probe():
    """Report that the process is serving requests. Dependencies are not checked."""
    return "OK"
