"""Liveness probe."""

from fastapi import APIRouter

from log_manager_api.app.core.config import settings

router = APIRouter()


@router.get("/")
async def health() -> dict:
    return {"status": "ok", "version": settings.api_version}
