from fastapi import APIRouter, Depends

from ..deps import get_settings
from ...core.config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "app": settings.app_name,
        "model": settings.gemini_model,
        "configured": bool(settings.google_api_key),
    }
