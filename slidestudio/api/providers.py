from fastapi import APIRouter, HTTPException
from typing import List
import logging

from slidestudio.config import settings
from slidestudio.image_providers import image_manager
from slidestudio.models.api import ProviderSwitchRequest, ProviderInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["providers"])

@router.get("/providers", response_model=List[dict])
async def get_available_providers():
    """Get list of available image providers."""
    return [
        {
            "name": "gemini",
            "display_name": "Google Gemini",
            "default_model": settings.GEMINI_IMAGE_MODEL,
            "configured": image_manager.has_api_key("gemini"),
        },
        {
            "name": "openai",
            "display_name": "OpenAI",
            "default_model": settings.OPENAI_IMAGE_MODEL,
            "configured": image_manager.has_api_key("openai"),
        },
    ]

@router.get("/providers/current", response_model=ProviderInfo)
async def get_current_provider():
    """Get information about the current image provider."""
    try:
        return ProviderInfo(**image_manager.get_current_provider_info())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get provider info: {str(e)}")

@router.post("/providers/switch")
async def switch_provider(request: ProviderSwitchRequest):
    """Switch to a different image provider."""
    if not image_manager.has_api_key(request.provider):
        raise HTTPException(
            status_code=400,
            detail=f"API key for {request.provider} not configured on server. Please add {request.provider.upper()}_API_KEY to environment variables."
        )

    try:
        image_manager.switch_provider(request.provider)
        return {
            "status": "success",
            "message": f"Successfully switched to {request.provider}",
            "provider_info": image_manager.get_current_provider_info(),
        }

    except Exception as e:
        logger.error(f"Failed to switch provider: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to switch provider: {str(e)}")
