from fastapi import APIRouter, HTTPException
from datetime import datetime

from slidestudio.models.api import HealthResponse, ProviderInfo
from slidestudio.image_providers import image_manager

router = APIRouter(tags=["health"])

@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint reporting the image provider configuration."""
    try:
        provider_info = image_manager.get_current_provider_info()
        if not provider_info["configured"]:
            raise HTTPException(status_code=503, detail=f"{provider_info['provider']} API key not configured")

        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            provider_info=ProviderInfo(**provider_info),
            version="1.0.0"
        )

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Slide Studio API", "version": "1.0.0"}
