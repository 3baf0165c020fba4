from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Any, Literal
from datetime import datetime


def _numeric_or_none(value: Any) -> Any:
    # Non-numeric detail levels fall back to the default instead of failing
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value

# Slide Generation Models
class GenerateSlideRequest(BaseModel):
    """Request model for single slide generation."""
    prompt: Optional[str] = Field(default=None, description="Slide idea text for one slide")
    detailLevel: Optional[float] = Field(default=None, description="Detail level slider value (0-100)")

    @field_validator("detailLevel", mode="before")
    @classmethod
    def coerce_detail_level(cls, value: Any) -> Any:
        return _numeric_or_none(value)

class GenerateSlideResponse(BaseModel):
    url: str = Field(..., description="Public URL of the written image")

class SlideListResponse(BaseModel):
    """Generated files of one date folder."""
    files: List[str]
    basePath: str

class SlideGroup(BaseModel):
    number: int
    files: List[str]
    urls: List[str]

class SlideGroupsResponse(BaseModel):
    basePath: str
    groups: List[SlideGroup]

class ParseSlidesRequest(BaseModel):
    text: str = ""

class ParseSlidesResponse(BaseModel):
    slides: List[str]
    count: int

class ComposeRequest(BaseModel):
    """Request model for batch generation from a block of slide ideas."""
    text: str = Field(default="", description="Raw slide ideas, one or many slides")
    detailLevel: Optional[float] = Field(default=None, description="Detail level applied to every slide")

    @field_validator("detailLevel", mode="before")
    @classmethod
    def coerce_detail_level(cls, value: Any) -> Any:
        return _numeric_or_none(value)

class SlideFailureModel(BaseModel):
    index: int
    error: str

class ComposeResponse(BaseModel):
    total: int
    urls: List[str]
    logs: List[str]
    failures: List[SlideFailureModel] = Field(default_factory=list)

# Feedback Models
class FeedbackRequest(BaseModel):
    """Feedback about one slide. slideId and filename are logged as given."""
    slideId: Any = None
    feedback: Optional[str] = None
    filename: Any = None

class FeedbackResponse(BaseModel):
    success: bool = True

# Provider Models
class ProviderSwitchRequest(BaseModel):
    """Request to switch image provider."""
    provider: Literal["gemini", "openai"]

class ProviderInfo(BaseModel):
    """Information about current image provider."""
    provider: str
    model: str
    configured: bool
    aspect_ratio: Optional[str] = None
    image_size: Optional[str] = None

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    provider_info: ProviderInfo
    version: str = "1.0.0"
