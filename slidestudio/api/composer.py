from fastapi import APIRouter, HTTPException
import logging

from slidestudio.composer import SlideComposer
from slidestudio.exceptions import ComposerQueueFullError
from slidestudio.generation import generate_slide
from slidestudio.models.api import ComposeRequest, ComposeResponse, SlideFailureModel
from slidestudio.slide_parser import parse_slides

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["composer"])

@router.post("/compose", response_model=ComposeResponse)
async def compose_slides(request: ComposeRequest):
    """Generate every slide found in the submitted ideas, one after another."""
    if not request.text.strip() or not parse_slides(request.text):
        raise HTTPException(status_code=400, detail="Slide ideas are required")

    try:
        composer = SlideComposer(generate_fn=generate_slide)
        run = await composer.run(request.text, request.detailLevel)

        return ComposeResponse(
            total=run.total,
            urls=run.urls,
            logs=run.logs,
            failures=[SlideFailureModel(index=f.index, error=f.error) for f in run.failures],
        )

    except ComposerQueueFullError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error composing slides: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to compose slides")
