from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool
import logging

from slidestudio.generation import generate_slide
from slidestudio.models.api import (
    GenerateSlideRequest,
    GenerateSlideResponse,
    SlideListResponse,
    SlideGroup,
    SlideGroupsResponse,
    ParseSlidesRequest,
    ParseSlidesResponse,
)
from slidestudio.review import build_review_state, sorted_slide_numbers
from slidestudio.slide_parser import parse_slides
from slidestudio.slide_store import list_slide_files

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["slides"])

@router.post("/generate-slide", response_model=GenerateSlideResponse)
async def generate_slide_endpoint(request: GenerateSlideRequest):
    """Generate one slide image from a prompt and store it under today's folder."""
    if not request.prompt:
        raise HTTPException(status_code=400, detail="Prompt is required")

    try:
        url = await run_in_threadpool(generate_slide, request.prompt, request.detailLevel)
        return GenerateSlideResponse(url=url)

    except Exception as e:
        logger.error(f"Error generating slide: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to generate slide")

@router.get("/slides", response_model=SlideListResponse)
async def list_slides():
    """List generated PNG files of the gallery's date folder."""
    try:
        files, base_path = list_slide_files()
        return SlideListResponse(files=files, basePath=base_path)

    except Exception as e:
        logger.error(f"Error listing slides: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to list slides")

@router.get("/slides/groups", response_model=SlideGroupsResponse)
async def list_slide_groups():
    """Variants grouped by slide number, ordered by slide number."""
    try:
        files, base_path = list_slide_files()
        state = build_review_state(files, base_path)

        groups = []
        for number in sorted_slide_numbers(state):
            variants = state.slide_groups[number]
            groups.append(SlideGroup(
                number=number,
                files=[v.filename for v in variants],
                urls=[v.url for v in variants],
            ))

        return SlideGroupsResponse(basePath=base_path, groups=groups)

    except Exception as e:
        logger.error(f"Error grouping slides: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to group slides")

@router.post("/parse-slides", response_model=ParseSlidesResponse)
async def parse_slides_endpoint(request: ParseSlidesRequest):
    """Preview how a block of ideas splits into slides."""
    slides = parse_slides(request.text)
    return ParseSlidesResponse(slides=slides, count=len(slides))
