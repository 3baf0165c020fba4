from fastapi import APIRouter, HTTPException
import logging

from slidestudio.feedback_log import append_feedback
from slidestudio.models.api import FeedbackRequest, FeedbackResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["feedback"])

@router.post("/feedback", response_model=FeedbackResponse)
async def save_feedback(request: FeedbackRequest):
    """Append free-text feedback about a slide to the shared log file."""
    if not request.feedback:
        raise HTTPException(status_code=400, detail="Feedback is required")

    try:
        append_feedback(request.slideId, request.filename, request.feedback)
        return FeedbackResponse(success=True)

    except Exception as e:
        logger.error(f"Error saving feedback: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to save feedback")
