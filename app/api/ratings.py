"""Session rating endpoints"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.api.deps import get_mood_session_service, get_rating_service
from app.models.rating import MoodRating
from app.services.rating_service import RatingService, RatingValidationError, StoreError
from app.services.session import MoodSessionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ratings", tags=["ratings"])


class SubmitRatingRequest(BaseModel):
    session_id: Optional[str] = None  # defaults to the session awaiting a rating
    mood: Optional[str] = None
    rating: Optional[int] = None
    matched_need: Optional[bool] = None
    helped_focus: Optional[bool] = None
    feedback_text: Optional[str] = None


@router.post("", response_model=MoodRating, status_code=201)
async def submit_rating(
    request: SubmitRatingRequest,
    service: RatingService = Depends(get_rating_service),
    sessions: MoodSessionService = Depends(get_mood_session_service)
):
    """
    Submit feedback for a closed session.

    Raises:
        400: Invalid rating form
        502: The store rejected the rating
    """
    session_id = request.session_id or sessions.pending_rating_session_id
    mood = request.mood
    if mood is None and sessions.pending_rating_mood is not None:
        mood = sessions.pending_rating_mood.value

    try:
        rating = await service.submit_rating(
            session_id,
            mood,
            request.rating,
            matched_need=request.matched_need,
            helped_focus=request.helped_focus,
            feedback_text=request.feedback_text,
        )
    except RatingValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if session_id == sessions.pending_rating_session_id:
        sessions.clear_pending_rating()
    return rating


@router.get("/{session_id}", response_model=List[MoodRating])
async def list_ratings(session_id: str, service: RatingService = Depends(get_rating_service)):
    try:
        return await service.get_ratings(session_id)
    except Exception as e:
        logger.error(f"Error fetching ratings for session {session_id}: {e}")
        raise HTTPException(status_code=502, detail=f"Failed to fetch ratings: {str(e)}")
