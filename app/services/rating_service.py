"""
Rating Service

Validates session feedback locally and stores it in mood_ratings.
"""

import logging
from typing import List, Optional

from app.infra.supabase.repositories import RepositoryFactory
from app.models.mood import MoodType
from app.models.rating import MAX_FEEDBACK_LENGTH, MoodRating, MoodRatingCreate

logger = logging.getLogger(__name__)


class RatingValidationError(ValueError):
    """Rejected before any store call"""


class StoreError(Exception):
    """The store could not be reached or rejected the request"""


class RatingService:
    """Service for session feedback"""

    def __init__(self, repositories: RepositoryFactory):
        self.rating_repo = repositories.ratings

    @staticmethod
    def build_rating(
        session_id: str,
        mood_type: MoodType | str,
        rating: Optional[int],
        matched_need: Optional[bool] = None,
        helped_focus: Optional[bool] = None,
        feedback_text: Optional[str] = None,
    ) -> MoodRatingCreate:
        """
        Validate a rating form.

        Unanswered yes/no questions count as False and empty feedback is
        stored as null.

        Raises:
            RatingValidationError: If the form cannot be submitted
        """
        if not rating:
            raise RatingValidationError("Please select a rating")
        if not 1 <= rating <= 5:
            raise RatingValidationError("Rating must be between 1 and 5")
        if feedback_text and len(feedback_text) > MAX_FEEDBACK_LENGTH:
            raise RatingValidationError(f"Feedback must be at most {MAX_FEEDBACK_LENGTH} characters")
        if not session_id:
            raise RatingValidationError("No session to rate")
        try:
            mood = MoodType(mood_type)
        except ValueError:
            raise RatingValidationError(f"Unknown mood: {mood_type}") from None

        return MoodRatingCreate(
            session_id=session_id,
            mood_type=mood,
            rating=rating,
            matched_need=bool(matched_need),
            helped_focus=bool(helped_focus),
            feedback_text=feedback_text or None,
        )

    async def submit_rating(
        self,
        session_id: str,
        mood_type: MoodType | str,
        rating: Optional[int],
        matched_need: Optional[bool] = None,
        helped_focus: Optional[bool] = None,
        feedback_text: Optional[str] = None,
    ) -> MoodRating:
        """
        Submit feedback for a closed session.

        Raises:
            RatingValidationError: Invalid form, nothing was sent
            StoreError: The insert failed
        """
        data = self.build_rating(
            session_id,
            mood_type,
            rating,
            matched_need=matched_need,
            helped_focus=helped_focus,
            feedback_text=feedback_text,
        )
        try:
            created = await self.rating_repo.create(data)
        except Exception as e:
            logger.error(f"Error submitting rating: {e}")
            raise StoreError("Failed to submit feedback") from e

        logger.info(f"Rating {created.rating} submitted for session {session_id}")
        return created

    async def get_ratings(self, session_id: str) -> List[MoodRating]:
        return await self.rating_repo.find_by_session(session_id)
