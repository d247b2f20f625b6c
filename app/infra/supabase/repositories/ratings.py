"""Mood ratings repository"""
from typing import List

from supabase import Client  # type: ignore

from app.models.rating import MoodRating, MoodRatingCreate, MoodRatingUpdate

from .base import BaseRepository


class MoodRatingRepository(BaseRepository[MoodRating, MoodRatingCreate, MoodRatingUpdate]):
    """Repository for session rating operations"""
    
    def __init__(self, client: Client):
        super().__init__(client, "mood_ratings", MoodRating)
    
    async def find_by_session(self, session_id: str) -> List[MoodRating]:
        """Find all ratings submitted for a session"""
        return await self.find_by_filters({"session_id": session_id})
