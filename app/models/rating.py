"""Mood rating domain model"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .mood import MoodType

MAX_FEEDBACK_LENGTH = 500


class MoodRatingCreate(BaseModel):
    """Rating creation model"""
    session_id: str
    mood_type: MoodType
    rating: int = Field(..., ge=1, le=5)
    matched_need: bool = False
    helped_focus: bool = False
    feedback_text: Optional[str] = Field(None, max_length=MAX_FEEDBACK_LENGTH)


class MoodRatingUpdate(BaseModel):
    """Ratings are not edited after submission"""
    pass


class MoodRating(MoodRatingCreate):
    """Complete rating model from database"""
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
