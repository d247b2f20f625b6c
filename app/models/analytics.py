"""Mood history and analytics models"""
import datetime
from typing import Optional
from pydantic import BaseModel


class MoodHistory(BaseModel):
    """Daily aggregate row maintained by the store"""
    date: datetime.date
    mood_type: str
    session_count: Optional[int] = 0
    total_duration_seconds: Optional[int] = 0
    average_rating: Optional[float] = None

    class Config:
        from_attributes = True


class MoodAnalytics(BaseModel):
    """Per-mood aggregate over an analytics window"""
    mood_type: str
    session_count: int
    total_duration_seconds: int
    average_rating: float
    formatted_duration: str
