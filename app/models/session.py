"""User session domain model"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .mood import MoodType


class UserSessionCreate(BaseModel):
    """Session creation model - flags always start False"""
    mood_type: MoodType
    started_at: datetime
    music_played: bool = False
    timer_used: bool = False


class UserSessionUpdate(BaseModel):
    """Session close model"""
    ended_at: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(None, ge=0)
    music_played: Optional[bool] = None
    timer_used: Optional[bool] = None


class UserSession(BaseModel):
    """Complete session model from database"""
    id: str  # UUID as string
    mood_type: MoodType
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    music_played: bool = False
    timer_used: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ActivityFlags(BaseModel):
    """Last-known activity flags of the open session"""
    music_played: bool = False
    timer_used: bool = False
