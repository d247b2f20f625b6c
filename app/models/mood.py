"""Mood domain models"""
from enum import Enum
from typing import List
from pydantic import BaseModel, computed_field

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/videoseries"


class MoodType(str, Enum):
    """Fixed mood categories"""
    CALM = "calm"
    STRESSED = "stressed"
    EXCITED = "excited"
    TIRED = "tired"


class Mood(BaseModel):
    """Static mood catalog entry"""
    id: MoodType
    name: str
    description: str
    icon: str
    color: str  # color token used as the active theme
    playlist_id: str  # YouTube playlist ID
    keywords: List[str]
    shortcut: str  # keyboard digit

    @computed_field  # type: ignore[misc]
    @property
    def playlist_url(self) -> str:
        return self.embed_url()

    def embed_url(self, autoplay: bool = False) -> str:
        """YouTube embed URL for the mood playlist, looped"""
        return f"{YOUTUBE_EMBED_URL}?list={self.playlist_id}&autoplay={int(autoplay)}&loop=1"


class Quote(BaseModel):
    text: str
    author: str
