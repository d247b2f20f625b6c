"""User sessions repository"""
from datetime import datetime
from typing import Optional

from supabase import Client  # type: ignore

from app.models.session import UserSession, UserSessionCreate, UserSessionUpdate

from .base import BaseRepository


class UserSessionRepository(BaseRepository[UserSession, UserSessionCreate, UserSessionUpdate]):
    """Repository for mood session operations"""
    
    def __init__(self, client: Client):
        super().__init__(client, "user_sessions", UserSession)
    
    async def close(
        self,
        session_id: str,
        ended_at: datetime,
        duration_seconds: int,
        music_played: bool,
        timer_used: bool,
    ) -> Optional[UserSession]:
        """Close a session with its locally computed duration and final activity flags"""
        update_data = UserSessionUpdate(
            ended_at=ended_at,
            duration_seconds=duration_seconds,
            music_played=music_played,
            timer_used=timer_used,
        )
        return await self.update(session_id, update_data)
    