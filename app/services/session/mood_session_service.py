"""
Mood Session Service

Owns the currently selected mood, the active theme derived from it, and the
single open session that belongs to that selection.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from app.data.moods import DEFAULT_THEME, get_mood, mood_for_shortcut
from app.models.mood import MoodType
from app.models.session import ActivityFlags
from app.services.timer import FocusTimer, TimerSnapshot
from .session_tracker import SessionTracker

logger = logging.getLogger(__name__)


class MoodSessionState(BaseModel):
    mood: Optional[MoodType] = None
    theme: str = DEFAULT_THEME
    is_tracking: bool = False
    session_id: Optional[str] = None
    activity: ActivityFlags = Field(default_factory=ActivityFlags)
    pending_rating_session_id: Optional[str] = None
    last_error: Optional[str] = None


class MoodSessionService:
    """Maps mood selection changes onto session start/end"""

    def __init__(self, tracker: SessionTracker, timer: Optional[FocusTimer] = None):
        self.tracker = tracker
        # lives only while a mood is selected
        self.timer = timer
        self.mood: Optional[MoodType] = None
        self.theme: str = DEFAULT_THEME
        self.pending_rating_session_id: Optional[str] = None
        # mood of the last closed session, for the rating prompt
        self.pending_rating_mood: Optional[MoodType] = None
        self.last_error: Optional[str] = None

    def state(self) -> MoodSessionState:
        return MoodSessionState(
            mood=self.mood,
            theme=self.theme,
            is_tracking=self.tracker.is_tracking,
            session_id=self.tracker.session_id,
            activity=self.tracker.activity.model_copy(),
            pending_rating_session_id=self.pending_rating_session_id,
            last_error=self.last_error,
        )

    async def select_mood(self, mood_type: MoodType | str) -> MoodSessionState:
        """
        Switch to a mood. The open session is closed before the next one opens.

        Raises:
            ValueError: If the mood is not in the catalog
        """
        mood = get_mood(mood_type)
        if self.mood == mood.id:
            return self.state()

        self.last_error = None
        if self.tracker.is_tracking:
            await self.tracker.end_session()

        self.mood = mood.id
        self.theme = mood.color
        await self.tracker.start_session(mood.id)
        logger.info(f"Mood selected: {mood.id.value}")
        return self.state()

    async def select_shortcut(self, key: str) -> MoodSessionState:
        mood = mood_for_shortcut(key)
        if mood is None:
            raise ValueError(f"No mood bound to key {key!r}")
        return await self.select_mood(mood.id)

    async def exit_mood(self) -> Optional[str]:
        """
        Leave mood mode.

        Returns:
            ID of the session that was closed (to be rated), or None
        """
        if self.timer is not None:
            await self.timer.teardown()
        closed_id = await self.tracker.end_session()
        if closed_id is not None:
            self.pending_rating_session_id = closed_id
            self.pending_rating_mood = self.mood
        self.mood = None
        self.theme = DEFAULT_THEME
        return closed_id

    def update_activity(self, music_played: Optional[bool] = None, timer_used: Optional[bool] = None) -> ActivityFlags:
        return self.tracker.update_activity(music_played=music_played, timer_used=timer_used)

    def record_music_played(self) -> ActivityFlags:
        return self.update_activity(music_played=True)

    def record_timer_used(self) -> ActivityFlags:
        """Only counts toward an open session"""
        if not self.tracker.is_tracking:
            return self.tracker.activity.model_copy()
        return self.update_activity(timer_used=True)

    async def toggle_timer(self) -> TimerSnapshot:
        """
        Start or pause the focus timer of the selected mood.

        Raises:
            ValueError: If no mood is selected
        """
        if self.timer is None or self.mood is None:
            raise ValueError("Select a mood before using the timer")
        return await self.timer.toggle()

    def clear_pending_rating(self) -> None:
        self.pending_rating_session_id = None
        self.pending_rating_mood = None

    def notify_error(self, message: str, error: Exception) -> None:
        """Error observer for the session tracker; surfaced through state()"""
        self.last_error = message
