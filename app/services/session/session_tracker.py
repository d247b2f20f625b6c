"""
Session Tracker

Bounds the lifetime of a mood session. Persistence is delegated to the
user_sessions table; the elapsed duration and activity flags are tracked
locally because the store does not compute them.

Store failures are logged and reported to the error observer, never raised.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Callable, Optional

from app.infra.supabase.repositories.sessions import UserSessionRepository
from app.models.mood import MoodType
from app.models.session import ActivityFlags, UserSessionCreate

logger = logging.getLogger(__name__)

ErrorObserver = Callable[[str, Exception], None]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionTracker:
    """Tracks at most one open session at a time"""

    def __init__(
        self,
        repository: UserSessionRepository,
        on_error: Optional[ErrorObserver] = None,
        clock: Clock = utc_now,
    ):
        self.repository = repository
        self.on_error = on_error
        self._clock = clock
        self.session_id: Optional[str] = None
        self.start_time: Optional[datetime] = None
        self.activity = ActivityFlags()

    @property
    def is_tracking(self) -> bool:
        return self.session_id is not None and self.start_time is not None

    def _report(self, message: str, error: Exception) -> None:
        logger.error(f"{message}: {error}")
        if self.on_error is not None:
            self.on_error(message, error)

    async def start_session(self, mood_type: MoodType) -> Optional[str]:
        """
        Open a new session in the store.

        An already open session is closed first. On failure tracking stays
        inactive and nothing is retried.

        Returns:
            The new session ID, or None if the store call failed
        """
        if self.is_tracking:
            logger.warning(f"Session {self.session_id} still open, closing before starting a new one")
            await self.end_session()

        started_at = self._clock()
        try:
            session = await self.repository.create(
                UserSessionCreate(mood_type=mood_type, started_at=started_at)
            )
        except Exception as e:
            self._report("Error starting session", e)
            return None

        self.session_id = session.id
        self.start_time = started_at
        self.activity = ActivityFlags()
        logger.info(f"Session {session.id} started for mood {MoodType(mood_type).value}")
        return session.id

    async def end_session(self) -> Optional[str]:
        """
        Close the open session with its elapsed duration and last-known flags.

        Local state is cleared whether or not the store update succeeds.

        Returns:
            The closed session ID, or None if no session was open
        """
        if not self.is_tracking:
            return None

        session_id = self.session_id
        ended_at = self._clock()
        duration_seconds = max(0, math.floor((ended_at - self.start_time).total_seconds()))
        activity = self.activity.model_copy()

        self.session_id = None
        self.start_time = None

        try:
            await self.repository.close(
                session_id,
                ended_at=ended_at,
                duration_seconds=duration_seconds,
                music_played=activity.music_played,
                timer_used=activity.timer_used,
            )
            logger.info(f"Session {session_id} ended after {duration_seconds}s")
        except Exception as e:
            self._report("Error ending session", e)

        return session_id

    def update_activity(self, music_played: Optional[bool] = None, timer_used: Optional[bool] = None) -> ActivityFlags:
        """Overwrite only the flags that are given. Never contacts the store."""
        if music_played is not None:
            self.activity.music_played = music_played
        if timer_used is not None:
            self.activity.timer_used = timer_used
        return self.activity.model_copy()
