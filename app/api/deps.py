"""Shared service instances for the API routers"""

import logging
from typing import Optional

from app.infra.supabase.client import get_supabase_client
from app.infra.supabase.repositories import RepositoryFactory
from app.services.analytics_service import AnalyticsService
from app.services.quote_service import QuoteService
from app.services.rating_service import RatingService
from app.services.session import MoodSessionService, SessionTracker
from app.services.session.session_tracker import Clock, utc_now
from app.services.timer import FocusTimer

logger = logging.getLogger(__name__)

# The companion serves one active mood session, and its timer, at a time
_mood_sessions: Optional[MoodSessionService] = None
_quotes = QuoteService()


def build_mood_session_service(
    repositories: RepositoryFactory,
    clock: Clock = utc_now,
    **timer_options,
) -> MoodSessionService:
    """Wire tracker, timer and controller together"""
    tracker = SessionTracker(repositories.sessions, clock=clock)
    timer = FocusTimer(**timer_options)
    service = MoodSessionService(tracker, timer=timer)
    tracker.on_error = service.notify_error
    timer.on_start = lambda _snapshot: service.record_timer_used()
    return service


def get_repositories() -> RepositoryFactory:
    return RepositoryFactory(get_supabase_client())


def get_mood_session_service() -> MoodSessionService:
    global _mood_sessions

    if _mood_sessions is None:
        _mood_sessions = build_mood_session_service(get_repositories())

    return _mood_sessions


def get_focus_timer() -> FocusTimer:
    return get_mood_session_service().timer


def get_rating_service() -> RatingService:
    return RatingService(get_repositories())


def get_analytics_service() -> AnalyticsService:
    return AnalyticsService(get_repositories())


def get_quote_service() -> QuoteService:
    return _quotes


async def shutdown() -> None:
    """Cancel the tick task and close the open session"""
    global _mood_sessions

    if _mood_sessions is not None:
        await _mood_sessions.timer.aclose()
        await _mood_sessions.tracker.end_session()
        _mood_sessions = None
    logger.info("Services shut down")
