"""Services module"""

from app.services.timer import FocusTimer, PomodoroTimer
from app.services.session import MoodSessionService, SessionTracker
from app.services.rating_service import RatingService, RatingValidationError, StoreError
from app.services.analytics_service import AnalyticsService
from app.services.quote_service import QuoteService

__all__ = [
    "FocusTimer",
    "PomodoroTimer",
    "MoodSessionService",
    "SessionTracker",
    "RatingService",
    "RatingValidationError",
    "StoreError",
    "AnalyticsService",
    "QuoteService",
]
