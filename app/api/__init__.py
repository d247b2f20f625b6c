# API module exports
from app.api import analytics, health, moods, quotes, ratings, session, timer
from app.api.base import api_router

__all__ = ["analytics", "health", "moods", "quotes", "ratings", "session", "timer", "api_router"]
