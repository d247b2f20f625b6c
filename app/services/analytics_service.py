"""
Analytics Service

Aggregates the store's daily mood_history rows into per-mood totals for a
trailing window of days.
"""

import logging
from datetime import date, timedelta
from typing import Callable, Dict, List

from app import config
from app.data.moods import is_known_mood
from app.infra.supabase.repositories import RepositoryFactory
from app.models.analytics import MoodAnalytics, MoodHistory
from app.utils.datetime_helper import format_duration

logger = logging.getLogger(__name__)


def aggregate_history(rows: List[MoodHistory]) -> List[MoodAnalytics]:
    """
    Group daily rows by mood.

    Counts and durations are summed (nulls as 0). The average rating is the
    mean of the non-null daily averages, 0 when there are none. Moods are
    ordered by first appearance; moods outside the catalog are dropped.
    """
    totals: Dict[str, Dict] = {}
    for row in rows:
        if not is_known_mood(row.mood_type):
            continue
        entry = totals.setdefault(row.mood_type, {"sessions": 0, "duration": 0, "ratings": []})
        entry["sessions"] += row.session_count or 0
        entry["duration"] += row.total_duration_seconds or 0
        if row.average_rating:
            entry["ratings"].append(row.average_rating)

    result = []
    for mood_type, entry in totals.items():
        ratings = entry["ratings"]
        result.append(MoodAnalytics(
            mood_type=mood_type,
            session_count=entry["sessions"],
            total_duration_seconds=entry["duration"],
            average_rating=sum(ratings) / len(ratings) if ratings else 0,
            formatted_duration=format_duration(entry["duration"]),
        ))
    return result


class AnalyticsService:
    """Service for mood history analytics"""

    def __init__(self, repositories: RepositoryFactory, today: Callable[[], date] = date.today):
        self.history_repo = repositories.mood_history
        self._today = today

    async def get_mood_analytics(self, days: int = None) -> List[MoodAnalytics]:
        """
        Per-mood activity for the last `days` days (default ANALYTICS_DAYS).

        A failed read is logged and yields an empty list.
        """
        if days is None:
            days = config.ANALYTICS_DAYS
        since = self._today() - timedelta(days=days)
        try:
            rows = await self.history_repo.find_since(since)
        except Exception as e:
            logger.error(f"Error fetching analytics: {e}")
            return []
        return aggregate_history(rows)
