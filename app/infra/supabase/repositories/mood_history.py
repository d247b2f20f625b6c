"""Mood history repository (read-only daily aggregates)"""
import datetime
from typing import List

from supabase import Client  # type: ignore

from app.models.analytics import MoodHistory


class MoodHistoryRepository:
    """Repository for the store-maintained mood_history table"""
    
    def __init__(self, client: Client):
        self._client = client
        self._table_name = "mood_history"
    
    async def find_since(self, since: datetime.date) -> List[MoodHistory]:
        """Find daily rows dated on or after `since`"""
        response = (
            self._client.table(self._table_name)
            .select("date, mood_type, session_count, total_duration_seconds, average_rating")
            .gte("date", since.isoformat())
            .execute()
        )
        return [MoodHistory(**row) for row in response.data or []]
