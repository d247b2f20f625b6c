"""Repository factory and exports"""
from supabase import Client
from .sessions import UserSessionRepository
from .ratings import MoodRatingRepository
from .mood_history import MoodHistoryRepository


class RepositoryFactory:
    """Factory for creating repository instances"""
    
    def __init__(self, client: Client):
        self._client = client
        self._sessions: UserSessionRepository = None
        self._ratings: MoodRatingRepository = None
        self._mood_history: MoodHistoryRepository = None
    
    @property
    def sessions(self) -> UserSessionRepository:
        """Get user sessions repository"""
        if self._sessions is None:
            self._sessions = UserSessionRepository(self._client)
        return self._sessions
    
    @property
    def ratings(self) -> MoodRatingRepository:
        """Get mood ratings repository"""
        if self._ratings is None:
            self._ratings = MoodRatingRepository(self._client)
        return self._ratings
    
    @property
    def mood_history(self) -> MoodHistoryRepository:
        """Get mood history repository"""
        if self._mood_history is None:
            self._mood_history = MoodHistoryRepository(self._client)
        return self._mood_history


__all__ = [
    'RepositoryFactory',
    'UserSessionRepository',
    'MoodRatingRepository',
    'MoodHistoryRepository',
]
