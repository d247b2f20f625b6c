"""Mood session lifecycle"""
from .session_tracker import SessionTracker
from .mood_session_service import MoodSessionService, MoodSessionState

__all__ = ['SessionTracker', 'MoodSessionService', 'MoodSessionState']
