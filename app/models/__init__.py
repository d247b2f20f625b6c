"""Domain models for the application"""
from .mood import Mood, MoodType, Quote
from .session import UserSession, UserSessionCreate, UserSessionUpdate, ActivityFlags
from .rating import MoodRating, MoodRatingCreate, MoodRatingUpdate, MAX_FEEDBACK_LENGTH
from .analytics import MoodHistory, MoodAnalytics

__all__ = [
    'Mood', 'MoodType', 'Quote',
    'UserSession', 'UserSessionCreate', 'UserSessionUpdate', 'ActivityFlags',
    'MoodRating', 'MoodRatingCreate', 'MoodRatingUpdate', 'MAX_FEEDBACK_LENGTH',
    'MoodHistory', 'MoodAnalytics',
]
