from fastapi import APIRouter
from app.api import analytics, health, moods, quotes, ratings, session, timer

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(moods.router)
api_router.include_router(quotes.router)
api_router.include_router(session.router)
api_router.include_router(timer.router)
api_router.include_router(ratings.router)
api_router.include_router(analytics.router)
