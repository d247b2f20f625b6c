"""Health check endpoints"""

from fastapi import APIRouter, Depends

from app.api.deps import get_focus_timer
from app.services.timer import FocusTimer

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check(timer: FocusTimer = Depends(get_focus_timer)):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "moodflow-backend",
        "timer_ticking": timer.ticking,
    }
