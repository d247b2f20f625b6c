from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_focus_timer, get_mood_session_service
from app.services.session import MoodSessionService
from app.services.timer import FocusTimer, TimerSnapshot

router = APIRouter(prefix="/api/timer", tags=["timer"])


@router.get("", response_model=TimerSnapshot)
async def get_timer(timer: FocusTimer = Depends(get_focus_timer)):
    return timer.snapshot()


@router.post("/toggle", response_model=TimerSnapshot)
async def toggle_timer(service: MoodSessionService = Depends(get_mood_session_service)):
    """
    Start or pause the countdown.

    Raises:
        409: No mood is selected
    """
    try:
        return await service.toggle_timer()
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/reset", response_model=TimerSnapshot)
async def reset_timer(timer: FocusTimer = Depends(get_focus_timer)):
    """Restore the current interval to full length and stop"""
    return await timer.reset()
