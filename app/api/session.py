"""Mood session endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.api.deps import get_mood_session_service
from app.models.mood import MoodType
from app.models.session import ActivityFlags
from app.services.session import MoodSessionService, MoodSessionState

router = APIRouter(prefix="/api/session", tags=["session"])


class SelectMoodRequest(BaseModel):
    mood: MoodType


class ActivityRequest(BaseModel):
    music_played: Optional[bool] = None
    timer_used: Optional[bool] = None


class ExitResponse(BaseModel):
    closed_session_id: Optional[str] = None
    rating_requested: bool


@router.get("", response_model=MoodSessionState)
async def get_session_state(service: MoodSessionService = Depends(get_mood_session_service)):
    return service.state()


@router.post("/select", response_model=MoodSessionState)
async def select_mood(
    request: SelectMoodRequest,
    service: MoodSessionService = Depends(get_mood_session_service)
):
    """
    Select a mood. Any open session is closed before the new one is started.
    Store failures are reported in `last_error` rather than as an HTTP error.
    """
    return await service.select_mood(request.mood)


@router.post("/shortcut/{key}", response_model=MoodSessionState)
async def select_shortcut(
    key: str,
    service: MoodSessionService = Depends(get_mood_session_service)
):
    """Keyboard shortcut selection (1-4)"""
    try:
        return await service.select_shortcut(key)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/exit", response_model=ExitResponse)
async def exit_mood(service: MoodSessionService = Depends(get_mood_session_service)):
    closed_id = await service.exit_mood()
    return ExitResponse(closed_session_id=closed_id, rating_requested=closed_id is not None)


@router.post("/activity", response_model=ActivityFlags)
async def update_activity(
    request: ActivityRequest,
    service: MoodSessionService = Depends(get_mood_session_service)
):
    return service.update_activity(music_played=request.music_played, timer_used=request.timer_used)
