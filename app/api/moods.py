from typing import List

from fastapi import APIRouter, HTTPException

from app.data.moods import MOODS, get_mood
from app.models.mood import Mood

router = APIRouter(prefix="/api/moods", tags=["moods"])


@router.get("", response_model=List[Mood])
async def list_moods():
    """List the mood catalog"""
    return MOODS


@router.get("/{mood_id}", response_model=Mood)
async def read_mood(mood_id: str):
    try:
        return get_mood(mood_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
