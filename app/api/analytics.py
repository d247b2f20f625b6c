from typing import List

from fastapi import APIRouter, Depends, Query

from app import config
from app.api.deps import get_analytics_service
from app.models.analytics import MoodAnalytics
from app.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=List[MoodAnalytics])
async def get_mood_analytics(
    days: int = Query(config.ANALYTICS_DAYS, ge=1, le=365),
    service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Per-mood session count, total time and average rating over the last
    `days` days. An empty list means no activity (or an unreachable store).
    """
    return await service.get_mood_analytics(days)
