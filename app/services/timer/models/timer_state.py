"""Timer state models"""
from pydantic import BaseModel, Field


class TimerState(BaseModel):
    """Pomodoro countdown state, held in memory only"""
    minutes: int = Field(..., ge=0)
    seconds: int = Field(..., ge=0, lt=60)
    is_active: bool = False
    is_break: bool = False
    cycles: int = Field(0, ge=0)

    @property
    def remaining_seconds(self) -> int:
        return self.minutes * 60 + self.seconds


class TimerSnapshot(TimerState):
    """Timer state plus the derived values used for display"""
    total_seconds: int
    remaining: int
    progress: float  # percentage of the current interval elapsed
    display: str  # MM:SS
