"""Pomodoro timer engine

Alternating work/break countdown driven by an external one-second tick.
States are the cross product of is_active x is_break. Every interval
boundary stops the timer; the next interval has to be started explicitly.
"""

import logging

from app import config
from app.utils.datetime_helper import format_clock
from .models.timer_state import TimerSnapshot, TimerState

logger = logging.getLogger(__name__)


def interval_progress(total_seconds: int, remaining_seconds: int) -> float:
    """Percentage of an interval elapsed, 0 at full time and 100 at zero"""
    return (total_seconds - remaining_seconds) / total_seconds * 100


class PomodoroTimer:
    """Work/break countdown state machine. Performs no I/O."""

    def __init__(self, work_minutes: int = None, break_minutes: int = None):
        self.work_minutes = work_minutes if work_minutes is not None else config.WORK_MINUTES
        self.break_minutes = break_minutes if break_minutes is not None else config.BREAK_MINUTES
        if self.work_minutes <= 0 or self.break_minutes <= 0:
            raise ValueError("Interval lengths must be positive")
        self._state = TimerState(minutes=self.work_minutes, seconds=0)

    @property
    def state(self) -> TimerState:
        return self._state.model_copy()

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def is_break(self) -> bool:
        return self._state.is_break

    @property
    def cycles(self) -> int:
        return self._state.cycles

    def interval_minutes(self, is_break: bool) -> int:
        return self.break_minutes if is_break else self.work_minutes

    @property
    def total_seconds(self) -> int:
        """Full length of the current interval"""
        return self.interval_minutes(self._state.is_break) * 60

    @property
    def progress(self) -> float:
        return interval_progress(self.total_seconds, self._state.remaining_seconds)

    def start(self) -> None:
        self._state = self._state.model_copy(update={"is_active": True})

    def pause(self) -> None:
        self._state = self._state.model_copy(update={"is_active": False})

    def toggle(self) -> bool:
        """Flip between running and idle. Returns the new is_active."""
        if self._state.is_active:
            self.pause()
        else:
            self.start()
        return self._state.is_active

    def reset(self) -> None:
        """Restore the current interval to full length and stop; cycles are kept."""
        self._state = self._state.model_copy(update={
            "minutes": self.interval_minutes(self._state.is_break),
            "seconds": 0,
            "is_active": False,
        })

    def restore_initial(self) -> None:
        """Back to a fresh idle work interval with no completed cycles"""
        self._state = TimerState(minutes=self.work_minutes, seconds=0)

    def tick(self) -> bool:
        """
        Advance the countdown by one second.

        Returns:
            True if this tick completed an interval
        """
        if not self._state.is_active:
            return False

        remaining = self._state.remaining_seconds - 1
        if remaining > 0:
            self._state = self._state.model_copy(update={
                "minutes": remaining // 60,
                "seconds": remaining % 60,
            })
            return False

        # Interval finished
        was_break = self._state.is_break
        new_is_break = not was_break
        self._state = TimerState(
            minutes=self.interval_minutes(new_is_break),
            seconds=0,
            is_active=False,
            is_break=new_is_break,
            cycles=self._state.cycles if was_break else self._state.cycles + 1,
        )
        logger.info(
            f"{'Break' if was_break else 'Work'} interval completed, cycles={self._state.cycles}"
        )
        return True

    def snapshot(self) -> TimerSnapshot:
        remaining = self._state.remaining_seconds
        return TimerSnapshot(
            **self._state.model_dump(),
            total_seconds=self.total_seconds,
            remaining=remaining,
            progress=self.progress,
            display=format_clock(remaining),
        )
