"""Pomodoro timer"""
from .models.timer_state import TimerSnapshot, TimerState
from .timer_engine import PomodoroTimer
from .focus_timer import FocusTimer, TimerTicker

__all__ = ['TimerState', 'TimerSnapshot', 'PomodoroTimer', 'FocusTimer', 'TimerTicker']
