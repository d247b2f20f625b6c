"""Focus timer - couples the Pomodoro engine with its one-second tick task"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from app import config
from .models.timer_state import TimerSnapshot
from .timer_engine import PomodoroTimer

logger = logging.getLogger(__name__)

Callback = Callable[[TimerSnapshot], Union[None, Awaitable[None]]]


async def _notify(callback: Optional[Callback], snapshot: TimerSnapshot, name: str) -> None:
    """Run a timer callback; its errors are logged and never stop the timer"""
    if callback is None:
        return
    try:
        result = callback(snapshot)
        if asyncio.iscoroutine(result):
            await result
    except Exception as e:
        logger.error(f"Error in timer {name} callback: {e}")


class TimerTicker:
    """
    Cancellable repeating schedule that ticks a PomodoroTimer.

    At most one tick task is live per ticker. The task ends on its own when
    the engine stops at an interval boundary.
    """

    def __init__(
        self,
        engine: PomodoroTimer,
        interval: float = None,
        on_boundary: Optional[Callback] = None,
    ):
        self._engine = engine
        self._interval = interval if interval is not None else config.TIMER_TICK_SECONDS
        self._on_boundary = on_boundary
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        while self._engine.is_active:
            await asyncio.sleep(self._interval)
            if self._engine.tick():
                await _notify(self._on_boundary, self._engine.snapshot(), "boundary")


class FocusTimer:
    """
    Pomodoro timer owned by one consumer.

    Toggling starts or cancels the tick schedule; aclose() (or leaving the
    async context) always cancels it.
    """

    def __init__(
        self,
        engine: Optional[PomodoroTimer] = None,
        interval: float = None,
        on_boundary: Optional[Callback] = None,
        on_start: Optional[Callback] = None,
    ):
        self.engine = engine or PomodoroTimer()
        self._ticker = TimerTicker(self.engine, interval=interval, on_boundary=on_boundary)
        self.on_start = on_start

    async def __aenter__(self) -> "FocusTimer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def ticking(self) -> bool:
        return self._ticker.running

    def snapshot(self) -> TimerSnapshot:
        return self.engine.snapshot()

    async def toggle(self) -> TimerSnapshot:
        if self.engine.toggle():
            await _notify(self.on_start, self.engine.snapshot(), "start")
            self._ticker.start()
            logger.info("Focus timer started")
        else:
            await self._ticker.stop()
            logger.info("Focus timer paused")
        return self.engine.snapshot()

    async def reset(self) -> TimerSnapshot:
        self.engine.reset()
        await self._ticker.stop()
        return self.engine.snapshot()

    async def aclose(self) -> None:
        await self._ticker.stop()

    async def teardown(self) -> TimerSnapshot:
        """Cancel the tick task and return to a fresh work interval"""
        await self._ticker.stop()
        self.engine.restore_initial()
        logger.info("Focus timer torn down")
        return self.engine.snapshot()
