"""Async drivers for a workout session: the one-second ticker and the countdown."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from bodytune.workout.session import WorkoutSession

logger = logging.getLogger(__name__)

TICK_INTERVAL_SEC = 1.0
COUNTDOWN_SECONDS = 3


TickCallback = Callable[[WorkoutSession], None]
FinishCallback = Callable[[bool], None]


class SessionTicker:
    """Calls ``session.tick()`` every ``interval_sec`` while running and not paused."""

    def __init__(self, interval_sec: float = TICK_INTERVAL_SEC) -> None:
        self._interval_sec = interval_sec
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()
        self._resume_event = asyncio.Event()
        self._resume_event.set()
        self._session: WorkoutSession | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def is_paused(self) -> bool:
        return self.is_running and not self._resume_event.is_set()

    @property
    def session(self) -> WorkoutSession | None:
        return self._session

    async def start(
        self,
        session: WorkoutSession,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> None:
        if self.is_running:
            raise RuntimeError("Ticker already running")

        self._session = session
        self._stop_event = asyncio.Event()
        self._resume_event = asyncio.Event()
        self._resume_event.set()
        self._task = asyncio.create_task(self._run(session, on_tick, on_finish))

    def pause(self) -> None:
        if self.is_running:
            self._resume_event.clear()
            logger.info("Session paused")

    def resume(self) -> None:
        if self.is_running and not self._resume_event.is_set():
            self._resume_event.set()
            logger.info("Session resumed")

    async def stop(self) -> None:
        if not self.is_running:
            return

        self._stop_event.set()
        self._resume_event.set()
        assert self._task is not None
        await self._task
        self._task = None
        self._session = None

    async def _run(
        self,
        session: WorkoutSession,
        on_tick: TickCallback,
        on_finish: FinishCallback,
    ) -> None:
        completed = False
        try:
            while not self._stop_event.is_set() and not session.is_completed:
                await asyncio.sleep(self._interval_sec)
                if not self._resume_event.is_set():
                    await self._resume_event.wait()
                    # A quit while paused must not deliver one last tick.
                    continue
                if self._stop_event.is_set():
                    break
                session.tick()
                on_tick(session)

            completed = session.is_completed
        except Exception:
            logger.exception("Session ticker failed on '%s'", session.workout.name)
        finally:
            on_finish(completed)


async def run_countdown(
    on_count: Callable[[int], None],
    seconds: int = COUNTDOWN_SECONDS,
    interval_sec: float = TICK_INTERVAL_SEC,
) -> None:
    """Report ``seconds`` down to ``0``, one value per interval."""
    for remaining in range(max(0, seconds), 0, -1):
        on_count(remaining)
        await asyncio.sleep(interval_sec)
    on_count(0)
