"""Async controller shared by the web UI and the terminal engine."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from bodytune.core.state import AppState, Screen
from bodytune.workout.model import Athlete, Workout
from bodytune.workout.results import SessionSummary, build_summary
from bodytune.workout.runner import (
    COUNTDOWN_SECONDS,
    TICK_INTERVAL_SEC,
    SessionTicker,
    run_countdown,
)
from bodytune.workout.session import WorkoutSession

logger = logging.getLogger(__name__)


class UIController:
    def __init__(
        self,
        state: AppState | None = None,
        tick_interval_sec: float = TICK_INTERVAL_SEC,
        countdown_seconds: int = COUNTDOWN_SECONDS,
    ) -> None:
        self.state = state or AppState()
        self._tick_interval_sec = tick_interval_sec
        self._countdown_seconds = countdown_seconds
        self._ticker = SessionTicker(interval_sec=tick_interval_sec)

    @property
    def session(self) -> WorkoutSession | None:
        return self.state.session_in_progress

    @property
    def workout_running(self) -> bool:
        return self._ticker.is_running

    @property
    def is_paused(self) -> bool:
        return self._ticker.is_paused

    def start_workout(self, athletes: Sequence[Athlete], workout: Workout) -> WorkoutSession:
        return self.state.start_workout(athletes, workout)

    async def run_countdown(self, on_count: Callable[[int], None]) -> bool:
        """Run the pre-workout countdown; returns ``False`` if the session went away."""
        await run_countdown(
            on_count,
            seconds=self._countdown_seconds,
            interval_sec=self._tick_interval_sec,
        )
        return (
            self.state.session_in_progress is not None
            and self.state.current_screen == Screen.COUNTDOWN
        )

    async def begin_workout(
        self,
        on_tick: Callable[[WorkoutSession], None],
        on_finish: Callable[[bool], None],
    ) -> None:
        self.state.begin_workout()
        session = self.state.session_in_progress
        assert session is not None
        await self._ticker.start(session, on_tick, on_finish)

    def toggle_pause(self) -> bool:
        """Pause or resume tick delivery; returns the new paused flag."""
        if self._ticker.is_paused:
            self._ticker.resume()
        else:
            self._ticker.pause()
        return self._ticker.is_paused

    def finish_workout(self) -> SessionSummary:
        session = self.state.session_in_progress
        self.state.end_workout()
        assert session is not None
        return build_summary(session)

    async def quit_workout(self) -> None:
        await self._ticker.stop()
        self.state.reset_to_home()
        logger.info("Session quit")

    async def new_workout_for_squad(self) -> None:
        await self._ticker.stop()
        self.state.new_workout_for_squad()

    async def reset_to_home(self) -> None:
        await self._ticker.stop()
        self.state.reset_to_home()
