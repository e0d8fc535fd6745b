"""Async terminal engine that runs a squad session without a screen."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from bodytune.core.state import MAX_SQUAD_SIZE, MIN_SQUAD_SIZE, AppState
from bodytune.ui.coaching import compute_coaching_signal
from bodytune.ui.controller import UIController
from bodytune.workout.errors import InvalidInput, InvalidParticipantCount
from bodytune.workout.library import get_workout
from bodytune.workout.model import Athlete
from bodytune.workout.results import SessionSummary
from bodytune.workout.runner import TICK_INTERVAL_SEC
from bodytune.workout.session import SessionEvent, WorkoutSession

logger = logging.getLogger(__name__)


class SquadEngine:
    def __init__(
        self,
        state: AppState | None = None,
        tick_interval_sec: float = TICK_INTERVAL_SEC,
    ) -> None:
        self.state = state or AppState()
        self._controller = UIController(self.state, tick_interval_sec=tick_interval_sec)
        self._finished = asyncio.Event()

    def resolve_athletes(self, names: Sequence[str]) -> list[Athlete]:
        """Map names to roster athletes, adding unknown names to the roster.

        The squad size is checked before anything is added, so a rejected
        squad leaves the roster untouched.
        """
        by_name = {athlete.name.lower(): athlete for athlete in self.state.athletes}
        wanted: dict[str, str] = {}
        for raw in names:
            name = raw.strip()
            if not name:
                raise InvalidInput("Athlete names must not be empty")
            wanted.setdefault(name.lower(), name)
        if not MIN_SQUAD_SIZE <= len(wanted) <= MAX_SQUAD_SIZE:
            raise InvalidParticipantCount(
                f"A squad needs {MIN_SQUAD_SIZE}-{MAX_SQUAD_SIZE} athletes, got {len(wanted)}"
            )

        squad: list[Athlete] = []
        for key, name in wanted.items():
            athlete = by_name.get(key)
            if athlete is None:
                athlete = self.state.add_new_athlete(name, icon="directions_run", color="#3399ff")
            squad.append(athlete)
        return squad

    async def run(self, workout_key: str, athlete_names: Sequence[str]) -> SessionSummary:
        workout = get_workout(workout_key)
        squad = self.resolve_athletes(athlete_names)
        session = self._controller.start_workout(squad, workout)
        print(f"{workout.name}: {workout.total_rounds} rounds, ~{workout.total_duration} min")
        print("Squad: " + ", ".join(athlete.name for athlete in squad))

        unsubscribe = session.subscribe(lambda event: self._print_event(session, event))
        self._finished = asyncio.Event()
        try:
            await self._controller.run_countdown(self._print_countdown)
            await self._controller.begin_workout(
                on_tick=lambda _s: None,
                on_finish=lambda _done: self._finished.set(),
            )
            self._print_phase_line(session)
            await self._finished.wait()
        finally:
            unsubscribe()

        summary = self._controller.finish_workout()
        self._print_summary(summary)
        return summary

    async def stop(self) -> None:
        await self._controller.quit_workout()

    def _print_countdown(self, remaining: int) -> None:
        print(f"{remaining}..." if remaining > 0 else "GO!")

    def _print_event(self, session: WorkoutSession, event: SessionEvent) -> None:
        if event.kind == "tick":
            return
        if event.kind == "round_completed":
            done = event.current_round - 1
            print(f"Round {done} / {session.workout.total_rounds} done")
            return
        if event.kind == "completed":
            print("WORKOUT COMPLETE!")
            return
        self._print_phase_line(session)

    def _print_phase_line(self, session: WorkoutSession) -> None:
        signal = compute_coaching_signal(phase=session.phase, time_remaining=session.time_remaining)
        if session.is_resting:
            upcoming = session.next_exercise
            nxt = f" | Next: {upcoming.name}" if upcoming is not None else ""
            print(f"REST {session.time_remaining}s | {signal.text}{nxt}")
            return
        exercise = session.current_exercise
        print(
            f"Round {session.current_round}/{session.workout.total_rounds} | "
            f"{exercise.name.upper()} {session.time_remaining}s | "
            f"{int(session.progress_percentage * 100)}%"
        )

    def _print_summary(self, summary: SessionSummary) -> None:
        print(
            f"SESSION COMPLETE - {summary.workout_name}: {summary.duration_min} min, "
            f"{summary.total_rounds} rounds, {summary.total_exercises} exercises, "
            f"{summary.calories} kcal"
        )
        for result in summary.athletes:
            print(
                f"#{result.rank} {result.athlete.name:<12} "
                f"{result.completed_rounds}/{result.total_rounds} "
                f"{result.completion_pct:>3}% {result.performance_text}"
            )
