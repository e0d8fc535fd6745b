"""Live squad workout session: exercise/rest/round state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Literal

from bodytune.workout.errors import InvalidInput, InvalidParticipantCount, InvalidState
from bodytune.workout.model import Athlete, AthleteProgress, Exercise, Workout

logger = logging.getLogger(__name__)


Phase = Literal["exercise", "rest", "completed"]
SessionEventKind = Literal[
    "tick",
    "rest_started",
    "exercise_started",
    "round_completed",
    "completed",
    "athlete_updated",
]


@dataclass(frozen=True)
class SessionEvent:
    kind: SessionEventKind
    phase: Phase
    current_round: int
    exercise_index: int
    time_remaining: int
    total_elapsed_time: int


SessionListener = Callable[[SessionEvent], None]


class WorkoutSession:
    """One run of a workout by a squad.

    The session starts exercising the first exercise of round 1. Each call to
    :meth:`tick` consumes one second: the countdown is decremented while it is
    above zero, and once it sits at zero the next tick moves to the following
    phase instead. A tick never does both.

    Phase order inside a round is exercise, rest, next exercise, rest and so
    on. Leaving the rest of the last exercise closes the round: every active
    athlete is credited one completed round, and once ``current_round`` goes
    past ``workout.total_rounds`` the session is completed for good.
    """

    def __init__(self, athletes: Iterable[Athlete], workout: Workout) -> None:
        unique: dict[str, Athlete] = {}
        for athlete in athletes:
            unique.setdefault(athlete.id, athlete)
        if not unique:
            raise InvalidParticipantCount("A session needs at least one athlete")
        if not workout.exercises:
            raise InvalidState(f"Workout '{workout.name}' has no exercises")

        self.athletes: tuple[Athlete, ...] = tuple(unique.values())
        self.workout = workout
        self.current_round = 1
        self.current_exercise_index = 0
        self.is_resting = False
        self.time_remaining = workout.exercises[0].duration
        self.is_completed = False
        self.athlete_progress: dict[str, AthleteProgress] = {
            athlete_id: AthleteProgress() for athlete_id in unique
        }
        self.total_elapsed_time = 0
        self._listeners: list[SessionListener] = []

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` and return a function that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, kind: SessionEventKind) -> None:
        event = SessionEvent(
            kind=kind,
            phase=self.phase,
            current_round=self.current_round,
            exercise_index=self.current_exercise_index,
            time_remaining=self.time_remaining,
            total_elapsed_time=self.total_elapsed_time,
        )
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        if self.is_completed:
            return "completed"
        return "rest" if self.is_resting else "exercise"

    @property
    def current_exercise(self) -> Exercise:
        if self.is_completed:
            raise InvalidState("Session is completed; there is no current exercise")
        return self.workout.exercises[self.current_exercise_index]

    @property
    def next_exercise(self) -> Exercise | None:
        if self.is_completed:
            return None
        next_index = self.current_exercise_index + 1
        if next_index >= len(self.workout.exercises):
            return None
        return self.workout.exercises[next_index]

    @property
    def progress_percentage(self) -> float:
        per_round = len(self.workout.exercises)
        total = per_round * self.workout.total_rounds
        done = (self.current_round - 1) * per_round + self.current_exercise_index
        return done / total

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def tick(self, elapsed_seconds: int = 1) -> None:
        if elapsed_seconds < 0:
            raise InvalidInput("elapsed_seconds must be >= 0")
        for _ in range(elapsed_seconds):
            if self.is_completed:
                return
            if self.time_remaining > 0:
                self.time_remaining -= 1
                self.total_elapsed_time += 1
                self._publish("tick")
            else:
                self.advance_phase()

    def advance_phase(self) -> None:
        if self.is_completed:
            return

        exercises = self.workout.exercises
        if not self.is_resting:
            self.is_resting = True
            self.time_remaining = self.current_exercise.rest
            logger.debug(
                "Round %d: resting after %s (%ds)",
                self.current_round,
                self.current_exercise.name,
                self.time_remaining,
            )
            self._publish("rest_started")
            return

        self.is_resting = False
        self.current_exercise_index += 1

        if self.current_exercise_index >= len(exercises):
            self.current_exercise_index = 0
            self.current_round += 1
            for athlete in self.athletes:
                progress = self.athlete_progress.get(athlete.id)
                if progress is not None and progress.is_active:
                    progress.completed_rounds += 1
            logger.info("Round %d of '%s' completed", self.current_round - 1, self.workout.name)
            self._publish("round_completed")

            if self.current_round > self.workout.total_rounds:
                self.is_completed = True
                self.time_remaining = 0
                logger.info("Session '%s' completed", self.workout.name)
                self._publish("completed")
                return

        self.time_remaining = self.current_exercise.duration
        logger.debug(
            "Round %d: starting %s (%ds)",
            self.current_round,
            self.current_exercise.name,
            self.time_remaining,
        )
        self._publish("exercise_started")

    def set_athlete_active(self, athlete_id: str, active: bool) -> None:
        progress = self.athlete_progress.get(athlete_id)
        if progress is None:
            raise InvalidInput(f"Athlete '{athlete_id}' is not part of this session")
        if progress.is_active == active:
            return
        progress.is_active = active
        self._publish("athlete_updated")
