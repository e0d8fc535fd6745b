"""Application state: roster, navigation and the single active session."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Sequence

from bodytune.workout.errors import InvalidInput, InvalidParticipantCount, InvalidState
from bodytune.workout.library import default_athletes
from bodytune.workout.model import Athlete, Workout
from bodytune.workout.session import WorkoutSession

logger = logging.getLogger(__name__)

MIN_SQUAD_SIZE = 2
MAX_SQUAD_SIZE = 5


class Screen(str, Enum):
    HOME = "home"
    ATHLETE_SELECTION = "athleteSelection"
    WORKOUT_SELECTION = "workoutSelection"
    COUNTDOWN = "countdown"
    ACTIVE_WORKOUT = "activeWorkout"
    RESULTS = "results"


ScreenListener = Callable[[Screen], None]


class AppState:
    """Owns the roster, the current screen and at most one workout session."""

    def __init__(self, athletes: Iterable[Athlete] | None = None) -> None:
        self.athletes: list[Athlete] = (
            list(athletes) if athletes is not None else default_athletes()
        )
        self.current_screen: Screen = Screen.HOME
        self.selected_workout: Workout | None = None
        self.selected_athletes: list[Athlete] = []
        self.session_in_progress: WorkoutSession | None = None
        self._listeners: list[ScreenListener] = []

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def navigate(self, screen: Screen) -> None:
        self.current_screen = Screen(screen)
        for listener in list(self._listeners):
            listener(self.current_screen)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_athlete(self, athlete: Athlete) -> bool:
        """Flip ``athlete`` in the selection; returns whether it is now selected."""
        if athlete in self.selected_athletes:
            self.selected_athletes.remove(athlete)
            return False
        if len(self.selected_athletes) >= MAX_SQUAD_SIZE:
            return False
        self.selected_athletes.append(athlete)
        return True

    @property
    def can_continue(self) -> bool:
        return MIN_SQUAD_SIZE <= len(self.selected_athletes) <= MAX_SQUAD_SIZE

    def select_workout(self, workout: Workout) -> None:
        self.selected_workout = workout

    def add_new_athlete(self, name: str, icon: str, color: str) -> Athlete:
        clean_name = name.strip()
        if not clean_name:
            raise InvalidInput("Athlete name must not be empty")
        athlete = Athlete(name=clean_name, icon=icon, color=color)
        self.athletes.append(athlete)
        logger.info("Added athlete %s", clean_name)
        return athlete

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def start_workout(self, athletes: Sequence[Athlete], workout: Workout) -> WorkoutSession:
        squad = list(dict.fromkeys(athletes))
        if not MIN_SQUAD_SIZE <= len(squad) <= MAX_SQUAD_SIZE:
            raise InvalidParticipantCount(
                f"A squad needs {MIN_SQUAD_SIZE}-{MAX_SQUAD_SIZE} athletes, got {len(squad)}"
            )
        self.selected_athletes = squad
        self.selected_workout = workout
        self.session_in_progress = WorkoutSession(squad, workout)
        logger.info(
            "Starting '%s' with %s",
            workout.name,
            ", ".join(athlete.name for athlete in squad),
        )
        self.navigate(Screen.COUNTDOWN)
        return self.session_in_progress

    def begin_workout(self) -> None:
        if self.session_in_progress is None:
            raise InvalidState("No workout session to begin")
        self.navigate(Screen.ACTIVE_WORKOUT)

    def end_workout(self) -> None:
        session = self.session_in_progress
        if session is None:
            raise InvalidState("No workout session to end")

        minutes = session.workout.total_duration
        by_id = {athlete.id: athlete for athlete in self.athletes}
        for participant in session.athletes:
            athlete = by_id.get(participant.id)
            if athlete is None:
                continue
            athlete.streak += 1
            athlete.total_workouts += 1
            athlete.total_minutes += minutes
        logger.info(
            "Credited %d min to %d athletes for '%s'",
            minutes,
            len(session.athletes),
            session.workout.name,
        )
        self.navigate(Screen.RESULTS)

    def new_workout_for_squad(self) -> None:
        """Drop the finished session and pick another workout for the same squad."""
        self.session_in_progress = None
        self.selected_workout = None
        self.navigate(Screen.WORKOUT_SELECTION)

    def reset_to_home(self) -> None:
        self.session_in_progress = None
        self.selected_workout = None
        self.selected_athletes = []
        self.navigate(Screen.HOME)
