"""Summary of a finished (or quit) squad session for the results screen."""

from __future__ import annotations

from dataclasses import dataclass

from bodytune.workout.model import Athlete
from bodytune.workout.session import WorkoutSession


@dataclass(frozen=True)
class AthleteResult:
    rank: int
    athlete: Athlete
    completed_rounds: int
    total_rounds: int
    completion_pct: int
    performance_text: str


@dataclass(frozen=True)
class SessionSummary:
    workout_name: str
    duration_min: int
    total_rounds: int
    total_exercises: int
    calories: int
    completed: bool
    athletes: tuple[AthleteResult, ...]


def completion_percentage(completed_rounds: int, total_rounds: int) -> int:
    if total_rounds <= 0:
        return 0
    return int((completed_rounds / total_rounds) * 100)


def performance_text(completion_pct: int) -> str:
    if completion_pct >= 100:
        return "Perfect!"
    if completion_pct >= 75:
        return "Great Job!"
    if completion_pct >= 50:
        return "Good Effort!"
    return "Completed"


def build_summary(session: WorkoutSession) -> SessionSummary:
    workout = session.workout
    results: list[AthleteResult] = []
    # Rank follows squad order, as on the TV results board.
    for rank, athlete in enumerate(session.athletes, start=1):
        progress = session.athlete_progress.get(athlete.id)
        if progress is None:
            continue
        pct = completion_percentage(progress.completed_rounds, workout.total_rounds)
        results.append(
            AthleteResult(
                rank=rank,
                athlete=athlete,
                completed_rounds=progress.completed_rounds,
                total_rounds=workout.total_rounds,
                completion_pct=pct,
                performance_text=performance_text(pct),
            )
        )
    return SessionSummary(
        workout_name=workout.name,
        duration_min=session.total_elapsed_time // 60,
        total_rounds=workout.total_rounds,
        total_exercises=workout.total_exercises,
        calories=workout.calories,
        completed=session.is_completed,
        athletes=tuple(results),
    )
