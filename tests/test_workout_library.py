from __future__ import annotations

import pytest

from bodytune.workout.errors import InvalidInput, InvalidState
from bodytune.workout.library import (
    default_athletes,
    exercise_preview,
    get_workout,
    list_workouts,
)
from bodytune.workout.model import Athlete, Category, Difficulty, Exercise, Workout


def test_catalog_has_four_workouts() -> None:
    workouts = list_workouts()
    keys = {workout.key for workout in workouts}
    assert keys == {"quick_hiit", "core_crusher", "full_body", "cardio_blast"}
    assert all(len(workout.exercises) == 4 for workout in workouts)


def test_total_duration_is_truncated_minutes() -> None:
    # (30 + 15) * 4 * 3 = 540 s
    assert get_workout("quick_hiit").total_duration == 9
    # (60 + 45 + 45 + 45) * 3 = 585 s
    assert get_workout("core_crusher").total_duration == 9
    # (60 + 45 + 60 + 45) * 4 = 840 s
    assert get_workout("full_body").total_duration == 14
    # (60 + 60 + 60 + 50) * 4 = 920 s
    assert get_workout("cardio_blast").total_duration == 15


def test_workout_metadata() -> None:
    full_body = get_workout("full_body")
    assert full_body.difficulty is Difficulty.ADVANCED
    assert full_body.category is Category.STRENGTH
    assert full_body.category.label == "Strength"
    assert get_workout("quick_hiit").category.label == "HIIT"
    assert full_body.total_exercises == 16


def test_unknown_workout_key() -> None:
    with pytest.raises(ValueError):
        get_workout("yoga")


def test_exercise_validation() -> None:
    with pytest.raises(InvalidInput):
        Exercise("Squats", 0, 10, "x")
    with pytest.raises(InvalidInput):
        Exercise("Squats", 10, -1, "x")


def test_workout_requires_exercises_and_rounds() -> None:
    with pytest.raises(InvalidState):
        Workout("Empty", "", (), 1, "x", Difficulty.BEGINNER, Category.CORE, 0)
    with pytest.raises(InvalidInput):
        Workout("NoRounds", "", (Exercise("A", 1, 0, "x"),), 0, "x", Difficulty.BEGINNER, Category.CORE, 0)


def test_workout_exercises_are_frozen() -> None:
    exercises = [Exercise("A", 10, 5, "x")]
    workout = Workout("W", "", exercises, 1, "x", Difficulty.BEGINNER, Category.CARDIO, 10)  # type: ignore[arg-type]
    exercises.append(Exercise("B", 10, 5, "x"))

    assert isinstance(workout.exercises, tuple)
    assert len(workout.exercises) == 1


def test_athlete_equality_is_by_id() -> None:
    first = Athlete(name="Dad", icon="man", color="#3399ff")
    clone = Athlete(name="Dad", icon="man", color="#3399ff")
    assert first != clone

    first_renamed = Athlete(name="Papa", icon="boy", color="#000000", id=first.id)
    assert first == first_renamed
    assert len({first, first_renamed, clone}) == 2


def test_default_roster_is_fresh_each_call() -> None:
    one = default_athletes()
    two = default_athletes()
    assert len(one) == 5
    assert {athlete.id for athlete in one}.isdisjoint({athlete.id for athlete in two})


def test_exercise_preview_shows_first_three_and_counts_the_rest() -> None:
    workout = get_workout("quick_hiit")
    shown, hidden = exercise_preview(workout)
    assert [exercise.name for exercise in shown] == ["Jumping Jacks", "Burpees", "High Knees"]
    assert hidden == 1

    shown, hidden = exercise_preview(workout, limit=10)
    assert len(shown) == 4
    assert hidden == 0
