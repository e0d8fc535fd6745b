"""Built-in squad workouts and the sample roster."""

from __future__ import annotations

from bodytune.workout.model import Athlete, Category, Difficulty, Exercise, Workout

# Material icon names, rendered by the web UI.
ATHLETE_ICONS: tuple[str, ...] = (
    "man",
    "woman",
    "boy",
    "girl",
    "elderly",
    "directions_run",
    "child_care",
)

ATHLETE_COLORS: tuple[str, ...] = (
    "#3399ff",
    "#66cc66",
    "#a855f7",
    "#f97316",
    "#ec4899",
    "#22d3ee",
    "#facc15",
    "#ef4444",
)


WORKOUTS: tuple[Workout, ...] = (
    Workout(
        key="quick_hiit",
        name="Quick HIIT",
        description="High-intensity interval training",
        exercises=(
            Exercise("Jumping Jacks", 30, 15, "sports_gymnastics"),
            Exercise("Burpees", 30, 15, "fitness_center"),
            Exercise("High Knees", 30, 15, "directions_run"),
            Exercise("Mountain Climbers", 30, 15, "hiking"),
        ),
        total_rounds=3,
        icon="local_fire_department",
        difficulty=Difficulty.INTERMEDIATE,
        category=Category.HIIT,
        calories=200,
    ),
    Workout(
        key="core_crusher",
        name="Core Crusher",
        description="Targeted core exercises",
        exercises=(
            Exercise("Plank", 45, 15, "self_improvement"),
            Exercise("Crunches", 30, 15, "self_improvement"),
            Exercise("Russian Twists", 30, 15, "accessibility_new"),
            Exercise("Leg Raises", 30, 15, "fitness_center"),
        ),
        total_rounds=3,
        icon="bolt",
        difficulty=Difficulty.INTERMEDIATE,
        category=Category.CORE,
        calories=180,
    ),
    Workout(
        key="full_body",
        name="Full Body",
        description="Complete body strength circuit",
        exercises=(
            Exercise("Squats", 40, 20, "fitness_center"),
            Exercise("Push-ups", 30, 15, "accessibility_new"),
            Exercise("Lunges", 40, 20, "directions_walk"),
            Exercise("Plank to Push-up", 30, 15, "self_improvement"),
        ),
        total_rounds=4,
        icon="sports_martial_arts",
        difficulty=Difficulty.ADVANCED,
        category=Category.STRENGTH,
        calories=300,
    ),
    Workout(
        key="cardio_blast",
        name="Cardio Blast",
        description="Heart-pumping cardio",
        exercises=(
            Exercise("High Knees", 45, 15, "directions_run"),
            Exercise("Butt Kicks", 45, 15, "directions_run"),
            Exercise("Jumping Jacks", 45, 15, "sports_gymnastics"),
            Exercise("Burpees", 30, 20, "fitness_center"),
        ),
        total_rounds=4,
        icon="favorite",
        difficulty=Difficulty.INTERMEDIATE,
        category=Category.CARDIO,
        calories=280,
    ),
)


def list_workouts() -> tuple[Workout, ...]:
    return WORKOUTS


def get_workout(key: str) -> Workout:
    workout = next((item for item in WORKOUTS if item.key == key), None)
    if workout is None:
        raise ValueError(f"Unknown workout '{key}'")
    return workout


def default_athletes() -> list[Athlete]:
    """Fresh sample roster; each call returns new records with zero stats."""
    return [
        Athlete(name="Dad", icon="man", color="#3399ff"),
        Athlete(name="Mom", icon="woman", color="#a855f7"),
        Athlete(name="Son", icon="boy", color="#f97316"),
        Athlete(name="Daughter", icon="girl", color="#ec4899"),
        Athlete(name="Grandpa", icon="elderly", color="#22d3ee"),
    ]


def exercise_preview(workout: Workout, limit: int = 3) -> tuple[tuple[Exercise, ...], int]:
    """First ``limit`` exercises of ``workout`` and how many more are hidden."""
    shown = workout.exercises[: max(0, limit)]
    return shown, len(workout.exercises) - len(shown)
