"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4

from bodytune.workout.errors import InvalidInput, InvalidState


def new_id() -> str:
    return uuid4().hex


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Category(str, Enum):
    HIIT = "hiit"
    STRENGTH = "strength"
    CARDIO = "cardio"
    CORE = "core"

    @property
    def label(self) -> str:
        if self is Category.HIIT:
            return "HIIT"
        return self.value.capitalize()


@dataclass(frozen=True)
class Exercise:
    name: str
    duration: int
    rest: int
    icon: str
    id: str = field(default_factory=new_id, compare=False)

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise InvalidInput(f"Exercise '{self.name}' duration must be > 0")
        if self.rest < 0:
            raise InvalidInput(f"Exercise '{self.name}' rest must be >= 0")


@dataclass(frozen=True)
class Workout:
    name: str
    description: str
    exercises: tuple[Exercise, ...]
    total_rounds: int
    icon: str
    difficulty: Difficulty
    category: Category
    calories: int
    key: str = ""
    id: str = field(default_factory=new_id, compare=False)

    def __post_init__(self) -> None:
        # Freeze whatever sequence was handed in.
        object.__setattr__(self, "exercises", tuple(self.exercises))
        if not self.exercises:
            raise InvalidState(f"Workout '{self.name}' has no exercises")
        if self.total_rounds < 1:
            raise InvalidInput(f"Workout '{self.name}' needs at least one round")
        if self.calories < 0:
            raise InvalidInput(f"Workout '{self.name}' calories must be >= 0")

    @property
    def total_duration_sec(self) -> int:
        per_round = sum(item.duration + item.rest for item in self.exercises)
        return per_round * self.total_rounds

    @property
    def total_duration(self) -> int:
        """Nominal length in whole minutes (truncated)."""
        return self.total_duration_sec // 60

    @property
    def total_exercises(self) -> int:
        return len(self.exercises) * self.total_rounds


@dataclass(eq=False)
class Athlete:
    name: str
    icon: str
    color: str
    streak: int = 0
    total_workouts: int = 0
    total_minutes: int = 0
    id: str = field(default_factory=new_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class AthleteProgress:
    completed_rounds: int = 0
    is_active: bool = True
