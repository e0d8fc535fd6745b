"""On-screen coaching cues for the active workout and results screens."""

from __future__ import annotations

from dataclasses import dataclass

from bodytune.workout.session import Phase


@dataclass(frozen=True)
class CoachingSignal:
    key: str
    text: str
    color: str


def motivation_text(time_remaining: int) -> str:
    if 20 <= time_remaining <= 30:
        return "PUSH HARDER!"
    if 10 <= time_remaining <= 19:
        return "KEEP GOING!"
    if 5 <= time_remaining <= 9:
        return "ALMOST THERE!"
    if 1 <= time_remaining <= 4:
        return "FINISH STRONG!"
    return "YOU GOT THIS!"


def compute_coaching_signal(*, phase: Phase, time_remaining: int) -> CoachingSignal:
    if phase == "completed":
        return CoachingSignal(key="done", text="WORKOUT COMPLETE!", color="#66cc66")
    if phase == "rest":
        return CoachingSignal(key="rest", text="BREATHE", color="#f97316")
    return CoachingSignal(
        key="work",
        text=motivation_text(time_remaining),
        color="#66cc66",
    )


def rank_badge(rank: int) -> str:
    """Material icon name for a results-board rank."""
    if rank == 1:
        return "looks_one"
    if rank == 2:
        return "looks_two"
    if rank == 3:
        return "looks_3"
    return "star"
