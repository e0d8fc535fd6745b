from __future__ import annotations

import pytest

from bodytune.core.state import AppState, Screen
from bodytune.workout.errors import InvalidInput, InvalidParticipantCount, InvalidState
from bodytune.workout.library import get_workout
from bodytune.workout.model import Category, Difficulty, Exercise, Workout


def _ten_minute_workout() -> Workout:
    # (50 + 10) * 2 exercises * 5 rounds = 600 s = 10 min
    return Workout(
        name="Ten",
        description="",
        exercises=(Exercise("A", 50, 10, "x"), Exercise("B", 50, 10, "x")),
        total_rounds=5,
        icon="bolt",
        difficulty=Difficulty.BEGINNER,
        category=Category.CORE,
        calories=90,
    )


def test_default_roster_loaded() -> None:
    state = AppState()
    assert [athlete.name for athlete in state.athletes] == [
        "Dad",
        "Mom",
        "Son",
        "Daughter",
        "Grandpa",
    ]
    assert state.current_screen == Screen.HOME
    assert state.session_in_progress is None


@pytest.mark.parametrize("count", [1, 6])
def test_start_workout_rejects_bad_squad_size(count: int) -> None:
    state = AppState()
    state.add_new_athlete("Uncle", icon="man", color="#ef4444")
    with pytest.raises(InvalidParticipantCount):
        state.start_workout(state.athletes[:count], get_workout("quick_hiit"))
    assert state.session_in_progress is None
    assert state.current_screen == Screen.HOME


@pytest.mark.parametrize("count", [2, 5])
def test_start_workout_accepts_valid_squad(count: int) -> None:
    state = AppState()
    session = state.start_workout(state.athletes[:count], get_workout("quick_hiit"))

    assert state.session_in_progress is session
    assert state.current_screen == Screen.COUNTDOWN
    assert len(session.athlete_progress) == count


def test_starting_again_replaces_session() -> None:
    state = AppState()
    first = state.start_workout(state.athletes[:2], get_workout("quick_hiit"))
    second = state.start_workout(state.athletes[1:4], get_workout("core_crusher"))

    assert state.session_in_progress is second
    assert second is not first


def test_begin_workout_switches_screen() -> None:
    state = AppState()
    with pytest.raises(InvalidState):
        state.begin_workout()

    state.start_workout(state.athletes[:2], get_workout("full_body"))
    state.begin_workout()
    assert state.current_screen == Screen.ACTIVE_WORKOUT


def test_end_workout_credits_nominal_duration() -> None:
    state = AppState()
    workout = _ten_minute_workout()
    assert workout.total_duration == 10
    squad = state.athletes[:3]
    session = state.start_workout(squad, workout)
    state.begin_workout()
    session.tick(7)  # far less than ten minutes

    state.end_workout()

    assert state.current_screen == Screen.RESULTS
    for athlete in squad:
        assert athlete.streak == 1
        assert athlete.total_workouts == 1
        assert athlete.total_minutes == 10
    for athlete in state.athletes[3:]:
        assert athlete.total_minutes == 0
        assert athlete.total_workouts == 0


def test_end_workout_without_session() -> None:
    with pytest.raises(InvalidState):
        AppState().end_workout()


def test_reset_to_home_drops_session() -> None:
    state = AppState()
    state.start_workout(state.athletes[:2], get_workout("quick_hiit"))
    state.reset_to_home()

    assert state.session_in_progress is None
    assert state.selected_athletes == []
    assert state.selected_workout is None
    assert state.current_screen == Screen.HOME


def test_new_workout_for_squad_keeps_selection() -> None:
    state = AppState()
    squad = state.athletes[1:4]
    state.start_workout(squad, get_workout("quick_hiit"))
    state.begin_workout()
    state.end_workout()

    state.new_workout_for_squad()

    assert state.current_screen == Screen.WORKOUT_SELECTION
    assert state.session_in_progress is None
    assert state.selected_workout is None
    assert state.selected_athletes == list(squad)
    assert state.can_continue is True


def test_add_new_athlete() -> None:
    state = AppState()
    athlete = state.add_new_athlete("  Auntie ", icon="woman", color="#facc15")
    twin = state.add_new_athlete("Auntie", icon="woman", color="#facc15")

    assert state.athletes[-2:] == [athlete, twin]
    assert athlete.name == "Auntie"
    assert athlete != twin
    assert (athlete.streak, athlete.total_workouts, athlete.total_minutes) == (0, 0, 0)


@pytest.mark.parametrize("name", ["", "   "])
def test_add_new_athlete_rejects_blank_name(name: str) -> None:
    state = AppState()
    with pytest.raises(InvalidInput):
        state.add_new_athlete(name, icon="man", color="#3399ff")
    assert len(state.athletes) == 5


def test_toggle_selection_caps_squad() -> None:
    state = AppState()
    state.add_new_athlete("Uncle", icon="man", color="#ef4444")

    assert state.can_continue is False
    for athlete in state.athletes[:5]:
        assert state.toggle_athlete(athlete) is True
    assert state.can_continue is True
    assert state.toggle_athlete(state.athletes[5]) is False
    assert len(state.selected_athletes) == 5

    assert state.toggle_athlete(state.athletes[0]) is False
    assert state.athletes[0] not in state.selected_athletes


def test_screen_listeners() -> None:
    state = AppState()
    seen: list[Screen] = []
    unsubscribe = state.subscribe(seen.append)

    state.navigate(Screen.ATHLETE_SELECTION)
    state.navigate(Screen.WORKOUT_SELECTION)
    unsubscribe()
    state.navigate(Screen.HOME)

    assert seen == [Screen.ATHLETE_SELECTION, Screen.WORKOUT_SELECTION]
