from __future__ import annotations

import asyncio
import sys

import pytest

from bodytune.cli import main as cli
from bodytune.core.engine import SquadEngine
from bodytune.core.state import AppState, Screen
from bodytune.workout.errors import InvalidParticipantCount


def test_list_workouts_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run_list_workouts() == 0
    out = capsys.readouterr().out
    assert "quick_hiit" in out
    assert "Cardio Blast" in out
    assert len(out.strip().splitlines()) == 4


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args(["--run", "core_crusher"])
    assert args.run == "core_crusher"
    assert args.athletes == "Dad,Mom"
    assert args.speed == 1.0
    assert args.ui_web is False


def test_engine_resolves_and_adds_athletes() -> None:
    engine = SquadEngine(AppState())
    squad = engine.resolve_athletes(["dad", "Cousin", "cousin"])

    assert [athlete.name for athlete in squad] == ["Dad", "Cousin"]
    assert squad[1] is engine.state.athletes[-1]
    assert len(engine.state.athletes) == 6


@pytest.mark.parametrize("names", [["Ann"], ["A", "B", "C", "D", "E", "F"]])
def test_engine_rejected_squad_leaves_roster_untouched(names: list[str]) -> None:
    state = AppState()
    engine = SquadEngine(state, tick_interval_sec=0.0001)

    with pytest.raises(InvalidParticipantCount):
        asyncio.run(engine.run("quick_hiit", names))

    assert [athlete.name for athlete in state.athletes] == [
        "Dad",
        "Mom",
        "Son",
        "Daughter",
        "Grandpa",
    ]
    assert state.session_in_progress is None


def test_engine_rejects_single_athlete_squad() -> None:
    engine = SquadEngine(AppState(), tick_interval_sec=0.0001)
    with pytest.raises(InvalidParticipantCount):
        asyncio.run(engine.run("quick_hiit", ["Dad"]))


def test_engine_runs_full_session(capsys: pytest.CaptureFixture[str]) -> None:
    state = AppState()
    engine = SquadEngine(state, tick_interval_sec=0.0001)
    summary = asyncio.run(engine.run("quick_hiit", ["Dad", "Mom"]))

    assert summary.completed
    assert state.current_screen == Screen.RESULTS
    assert state.athletes[0].total_minutes == 9
    out = capsys.readouterr().out
    assert "GO!" in out
    assert "REST" in out
    assert "SESSION COMPLETE - Quick HIIT" in out


def test_main_reports_unknown_workout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["bodytune", "--run", "yoga"])
    assert cli.main() == 2
    assert "Unknown workout" in capsys.readouterr().out
