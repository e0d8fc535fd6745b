"""Command-line entrypoint for BodyTune Squad."""

from __future__ import annotations

import argparse
import asyncio

from bodytune.core.engine import SquadEngine
from bodytune.core.logging_config import setup_logging
from bodytune.workout.errors import SquadError
from bodytune.workout.library import list_workouts
from bodytune.workout.runner import TICK_INTERVAL_SEC


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BodyTune Squad workouts")
    parser.add_argument(
        "--list-workouts",
        action="store_true",
        help="Print the built-in workouts",
    )
    parser.add_argument(
        "--run",
        metavar="WORKOUT",
        default=None,
        help="Run a built-in workout in the terminal (see --list-workouts)",
    )
    parser.add_argument(
        "--athletes",
        default="Dad,Mom",
        help="Comma-separated squad for --run (2-5 names; unknown names are added)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Clock speed multiplier for --run (e.g. 10 runs ten times faster)",
    )
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch the TV web UI (NiceGUI)",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for --ui-web",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def run_list_workouts() -> int:
    for workout in list_workouts():
        print(
            f"{workout.key:<14} {workout.name:<14} {workout.category.label:<9} "
            f"{workout.difficulty.label:<13} {workout.total_rounds} rounds "
            f"~{workout.total_duration:>2} min {workout.calories} kcal"
        )
    return 0


async def run_session(workout_key: str, athlete_names: list[str], speed: float) -> int:
    engine = SquadEngine(tick_interval_sec=TICK_INTERVAL_SEC / max(0.01, speed))
    try:
        await engine.run(workout_key, athlete_names)
    except asyncio.CancelledError:
        await engine.stop()
        raise
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.log_level)

    if args.ui_web:
        from bodytune.ui.web_app import run_web_ui

        return run_web_ui(host=args.web_host, port=args.web_port)

    if args.list_workouts:
        return run_list_workouts()

    if args.run is None:
        parser.print_help()
        return 1

    names = [name for name in args.athletes.split(",") if name.strip()]
    try:
        return asyncio.run(run_session(args.run, names, args.speed))
    except (SquadError, ValueError) as exc:
        print(f"Error: {exc}")
        return 2
    except KeyboardInterrupt:
        print("Workout stopped")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
