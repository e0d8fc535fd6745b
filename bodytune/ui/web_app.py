"""NiceGUI TV web UI for BodyTune Squad."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nicegui import ui

from bodytune.core.state import MAX_SQUAD_SIZE, MIN_SQUAD_SIZE, AppState, Screen
from bodytune.ui.coaching import compute_coaching_signal, rank_badge
from bodytune.ui.controller import UIController
from bodytune.workout.errors import SquadError
from bodytune.workout.library import (
    ATHLETE_COLORS,
    ATHLETE_ICONS,
    exercise_preview,
    list_workouts,
)
from bodytune.workout.model import Athlete, Difficulty, Workout
from bodytune.workout.results import SessionSummary
from bodytune.workout.session import WorkoutSession

logger = logging.getLogger(__name__)

DIFFICULTY_COLORS: dict[Difficulty, str] = {
    Difficulty.BEGINNER: "#66cc66",
    Difficulty.INTERMEDIATE: "#f97316",
    Difficulty.ADVANCED: "#ef4444",
}


@dataclass
class WebState:
    countdown: int = 0
    paused: bool = False
    summary: SessionSummary | None = None
    squad_key: tuple[tuple[str, int, bool], ...] = ()


def _fmt_duration(total_seconds: int) -> str:
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def _athlete_stats(athlete: Athlete) -> str:
    return (
        f"Streak {athlete.streak} | {athlete.total_workouts} workouts | "
        f"{athlete.total_minutes} min"
    )


def run_web_ui(*, host: str = "127.0.0.1", port: int = 8088) -> int:
    controller = UIController(AppState())
    app_state = controller.state
    state = WebState()
    ui.add_head_html(
        """
        <style>
          :root {
            --bt-bg: #0d0d0d;
            --bt-card: #262626;
            --bt-primary: #3399ff;
            --bt-secondary: #66cc66;
          }
          body {
            background: var(--bt-bg);
            color: #ffffff;
            font-family: Arial, "Segoe UI", sans-serif;
          }
          .bt-card {
            background: var(--bt-card);
            border-radius: 24px;
            color: #ffffff;
          }
          .bt-selected {
            outline: 4px solid var(--bt-primary);
          }
          .bt-title {
            font-size: 3.5rem;
            font-weight: 900;
            letter-spacing: 0.04em;
          }
          .bt-timer {
            font-size: 9rem;
            font-weight: 900;
            line-height: 1;
          }
          .bt-muted {
            color: rgba(255, 255, 255, 0.6);
          }
        </style>
        """
    )

    # ------------------------------------------------------------------
    # Home
    # ------------------------------------------------------------------
    with ui.column().classes("w-full items-center gap-8 pt-16") as home_view:
        ui.icon("fitness_center").classes("text-8xl").style("color: var(--bt-primary)")
        ui.label("BODYTUNE").classes("bt-title")
        ui.label("Train together on the big screen").classes("text-2xl bt-muted")
        home_start_btn = ui.button("START SQUAD WORKOUT").props("size=xl rounded")
        roster_summary = ui.label("").classes("text-lg bt-muted")

    # ------------------------------------------------------------------
    # Athlete selection
    # ------------------------------------------------------------------
    with ui.column().classes("w-full gap-6 p-10") as athlete_view:
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("SELECT YOUR SQUAD").classes("text-4xl font-black")
            selection_count = ui.label("").classes("text-2xl bt-muted")
        athlete_grid = ui.grid(columns=4).classes("w-full gap-6")
        with ui.row().classes("w-full justify-between"):
            athlete_back_btn = ui.button("BACK").props("outline color=white size=lg")
            add_athlete_btn = ui.button("ADD ATHLETE").props("size=lg")
            continue_btn = ui.button("CONTINUE").props("size=lg")

    # ------------------------------------------------------------------
    # Workout selection
    # ------------------------------------------------------------------
    with ui.column().classes("w-full gap-6 p-10") as workout_view:
        ui.label("CHOOSE WORKOUT").classes("text-4xl font-black")
        workout_grid = ui.grid(columns=2).classes("w-full gap-6")
        with ui.row().classes("w-full justify-between"):
            workout_back_btn = ui.button("BACK").props("outline color=white size=lg")
            start_workout_btn = ui.button("START WORKOUT").props("size=lg color=positive")

    # ------------------------------------------------------------------
    # Countdown
    # ------------------------------------------------------------------
    with ui.column().classes("w-full items-center gap-6 pt-32") as countdown_view:
        countdown_workout_label = ui.label("").classes("text-3xl bt-muted")
        countdown_label = ui.label("3").classes("bt-timer")
        ui.label("GET READY").classes("text-3xl font-bold")
        ui.label("Your Squad").classes("text-2xl bt-muted")
        countdown_squad_row = ui.row().classes("gap-8")

    # ------------------------------------------------------------------
    # Active workout
    # ------------------------------------------------------------------
    with ui.column().classes("w-full gap-6 p-8") as active_view:
        with ui.row().classes("w-full items-center justify-between"):
            with ui.column().classes("gap-1"):
                active_workout_label = ui.label("").classes("text-2xl font-bold")
                round_label = ui.label("").classes("text-lg bt-muted")
            progress_bar = ui.linear_progress(value=0, show_value=False).classes("w-1/3")
            with ui.row().classes("gap-2"):
                pause_btn = ui.button("PAUSE").props("outline color=white")
                quit_btn = ui.button("QUIT").props("color=negative")

        with ui.column().classes("w-full items-center gap-4") as exercise_panel:
            exercise_icon = ui.icon("fitness_center").classes("text-8xl")
            exercise_name = ui.label("").classes("text-5xl font-black")
            exercise_timer = ui.label("").classes("bt-timer")
            motivation_label = ui.label("").classes("text-3xl font-bold")

        with ui.column().classes("w-full items-center gap-4") as rest_panel:
            ui.icon("favorite").classes("text-8xl").style("color: #f97316")
            ui.label("REST TIME").classes("text-5xl font-black")
            rest_timer = ui.label("").classes("bt-timer")
            ui.label("BREATHE").classes("text-2xl bt-muted")
            with ui.card().classes("bt-card p-6") as next_up_card:
                ui.label("NEXT UP").classes("text-lg bt-muted")
                with ui.row().classes("items-center gap-4"):
                    next_up_icon = ui.icon("fitness_center").classes("text-5xl")
                    next_up_name = ui.label("").classes("text-3xl font-bold")

        squad_row = ui.row().classes("w-full justify-center gap-6")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    with ui.column().classes("w-full items-center gap-6 p-10") as results_view:
        ui.icon("emoji_events").classes("text-8xl").style("color: var(--bt-secondary)")
        ui.label("SESSION COMPLETE").classes("bt-title")
        results_workout_label = ui.label("").classes("text-3xl bt-muted")
        results_stats_row = ui.row().classes("gap-6")
        ui.label("SQUAD PERFORMANCE").classes("text-4xl font-black")
        results_column = ui.column().classes("w-full gap-4")
        with ui.row().classes("gap-6"):
            results_home_btn = ui.button("HOME").props("outline color=white size=lg")
            results_again_btn = ui.button("NEW WORKOUT").props("size=lg")

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------
    with ui.dialog().props("persistent") as add_dialog, ui.card().classes("bt-card w-[640px] p-8"):
        ui.label("NEW ATHLETE").classes("text-3xl font-black")
        new_name_input = ui.input("Name").classes("w-full")
        new_icon_select = ui.select(list(ATHLETE_ICONS), value=ATHLETE_ICONS[0], label="Icon")
        new_color_select = ui.select(list(ATHLETE_COLORS), value=ATHLETE_COLORS[0], label="Color")
        with ui.row().classes("w-full justify-end gap-4"):
            add_cancel_btn = ui.button("CANCEL").props("outline")
            add_confirm_btn = ui.button("ADD ATHLETE")

    with ui.dialog().props("persistent") as pause_dialog, ui.card().classes("bt-card p-10 items-center"):
        ui.icon("pause_circle").classes("text-8xl")
        ui.label("PAUSED").classes("text-5xl font-black")
        with ui.row().classes("gap-6"):
            resume_btn = ui.button("RESUME").props("size=lg")
            pause_quit_btn = ui.button("QUIT").props("size=lg color=negative")

    with ui.dialog().props("persistent") as done_dialog, ui.card().classes("bt-card p-10 items-center"):
        ui.icon("emoji_events").classes("text-8xl").style("color: var(--bt-secondary)")
        ui.label("WORKOUT COMPLETE!").classes("text-5xl font-black")
        done_btn = ui.button("SEE RESULTS").props("size=lg color=positive")

    screens = {
        Screen.HOME: home_view,
        Screen.ATHLETE_SELECTION: athlete_view,
        Screen.WORKOUT_SELECTION: workout_view,
        Screen.COUNTDOWN: countdown_view,
        Screen.ACTIVE_WORKOUT: active_view,
        Screen.RESULTS: results_view,
    }

    def show_screen(screen: Screen) -> None:
        for key, view in screens.items():
            view.set_visibility(key == screen)
        if screen == Screen.ATHLETE_SELECTION:
            refresh_athletes()
        elif screen == Screen.WORKOUT_SELECTION:
            refresh_workouts()
        elif screen == Screen.RESULTS:
            refresh_results()
        refresh_ui()

    def refresh_athletes() -> None:
        athlete_grid.clear()
        with athlete_grid:
            for athlete in app_state.athletes:
                selected = athlete in app_state.selected_athletes
                classes = "bt-card cursor-pointer p-6 items-center"
                if selected:
                    classes += " bt-selected"
                with ui.card().classes(classes) as card:
                    ui.icon(athlete.icon).classes("text-6xl").style(f"color: {athlete.color}")
                    ui.label(athlete.name).classes("text-2xl font-bold")
                    ui.label(_athlete_stats(athlete)).classes("text-sm bt-muted")

                    def on_pick(picked: Athlete = athlete) -> None:
                        was_selected = picked in app_state.selected_athletes
                        if not app_state.toggle_athlete(picked) and not was_selected:
                            ui.notify(f"A squad has at most {MAX_SQUAD_SIZE} athletes")
                        refresh_athletes()
                        refresh_ui()

                    card.on("click", on_pick)

    def refresh_workouts() -> None:
        workout_grid.clear()
        with workout_grid:
            for workout in list_workouts():
                selected = app_state.selected_workout is not None and (
                    app_state.selected_workout.key == workout.key
                )
                classes = "bt-card cursor-pointer p-6"
                if selected:
                    classes += " bt-selected"
                with ui.card().classes(classes) as card:
                    with ui.row().classes("items-center gap-4"):
                        ui.icon(workout.icon).classes("text-5xl").style("color: var(--bt-primary)")
                        ui.label(workout.name).classes("text-3xl font-bold")
                    ui.label(workout.description).classes("text-lg bt-muted")
                    with ui.row().classes("gap-4"):
                        ui.label(workout.category.label).classes("text-base")
                        ui.label(workout.difficulty.label).classes("text-base").style(
                            f"color: {DIFFICULTY_COLORS[workout.difficulty]}"
                        )
                        ui.label(f"{workout.total_duration} min").classes("text-base")
                        ui.label(f"{workout.total_rounds} rounds").classes("text-base")
                        ui.label(f"{workout.calories} kcal").classes("text-base")
                    shown, hidden = exercise_preview(workout)
                    with ui.column().classes("w-full gap-1"):
                        ui.label("Exercises").classes("text-base font-bold")
                        for exercise in shown:
                            with ui.row().classes("w-full items-center gap-3"):
                                ui.icon(exercise.icon).style("color: var(--bt-secondary)")
                                ui.label(exercise.name).classes("text-base")
                                ui.label(f"{exercise.duration}s").classes("text-sm").style(
                                    "color: var(--bt-secondary)"
                                )
                        if hidden > 0:
                            ui.label(f"+ {hidden} more").classes("text-sm bt-muted")

                    def on_pick(picked: Workout = workout) -> None:
                        app_state.select_workout(picked)
                        refresh_workouts()
                        refresh_ui()

                    card.on("click", on_pick)

    def refresh_squad(session: WorkoutSession) -> None:
        key = tuple(
            (athlete_id, progress.completed_rounds, progress.is_active)
            for athlete_id, progress in session.athlete_progress.items()
        )
        if key == state.squad_key:
            return
        state.squad_key = key
        squad_row.clear()
        total = session.workout.total_rounds
        with squad_row:
            for athlete in session.athletes:
                progress = session.athlete_progress[athlete.id]
                color = athlete.color if progress.is_active else "#808080"
                with ui.card().classes("bt-card cursor-pointer p-4 items-center") as card:
                    ui.icon(athlete.icon).classes("text-5xl").style(f"color: {color}")
                    ui.label(athlete.name).classes("text-xl font-bold")
                    with ui.row().classes("gap-1"):
                        for index in range(total):
                            dot = "circle" if index < progress.completed_rounds else "radio_button_unchecked"
                            ui.icon(dot).style(f"color: {color}")
                    ui.label(f"{progress.completed_rounds} / {total}").classes("text-base bt-muted")

                    def on_toggle(picked: Athlete = athlete) -> None:
                        current = session.athlete_progress[picked.id].is_active
                        session.set_athlete_active(picked.id, not current)
                        refresh_squad(session)

                    card.on("click", on_toggle)

    def refresh_active(session: WorkoutSession) -> None:
        workout = session.workout
        active_workout_label.text = workout.name
        shown_round = min(session.current_round, workout.total_rounds)
        round_label.text = (
            f"Round {shown_round} / {workout.total_rounds} | "
            f"Elapsed {_fmt_duration(session.total_elapsed_time)}"
        )
        progress_bar.set_value(session.progress_percentage)
        pause_btn.text = "RESUME" if state.paused else "PAUSE"
        refresh_squad(session)
        if session.is_completed:
            exercise_panel.set_visibility(False)
            rest_panel.set_visibility(False)
            return

        signal = compute_coaching_signal(phase=session.phase, time_remaining=session.time_remaining)
        exercise_panel.set_visibility(not session.is_resting)
        rest_panel.set_visibility(session.is_resting)
        if session.is_resting:
            rest_timer.text = str(session.time_remaining)
            upcoming = session.next_exercise
            next_up_card.set_visibility(upcoming is not None)
            if upcoming is not None:
                next_up_icon.props(f"name={upcoming.icon}")
                next_up_name.text = upcoming.name
        else:
            exercise = session.current_exercise
            exercise_icon.props(f"name={exercise.icon}")
            exercise_name.text = exercise.name.upper()
            exercise_timer.text = str(session.time_remaining)
            motivation_label.text = signal.text
            motivation_label.style(f"color: {signal.color}")

    def refresh_results() -> None:
        summary = state.summary
        results_stats_row.clear()
        results_column.clear()
        if summary is None:
            results_workout_label.text = ""
            return
        results_workout_label.text = summary.workout_name
        with results_stats_row:
            for value, unit in (
                (summary.duration_min, "min"),
                (summary.total_rounds, "rounds"),
                (summary.total_exercises, "exercises"),
                (summary.calories, "kcal"),
            ):
                with ui.card().classes("bt-card p-6 items-center"):
                    ui.label(str(value)).classes("text-5xl font-black")
                    ui.label(unit).classes("text-lg bt-muted")
        with results_column:
            for result in summary.athletes:
                with ui.card().classes("bt-card w-full p-6"):
                    with ui.row().classes("w-full items-center gap-8"):
                        ui.icon(rank_badge(result.rank)).classes("text-6xl")
                        ui.icon(result.athlete.icon).classes("text-5xl").style(
                            f"color: {result.athlete.color}"
                        )
                        with ui.column().classes("gap-1"):
                            ui.label(result.athlete.name).classes("text-3xl font-bold")
                            ui.label(result.performance_text).classes("text-lg bt-muted")
                        ui.label(f"{result.completed_rounds}/{result.total_rounds} rounds")
                        ui.label(f"{result.completion_pct}%").classes("text-3xl font-black")
                        ui.label(f"Streak {result.athlete.streak}").classes("text-lg bt-muted")

    def refresh_ui() -> None:
        roster_summary.text = f"{len(app_state.athletes)} athletes in the roster"
        count = len(app_state.selected_athletes)
        selection_count.text = f"{count} selected ({MIN_SQUAD_SIZE}-{MAX_SQUAD_SIZE})"
        continue_btn.set_enabled(app_state.can_continue)
        start_workout_btn.set_enabled(app_state.selected_workout is not None)
        countdown_label.text = str(state.countdown) if state.countdown > 0 else "GO!"
        session = app_state.session_in_progress
        if session is not None:
            countdown_workout_label.text = session.workout.name
            if app_state.current_screen == Screen.ACTIVE_WORKOUT:
                refresh_active(session)

    def on_tick(_session: WorkoutSession) -> None:
        refresh_ui()

    def on_finish(completed: bool) -> None:
        state.paused = False
        if completed:
            done_dialog.open()
        refresh_ui()

    def on_count(remaining: int) -> None:
        state.countdown = remaining
        refresh_ui()

    def refresh_countdown_squad() -> None:
        countdown_squad_row.clear()
        session = app_state.session_in_progress
        if session is None:
            return
        with countdown_squad_row:
            for athlete in session.athletes:
                with ui.column().classes("items-center gap-2"):
                    ui.icon(athlete.icon).classes("text-6xl").style(f"color: {athlete.color}")
                    ui.label(athlete.name).classes("text-xl")

    async def on_start_workout() -> None:
        workout = app_state.selected_workout
        if workout is None:
            ui.notify("Pick a workout first", color="negative")
            return
        try:
            controller.start_workout(list(app_state.selected_athletes), workout)
        except SquadError as exc:
            ui.notify(str(exc), color="negative")
            return
        state.squad_key = ()
        state.paused = False
        state.countdown = 0
        refresh_countdown_squad()
        if await controller.run_countdown(on_count):
            await controller.begin_workout(on_tick=on_tick, on_finish=on_finish)

    def on_pause() -> None:
        state.paused = controller.toggle_pause()
        if state.paused:
            pause_dialog.open()
        else:
            pause_dialog.close()
        refresh_ui()

    async def on_quit() -> None:
        pause_dialog.close()
        state.paused = False
        await controller.quit_workout()

    def on_done() -> None:
        done_dialog.close()
        state.summary = controller.finish_workout()
        refresh_results()

    async def on_home() -> None:
        state.summary = None
        await controller.reset_to_home()

    async def on_new_workout() -> None:
        state.summary = None
        await controller.new_workout_for_squad()

    def on_open_add_dialog() -> None:
        new_name_input.value = ""
        add_dialog.open()

    def on_add_athlete() -> None:
        try:
            app_state.add_new_athlete(
                str(new_name_input.value or ""),
                icon=str(new_icon_select.value or ATHLETE_ICONS[0]),
                color=str(new_color_select.value or ATHLETE_COLORS[0]),
            )
        except SquadError as exc:
            ui.notify(str(exc), color="negative")
            return
        add_dialog.close()
        refresh_athletes()
        refresh_ui()

    home_start_btn.on_click(lambda: app_state.navigate(Screen.ATHLETE_SELECTION))
    athlete_back_btn.on_click(lambda: app_state.navigate(Screen.HOME))
    continue_btn.on_click(lambda: app_state.navigate(Screen.WORKOUT_SELECTION))
    add_athlete_btn.on_click(on_open_add_dialog)
    add_cancel_btn.on_click(add_dialog.close)
    add_confirm_btn.on_click(on_add_athlete)
    workout_back_btn.on_click(lambda: app_state.navigate(Screen.ATHLETE_SELECTION))
    start_workout_btn.on_click(on_start_workout)
    pause_btn.on_click(on_pause)
    resume_btn.on_click(on_pause)
    quit_btn.on_click(on_quit)
    pause_quit_btn.on_click(on_quit)
    done_btn.on_click(on_done)
    results_home_btn.on_click(on_home)
    results_again_btn.on_click(on_new_workout)

    app_state.subscribe(show_screen)
    show_screen(app_state.current_screen)
    ui.timer(0.5, refresh_ui)
    logger.info("Starting web UI on %s:%d", host, port)
    ui.run(host=host, port=port, reload=False, title="BodyTune Squad")
    return 0
