from __future__ import annotations

from bodytune.ui.coaching import compute_coaching_signal, motivation_text, rank_badge


def test_motivation_text_bands() -> None:
    assert motivation_text(45) == "YOU GOT THIS!"
    assert motivation_text(30) == "PUSH HARDER!"
    assert motivation_text(20) == "PUSH HARDER!"
    assert motivation_text(19) == "KEEP GOING!"
    assert motivation_text(10) == "KEEP GOING!"
    assert motivation_text(9) == "ALMOST THERE!"
    assert motivation_text(5) == "ALMOST THERE!"
    assert motivation_text(4) == "FINISH STRONG!"
    assert motivation_text(1) == "FINISH STRONG!"
    assert motivation_text(0) == "YOU GOT THIS!"


def test_compute_coaching_signal_by_phase() -> None:
    work = compute_coaching_signal(phase="exercise", time_remaining=12)
    assert work.key == "work"
    assert work.text == "KEEP GOING!"

    rest = compute_coaching_signal(phase="rest", time_remaining=12)
    assert rest.key == "rest"
    assert rest.text == "BREATHE"

    done = compute_coaching_signal(phase="completed", time_remaining=0)
    assert done.key == "done"


def test_rank_badge() -> None:
    assert rank_badge(1) == "looks_one"
    assert rank_badge(3) == "looks_3"
    assert rank_badge(4) == "star"
