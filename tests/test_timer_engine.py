import pytest

from app.services.timer import PomodoroTimer
from app.services.timer.timer_engine import interval_progress


def run_ticks(timer: PomodoroTimer, count: int):
    for _ in range(count):
        timer.tick()


def test_initial_state_is_idle_work():
    timer = PomodoroTimer(work_minutes=25, break_minutes=5)
    state = timer.state

    assert (state.minutes, state.seconds) == (25, 0)
    assert state.is_active is False
    assert state.is_break is False
    assert state.cycles == 0
    assert timer.progress == 0


def test_toggle_flips_active_and_idle_consumes_no_time():
    timer = PomodoroTimer(work_minutes=25, break_minutes=5)

    run_ticks(timer, 10)
    assert timer.state.remaining_seconds == 25 * 60

    assert timer.toggle() is True
    timer.tick()
    assert timer.toggle() is False
    run_ticks(timer, 10)

    assert timer.state.remaining_seconds == 25 * 60 - 1


def test_full_work_interval_arms_break_and_stops():
    timer = PomodoroTimer(work_minutes=25, break_minutes=5)
    timer.toggle()

    boundaries = [timer.tick() for _ in range(1500)]

    state = timer.state
    assert (state.minutes, state.seconds) == (5, 0)
    assert state.is_active is False
    assert state.is_break is True
    assert state.cycles == 1
    assert boundaries.count(True) == 1
    assert boundaries[-1] is True


def test_completed_break_does_not_count_a_cycle():
    timer = PomodoroTimer(work_minutes=1, break_minutes=1)
    timer.start()
    run_ticks(timer, 60)
    assert timer.cycles == 1

    timer.start()
    run_ticks(timer, 60)

    state = timer.state
    assert state.is_break is False
    assert state.cycles == 1
    assert state.is_active is False
    assert (state.minutes, state.seconds) == (1, 0)


def test_remaining_is_monotonic_and_never_negative_within_interval():
    timer = PomodoroTimer(work_minutes=2, break_minutes=1)
    timer.start()
    previous = timer.state.remaining_seconds

    while timer.is_active:
        timer.tick()
        remaining = timer.state.remaining_seconds
        assert remaining >= 0
        if timer.is_active:
            assert remaining == previous - 1
        previous = remaining


def test_reset_restores_current_interval_and_keeps_cycles():
    timer = PomodoroTimer(work_minutes=1, break_minutes=2)
    timer.start()
    run_ticks(timer, 60)
    timer.start()
    run_ticks(timer, 30)

    timer.reset()

    state = timer.state
    assert state.is_break is True
    assert (state.minutes, state.seconds) == (2, 0)
    assert state.is_active is False
    assert state.cycles == 1


def test_reset_is_idempotent_at_full_duration():
    timer = PomodoroTimer(work_minutes=25, break_minutes=5)
    before = timer.state

    timer.reset()
    timer.reset()

    assert timer.state == before


@pytest.mark.parametrize("work_minutes", [1, 5, 25, 50])
def test_progress_bounds(work_minutes):
    timer = PomodoroTimer(work_minutes=work_minutes, break_minutes=5)
    assert timer.progress == 0

    timer.start()
    run_ticks(timer, work_minutes * 60 - 1)
    assert timer.state.remaining_seconds == 1
    assert timer.progress == pytest.approx(100 - 100 / (work_minutes * 60))


def test_snapshot_display_and_progress():
    timer = PomodoroTimer(work_minutes=25, break_minutes=5)
    timer.start()
    run_ticks(timer, 90)

    snapshot = timer.snapshot()

    assert snapshot.display == "23:30"
    assert snapshot.remaining == 23 * 60 + 30
    assert snapshot.total_seconds == 1500
    assert snapshot.progress == pytest.approx(6.0)
    assert snapshot.is_active is True


def test_rejects_non_positive_intervals():
    with pytest.raises(ValueError):
        PomodoroTimer(work_minutes=0, break_minutes=5)


@pytest.mark.parametrize("total", [60, 300, 1500, 3600])
def test_interval_progress_endpoints(total):
    assert interval_progress(total, total) == 0
    assert interval_progress(total, 0) == 100
