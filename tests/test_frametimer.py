import pytest

from slipfloor.frametimer import FrameTimer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_fresh_timer_state():
    timer = FrameTimer(60, clock=FakeClock())
    assert timer.is_update_frame is False
    assert timer.frame_rate == 0
    assert timer.elapsed_time == 1.0


def test_fixed_short_frame_does_not_update():
    clock = FakeClock()
    timer = FrameTimer(100, refresh_rate=100, clock=clock)
    clock.now = 4_000
    timer.update()
    assert timer.is_update_frame is False


def test_fixed_time_accumulates_until_target():
    clock = FakeClock()
    timer = FrameTimer(100, refresh_rate=100, clock=clock)
    clock.now = 6_000
    timer.update()
    assert timer.is_update_frame is False
    clock.now = 12_000
    timer.update()
    assert timer.is_update_frame is True
    assert timer.elapsed_time == pytest.approx(0.01)


def test_fixed_leftover_time_is_carried_over():
    clock = FakeClock()
    timer = FrameTimer(100, refresh_rate=100, clock=clock)
    clock.now = 15_000
    timer.update()
    assert timer.is_update_frame is True
    clock.now = 20_000
    timer.update()
    assert timer.is_update_frame is True


def test_outlier_delta_is_clamped_to_target():
    clock = FakeClock()
    timer = FrameTimer(100, refresh_rate=100, clock=clock)
    clock.now = 500_000
    timer.update()
    assert timer.is_update_frame is True
    # The clamp left nothing over, so a short frame does not update.
    clock.now = 501_000
    timer.update()
    assert timer.is_update_frame is False


def test_variable_timer_always_updates_with_real_delta():
    clock = FakeClock()
    timer = FrameTimer(refresh_rate=60, clock=clock)
    clock.now = 5_000
    timer.update()
    assert timer.is_update_frame is True
    assert timer.elapsed_time == 5_000 / 1_000_000


def test_fps_is_capped_by_refresh_rate():
    fast_clock = FakeClock()
    capped_clock = FakeClock()
    fast = FrameTimer(240, refresh_rate=60, clock=fast_clock)
    capped = FrameTimer(60, refresh_rate=60, clock=capped_clock)
    fast_clock.now = capped_clock.now = 20_000
    fast.update()
    capped.update()
    assert fast.is_update_frame == capped.is_update_frame
    assert fast.elapsed_time == capped.elapsed_time


def test_frame_rate_counts_frames_over_one_second():
    clock = FakeClock()
    timer = FrameTimer(refresh_rate=60, clock=clock)
    updates = 20
    for step in range(1, updates + 1):
        clock.now = step * 50_000
        timer.update()
    assert timer.frame_rate == updates


def test_frame_rate_unchanged_before_one_second():
    clock = FakeClock()
    timer = FrameTimer(refresh_rate=60, clock=clock)
    for step in range(1, 10):
        clock.now = step * 50_000
        timer.update()
    assert timer.frame_rate == 0


def test_reset_clears_measurements():
    clock = FakeClock()
    timer = FrameTimer(refresh_rate=60, clock=clock)
    for step in range(1, 21):
        clock.now = step * 50_000
        timer.update()
    timer.reset()
    assert timer.frame_rate == 0
    assert timer.is_update_frame is False
    assert timer.elapsed_time == 1.0


@pytest.mark.parametrize("fps", [0, -5])
def test_non_positive_fps_rejected(fps):
    with pytest.raises(ValueError):
        FrameTimer(fps, clock=FakeClock())


def test_non_positive_refresh_rate_rejected():
    with pytest.raises(ValueError):
        FrameTimer(refresh_rate=0, clock=FakeClock())