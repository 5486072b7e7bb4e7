import pytest

from latren.clock import MAX_DELTA_TIME, GameClock


def test_delta_time_is_elapsed_time():
    clock = GameClock(fixed_update_rate=4)
    clock.start(10.0)
    assert clock.advance(10.125)
    assert clock.delta_time() == 10.125 - 10.0


def test_delta_time_is_capped():
    clock = GameClock()
    clock.start(0.0)
    clock.advance(5.0)
    assert clock.delta_time() == MAX_DELTA_TIME
    assert MAX_DELTA_TIME == 0.5


def test_fixed_delta_time():
    clock = GameClock(fixed_update_rate=4)
    assert clock.fixed_delta_time() == pytest.approx(1 / 4)


def test_fixed_update_after_interval():
    clock = GameClock(fixed_update_rate=4)
    clock.start(0.0)
    clock.advance(0.125)
    assert not clock.is_fixed_update()
    clock.advance(0.375)
    assert clock.is_fixed_update()
    clock.advance(0.5)
    assert not clock.is_fixed_update()


def test_freeze_zeroes_one_frame():
    clock = GameClock()
    clock.start(0.0)
    clock.freeze_delta_time()
    clock.advance(0.25)
    assert clock.delta_time() == 0.0
    clock.advance(0.375)
    assert clock.delta_time() == 0.375 - 0.25


def test_fps_limit_skips_frames():
    clock = GameClock(limit_fps=4)
    clock.start(0.0)
    assert clock.advance(0.125) is False
    assert clock.delta_time() == 0.0
    assert clock.advance(0.25) is True
    assert clock.delta_time() == 0.25


def test_invalid_settings():
    with pytest.raises(ValueError):
        GameClock(fixed_update_rate=0)
    with pytest.raises(ValueError):
        GameClock(limit_fps=-1)