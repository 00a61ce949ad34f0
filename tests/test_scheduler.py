import pytest

from diffbot_sim.scheduler import RateScheduler


def test_first_tick_is_active_then_waits_a_full_period():
    sched = RateScheduler()
    flags = [sched.tick() for _ in range(sched.period + 1)]
    assert flags[0] is True
    assert not any(flags[1 : sched.period])
    assert flags[sched.period] is True


def test_active_count_over_many_ticks():
    sched = RateScheduler(period=10)
    flags = [sched.tick() for _ in range(30)]
    assert sum(flags) == 3


def test_period_one_is_always_active():
    sched = RateScheduler(period=1)
    assert all(sched.tick() for _ in range(5))


def test_counter_stays_within_range():
    sched = RateScheduler(period=4)
    seen = set()
    for _ in range(20):
        sched.tick()
        seen.add(sched.counter)
    assert seen == {0, 1, 2, 3}


def test_reset_restores_active_state():
    sched = RateScheduler()
    sched.tick()
    sched.tick()
    assert sched.active is False
    sched.reset()
    assert sched.counter == 0
    assert sched.active is True


@pytest.mark.parametrize("period", [0, -3, 257])
def test_invalid_period_rejected(period):
    with pytest.raises(ValueError):
        RateScheduler(period=period)


def test_invalid_counter_rejected():
    with pytest.raises(ValueError):
        RateScheduler(period=5, counter=5)