import time

from cairofuzz.statistics import FuzzerStats


def test_defaults():
    stats = FuzzerStats()
    assert stats.total_executions == 0
    assert stats.crashes == 0


def test_uptime_grows_from_start():
    stats = FuzzerStats(start_time=time.monotonic() - 10.0)
    assert stats.uptime() >= 10.0


def test_future_start_gives_zero():
    stats = FuzzerStats(total_executions=50, start_time=time.monotonic() + 1000.0)
    assert stats.uptime() == 0.0
    assert stats.execs_per_second() == 0.0


def test_execution_rate_bounded_by_elapsed_time():
    stats = FuzzerStats(total_executions=100, start_time=time.monotonic() - 10.0)
    rate = stats.execs_per_second()
    assert 0.0 < rate <= 10.0