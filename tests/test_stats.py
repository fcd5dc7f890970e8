from engine import Statistics, StatsSnapshot


def test_fresh_statistics_are_zero(clock):
    stats = Statistics(clock)

    assert stats.snapshot() == StatsSnapshot(0, 0, 0.0)


def test_counters_increment(clock):
    stats = Statistics(clock)
    stats.record_comparison()
    stats.record_comparison()
    stats.record_swap()

    snap = stats.snapshot()
    assert (snap.comparisons, snap.swaps) == (2, 1)


def test_elapsed_ticks_while_running(clock):
    stats = Statistics(clock)
    stats.reset(start=True)
    clock.advance(0.25)

    assert stats.elapsed_ms() == 250.0
    clock.advance(0.25)
    assert stats.elapsed_ms() == 500.0


def test_finish_freezes_elapsed(clock):
    stats = Statistics(clock)
    stats.reset(start=True)
    clock.advance(1.5)
    stats.finish()
    clock.advance(10)

    assert stats.elapsed_ms() == 1500.0


def test_finish_twice_keeps_first_stamp(clock):
    stats = Statistics(clock)
    stats.reset(start=True)
    clock.advance(1)
    stats.finish()
    clock.advance(1)
    stats.finish()

    assert stats.elapsed_ms() == 1000.0


def test_reset_clears_everything(clock):
    stats = Statistics(clock)
    stats.reset(start=True)
    stats.record_swap()
    clock.advance(2)
    stats.finish()

    stats.reset()
    assert stats.snapshot() == StatsSnapshot(0, 0, 0.0)
    assert stats.started_at is None and stats.finished_at is None
