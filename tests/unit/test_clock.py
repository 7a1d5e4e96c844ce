import time

from timer_publisher.infrastructure.clock import ManualClock, SystemClock


def test_system_clock_reads_epoch_seconds():
    before = time.time()
    value = SystemClock().now()
    assert before <= value <= time.time()


def test_manual_clock_without_step_is_frozen():
    clock = ManualClock(42.0)
    assert clock.now() == clock.now() == 42.0
    assert clock.reads == 2


def test_manual_clock_steps_after_each_read():
    clock = ManualClock(start=10.0, step=0.5)
    assert [clock.now() for _ in range(3)] == [10.0, 10.5, 11.0]


def test_manual_clock_advance_jumps_ahead():
    clock = ManualClock(start=10.0)
    clock.advance(2.5)
    assert clock.now() == 12.5
