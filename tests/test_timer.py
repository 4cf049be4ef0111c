import time

from gate_aco.timer import Timer, TimerType


def test_elapsed_grows_and_restarts():
    timer = Timer()
    time.sleep(0.01)
    first = timer.elapsed()
    assert first >= 0.01
    assert timer.elapsed(TimerType.VIRTUAL) >= 0.0
    timer.start()
    assert timer.elapsed() < first
