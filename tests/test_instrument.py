import pytest
import time
from eachtools import Enumerable, wrap
from eachtools.instrument import debug, monitor_throughput


class Slow(Enumerable):
    def __init__(self, data, delay):
        self.data = data
        self.delay = delay

    def each(self, func):
        for x in self.data:
            time.sleep(self.delay)
            func(x)
        return self


def test_debug():
    arr = list(range(100))

    def do(i, v):
        assert arr[i] == v
        do.i += 1

    do.i = 0

    debugged_arr = debug(arr, do)

    assert debugged_arr.to_a() == arr
    assert do.i == 100
    assert debugged_arr.map(lambda x: x) == arr
    assert do.i == 200

    do.i = 0
    debugged_arr = debug(arr, do, max_calls=3)

    assert debugged_arr.to_a() == arr
    assert do.i == 3

    do.i = 0
    debugged_arr = debug(Slow(arr, 0.01), do, max_rate=10)

    assert debugged_arr.to_a() == arr
    assert 8 <= do.i <= 12

    seen = []
    debugged = debug(wrap({'a': 1}), lambda i, v: seen.append((i, v)))
    assert debugged.to_a() == [('a', 1)]
    assert seen == [(0, ('a', 1))]


def test_throughput():
    arr = list(range(50))
    monitored_arr = monitor_throughput(Slow(arr, 0.01))
    x = monitored_arr.to_a()

    assert x == arr
    assert monitored_arr.throughput() - 100 < 1

    monitored_arr.reset()

    with pytest.raises(RuntimeError):
        monitored_arr.read_delay()
    with pytest.raises(RuntimeError):
        monitored_arr.throughput()

    # time spent in callbacks is not accounted for
    monitored_arr = monitor_throughput(Slow(arr, 0.02))
    monitored_arr.each_slice(10, lambda s: time.sleep(0.05))

    assert monitored_arr.read_delay() - 0.02 < 0.002
    assert monitored_arr.read_delay() >= 0.02
