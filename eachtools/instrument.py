"""Debugging tools."""

from time import monotonic, perf_counter

from .enumerable import Enumerable
from .traversal import pack, walk


class Debug(Enumerable):
    def __init__(self, source, func, max_calls, max_rate):
        self.source = source
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.last_call = None
        self.func = func

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None and self.last_call is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def each(self, func):
        i = 0

        def visit(*values):
            nonlocal i
            if not self.silence():
                self.func(i, pack(values))
                self.last_call = monotonic()
                self.n_calls += 1
            i += 1
            return func(*values)

        walk(self.source, visit)
        return self


def debug(source, func, max_calls=None, max_rate=None):
    """Wrap a source to trigger a function on each visited element.

    Args:
        source (Traversable):
            Source to watch.
        func (Callable):
            A function to call whenever an element is visited, must take
            the index of the element in the traversal and its value.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Enumerable): The wrapped source.

    Example:

        .. testsetup::

           from eachtools.instrument import debug

        >>> watchthis = debug([1, 2, 3, 4, 5], lambda i, v: print(v))
        >>> watchthis.include(2)
        1
        2
        True
    """
    return Debug(source, func, max_calls, max_rate)


class ThroughputMonitor(Enumerable):
    def __init__(self, source):
        self.source = source
        self.n_calls = 0
        self.time_spent = 0

    def reset(self):
        """Reset perf counter."""
        self.n_calls = 0
        self.time_spent = 0

    def throughput(self):
        """Returns average measured throughput."""
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure throughput before any element was visited")

        return self.n_calls / self.time_spent

    def read_delay(self):
        """Return average measured time spent producing elements."""
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure read delay before any element was visited")

        return self.time_spent / self.n_calls

    def each(self, func):
        t_start = perf_counter()

        def visit(*values):
            nonlocal t_start
            t_stop = perf_counter()
            self.time_spent += t_stop - t_start
            self.n_calls += 1

            try:
                return func(*values)
            finally:
                t_start = perf_counter()

        walk(self.source, visit)
        return self


def monitor_throughput(source):
    """Wrap a source in an object with three additional methods:

    * :code:`read_delay()` the average time it takes to produce an element.
    * :code:`throughput()` the invert of the above.
    * :code:`reset()` resets the accumulated statistics.

    Time spent in the callbacks of operations is not counted.
    """
    return ThroughputMonitor(source)
