"""Visits over groups of elements, indices and repetitions."""

from collections import deque

from .traversal import operation, pack, walk
from .utils import as_window, get_logger, is_immutable


logger = get_logger(__name__)


class Windowing:
    @operation
    def each_cons(self, size, func=None):
        """Call `func` on each window of `size` consecutive elements.

        Windows overlap and always hold exactly `size` elements, a source
        shorter than `size` produces no window.

        Example:

            >>> wrap(range(5)).each_cons(3).to_a()
            [[0, 1, 2], [1, 2, 3], [2, 3, 4]]
        """
        size = as_window(size, "invalid size")

        if func is None:
            return self.to_enum("each_cons", size)

        window = deque(maxlen=size)

        def visit(*values):
            window.append(pack(values))
            if len(window) == size:
                func(list(window))

        walk(self, visit)

    @operation
    def each_slice(self, size, func=None):
        """Call `func` on consecutive, non-overlapping slices of elements.

        All slices hold `size` elements except the last one which may be
        shorter.

        Example:

            >>> wrap(range(5)).each_slice(2).to_a()
            [[0, 1], [2, 3], [4]]
        """
        size = as_window(size, "invalid slice size")

        if func is None:
            return self.to_enum("each_slice", size)

        chunk = []

        def visit(*values):
            nonlocal chunk
            chunk.append(pack(values))
            if len(chunk) == size:
                full, chunk = chunk, []
                func(full)

        walk(self, visit)
        if chunk:
            func(chunk)

    @operation
    def each_with_index(self, func=None):
        """Call :code:`func(element, index)` for each element."""
        if func is None:
            return self.to_enum("each_with_index")

        i = 0

        def visit(*values):
            nonlocal i
            idx = i
            i += 1
            func(pack(values), idx)

        walk(self, visit)
        return self

    @operation
    def each_with_object(self, obj, func=None):
        """Call :code:`func(element, obj)` for each element and return `obj`.

        `obj` is typically a container which `func` fills.

        Example:

            >>> wrap('abc').each_with_object({}, lambda c, d: d.update({c: 1}))
            {'a': 1, 'b': 1, 'c': 1}
        """
        if func is None:
            return self.to_enum("each_with_object", obj)

        if is_immutable(obj):
            logger.warning(
                "each_with_object received an immutable %s, it will be "
                "returned unchanged", obj.__class__.__name__)

        walk(self, lambda *values: func(pack(values), obj))
        return obj

    @operation
    def reverse_each(self, func=None):
        """Call `func` on the elements in reverse order.

        The source is read entirely first and must therefore be finite.
        """
        if func is None:
            return self.to_enum("reverse_each")

        for value in reversed(self.to_a()):
            func(value)

        return self

    @operation
    def cycle(self, n=None, func=None):
        """Call `func` on the elements, repeatedly.

        Args:
            n (Optional[int]): number of passes, None to repeat forever in
                which case `func` must raise :class:`eachtools.Break`
                to stop.
            func (Callable): called with the values of each visit.

        The source is traversed once and its elements are replayed
        afterwards. Nothing is repeated if `n` is not positive or if the
        source is empty.
        """
        if func is None:
            return self.to_enum("cycle", n)

        if n is not None:
            n = int(n)
            if n <= 0:
                return None
        else:
            logger.debug("cycling over %s without limit", self)

        cache = []

        def visit(*values):
            cache.append(values)
            func(*values)

        walk(self, visit)
        if not cache:
            return None

        while n is None or n > 1:
            for values in cache:
                func(*values)
            if n is not None:
                n -= 1

        return None
