"""Search for elements or their position."""

from .traversal import Traversal, operation, pack
from .utils import MISSING


class Search:
    @operation
    def detect(self, func=None, ifnone=None):
        """Return the first element for which `func` is truthy.

        Args:
            func (Callable[[Any], Any]): the predicate.
            ifnone (Optional[Callable[[], Any]]): called to produce the
                result when no element matches (default returns None).

        Example:

            >>> wrap(range(10)).detect(lambda x: x * x > 10)
            4
            >>> wrap(range(3)).detect(lambda x: x > 5, ifnone=lambda: -1)
            -1
        """
        if func is None:
            return self.to_enum("detect", ifnone=ifnone)

        walk = Traversal(self)

        def visit(*values):
            value = pack(values)
            if func(value):
                walk.stop(value)

        if walk.run(visit).halted:
            return walk.value

        return ifnone() if ifnone is not None else None

    find = detect

    @operation
    def find_index(self, value=MISSING, *, func=None):
        """Return the position of the first matching element.

        Elements match `func` when given, otherwise when they are equal to
        `value`. Returns None when nothing matches.
        """
        if func is None and value is MISSING:
            return self.to_enum("find_index")

        if func is not None:
            def test(element):
                return func(element)
        else:
            def test(element):
                return element == value

        walk = Traversal(self)
        idx = 0

        def visit(*values):
            nonlocal idx
            if test(pack(values)):
                walk.stop(idx)
            idx += 1

        return walk.run(visit).value

    def include(self, obj):
        """Return wether some element is equal to `obj`."""
        walk = Traversal(self)

        def visit(*values):
            if pack(values) == obj:
                walk.stop(True)

        return walk.run(visit).halted

    member = include

    def __contains__(self, obj):
        return self.include(obj)
