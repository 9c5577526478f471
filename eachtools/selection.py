"""Operations that keep a subset of the elements, in order."""

from .matching import pattern_matcher
from .traversal import Traversal, operation, pack, walk
from .utils import as_size


class Selection:
    @operation
    def select(self, func=None):
        """Return the elements for which `func` is truthy."""
        if func is None:
            return self.to_enum("select")

        result = []

        def visit(*values):
            value = pack(values)
            if func(value):
                result.append(value)

        walk(self, visit)
        return result

    find_all = select
    filter = select

    @operation
    def reject(self, func=None):
        """Return the elements for which `func` is falsy."""
        if func is None:
            return self.to_enum("reject")

        result = []

        def visit(*values):
            value = pack(values)
            if not func(value):
                result.append(value)

        walk(self, visit)
        return result

    @operation
    def partition(self, func=None):
        """Split elements in two lists: :code:`[selected, rejected]`.

        Example:

            >>> wrap([1, 2, 3, 4]).partition(lambda x: x % 2 == 0)
            [[2, 4], [1, 3]]
        """
        if func is None:
            return self.to_enum("partition")

        left = []
        right = []

        def visit(*values):
            value = pack(values)
            if func(value):
                left.append(value)
            else:
                right.append(value)

        walk(self, visit)
        return [left, right]

    @operation
    def grep(self, pattern, func=None):
        """Return the elements matching `pattern`, mapped by `func` if given.

        See :func:`eachtools.matching.case_eq` for the matching rules.

        Example:

            >>> wrap([1, 'a', 2.5, 'b']).grep(str, str.upper)
            ['A', 'B']
        """
        return self._grep(pattern_matcher(pattern), func)

    @operation
    def grep_v(self, pattern, func=None):
        """Inverse of :meth:`grep`: keep the elements not matching `pattern`."""
        test = pattern_matcher(pattern)
        return self._grep(lambda value: not test(value), func)

    def _grep(self, test, func):
        result = []

        def visit(*values):
            value = pack(values)
            if test(value):
                result.append(func(value) if func is not None else value)

        walk(self, visit)
        return result

    def drop(self, n):
        """Return all elements but the first `n`."""
        n = as_size(n, "attempt to drop negative size")
        result = []

        def visit(*values):
            nonlocal n
            if n == 0:
                result.append(pack(values))
            else:
                n -= 1

        walk(self, visit)
        return result

    @operation
    def drop_while(self, func=None):
        """Skip elements while `func` is truthy, then return the rest.

        Once `func` has returned a falsy value it is not called anymore.
        """
        if func is None:
            return self.to_enum("drop_while")

        result = []
        dropping = True

        def visit(*values):
            nonlocal dropping
            value = pack(values)
            if dropping and not func(value):
                dropping = False
            if not dropping:
                result.append(value)

        walk(self, visit)
        return result

    def take(self, n):
        """Return the first `n` elements, traversing no further."""
        n = as_size(n, "attempt to take negative size")
        result = []
        if n == 0:
            return result

        walk = Traversal(self)

        def visit(*values):
            result.append(pack(values))
            if len(result) == n:
                walk.stop()

        walk.run(visit)
        return result

    @operation
    def take_while(self, func=None):
        """Return the leading elements for which `func` is truthy.

        Traversal stops at the first element for which `func` is falsy.
        """
        if func is None:
            return self.to_enum("take_while")

        result = []
        walk = Traversal(self)

        def visit(*values):
            value = pack(values)
            if not func(value):
                walk.stop()
            result.append(value)

        walk.run(visit)
        return result

    def first(self, *args):
        """Return the first element, or a list of the first `n` elements.

        Example:

            >>> wrap([1, 2, 3]).first()
            1
            >>> wrap([1, 2, 3]).first(2)
            [1, 2]
            >>> wrap([]).first(3)
            []
        """
        if len(args) > 1:
            raise TypeError(
                "first() takes at most 1 argument ({} given)".format(
                    len(args)))

        if len(args) == 1:
            return self.take(as_size(args[0], "attempt to take negative size"))

        walk = Traversal(self)

        def visit(*values):
            walk.stop(pack(values))

        return walk.run(visit).value
