"""Reductions of a source to a single value."""

import operator

from .traversal import Callback, operation, pack, walk
from .utils import MISSING, get_logger


logger = get_logger(__name__)


operators = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '//': operator.floordiv,
    '%': operator.mod,
    '**': operator.pow,
    '&': operator.and_,
    '|': operator.or_,
    '^': operator.xor,
    '<<': operator.lshift,
    '>>': operator.rshift,
    '@': operator.matmul,
}
operators.update({
    f.__name__: f for f in set(operators.values()) | {operator.concat}})


def is_operator(arg):
    return isinstance(arg, str) and arg in operators


class Aggregation:
    @operation
    def count(self, value=MISSING, *, func=None):
        """Count elements.

        Counts the elements for which `func` is truthy if given, the
        elements equal to `value` if given, or all the elements.
        """
        n = 0

        if func is not None:
            def visit(*values):
                nonlocal n
                if func(pack(values)):
                    n += 1

        elif value is MISSING:
            def visit(*values):
                nonlocal n
                n += 1

        else:
            def visit(*values):
                nonlocal n
                if pack(values) == value:
                    n += 1

        walk(self, visit)
        return n

    @operation
    def inject(self, *args, func=None):
        """Combine the elements with a binary function, from left to right.

        Args:
            *args: an optional initial value followed by an optional
                operator name such as `'+'` or `'mul'` used in place of
                `func`.
            func (Callable[[Any, Any], Any]): combining function, called
                with the accumulated value and the next element.

        Return:
            The accumulated value. Without initial value, the first element
            is used and combining starts at the second one. The order of
            evaluation follows the traversal order, so non-associative
            functions see :code:`f(f(f(e0, e1), e2), e3)`.

        Example:

            >>> wrap([1, 2, 3, 4]).inject(func=lambda x, y: x + y)
            10
            >>> wrap([1, 2, 3]).inject(10, '+')
            16
        """
        if len(args) > 2:
            raise TypeError(
                "inject() takes at most 2 positional arguments "
                "({} given)".format(len(args)))

        args = list(args)
        if func is None and args and is_operator(args[-1]):
            name = args.pop()
            logger.debug("inject using operator %s", name)
            func = Callback(operators[name], "inject")

        if len(args) > 1:
            raise TypeError(
                "inject() second argument must be an operator name, "
                "got {!r}".format(args[1]))

        if func is None:
            return self.to_enum("inject", *args)

        empty = not args
        result = args[0] if args else None

        def visit(*values):
            nonlocal empty, result
            if empty:
                result = pack(values)
                empty = False
            else:
                result = func(result, pack(values))

        walk(self, visit)
        return result

    reduce = inject

    @operation
    def max(self, func=None):
        """Return the largest element, or None if there are none.

        Args:
            func (Callable[[Any, Any], int]): optional comparison function
                returning a positive number when its first argument is
                greater than the second.

        Ties are resolved in favor of the first element.
        """
        return self._extremum(func, 1)

    @operation
    def min(self, func=None):
        """Return the smallest element, or None if there are none.

        See :meth:`max`.
        """
        return self._extremum(func, -1)

    def _extremum(self, func, sign):
        first = True
        result = None

        if func is not None:
            def better(value, current):
                return func(value, current) * sign > 0
        elif sign > 0:
            better = operator.gt
        else:
            better = operator.lt

        def visit(*values):
            nonlocal first, result
            value = pack(values)
            if first:
                result = value
                first = False
            elif better(value, result):
                result = value

        walk(self, visit)
        return result

    @operation
    def max_by(self, func=None):
        """Return the element with the largest key `func(element)`."""
        if func is None:
            return self.to_enum("max_by")

        return self._extremum_by(func, operator.gt)

    @operation
    def min_by(self, func=None):
        """Return the element with the smallest key `func(element)`."""
        if func is None:
            return self.to_enum("min_by")

        return self._extremum_by(func, operator.lt)

    def _extremum_by(self, func, better):
        first = True
        result = None
        result_key = None

        def visit(*values):
            nonlocal first, result, result_key
            value = pack(values)
            key = func(value)
            if first or better(key, result_key):
                result = value
                result_key = key
                first = False

        walk(self, visit)
        return result

    @operation
    def minmax(self, func=None):
        """Return :code:`[min, max]` in a single pass.

        Args:
            func (Callable[[Any, Any], int]): optional comparison function,
                see :meth:`max`.
        """
        first = True
        lo = hi = None

        if func is not None:
            def greater(a, b):
                return func(a, b) > 0

            def less(a, b):
                return func(a, b) < 0
        else:
            greater = operator.gt
            less = operator.lt

        def visit(*values):
            nonlocal first, lo, hi
            value = pack(values)
            if first:
                lo = hi = value
                first = False
            else:
                if greater(value, hi):
                    hi = value
                if less(value, lo):
                    lo = value

        walk(self, visit)
        return [lo, hi]

    @operation
    def minmax_by(self, func=None):
        """Return :code:`[min_by(func), max_by(func)]` in a single pass.

        Keys are computed once per element.
        """
        if func is None:
            return self.to_enum("minmax_by")

        first = True
        lo = hi = None
        lo_key = hi_key = None

        def visit(*values):
            nonlocal first, lo, hi, lo_key, hi_key
            value = pack(values)
            key = func(value)
            if first:
                lo = hi = value
                lo_key = hi_key = key
                first = False
            elif key > hi_key:
                hi, hi_key = value, key
            elif key < lo_key:
                lo, lo_key = value, key

        walk(self, visit)
        return [lo, hi]
