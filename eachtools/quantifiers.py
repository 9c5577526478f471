"""Quantifiers: tests over the elements of a source which stop early."""

from .matching import matcher
from .traversal import Traversal, operation, pack
from .utils import MISSING


class Quantifiers:
    @operation
    def all(self, pattern=MISSING, *, func=None):
        """Return wether every element matches.

        Elements are tested against `pattern` when given (see
        :func:`eachtools.matching.case_eq`), otherwise with `func`, otherwise
        for their own truthiness. Stops at the first non-matching element.

        Example:

            >>> wrap([1, 2, 3]).all(int)
            True
            >>> wrap([1, None, 3]).all()
            False
        """
        test = matcher(pattern, func)
        walk = Traversal(self)

        def visit(*values):
            if not test(pack(values)):
                walk.stop()

        return not walk.run(visit).halted

    @operation
    def any(self, pattern=MISSING, *, func=None):
        """Return wether at least one element matches.

        Same matching rules as :meth:`all`, stops at the first match.
        """
        test = matcher(pattern, func)
        walk = Traversal(self)

        def visit(*values):
            if test(pack(values)):
                walk.stop()

        return walk.run(visit).halted

    @operation
    def none(self, pattern=MISSING, *, func=None):
        """Return wether no element matches, stops at the first match."""
        test = matcher(pattern, func)
        walk = Traversal(self)

        def visit(*values):
            if test(pack(values)):
                walk.stop()

        return not walk.run(visit).halted

    @operation
    def one(self, pattern=MISSING, *, func=None):
        """Return wether exactly one element matches.

        Traversal stops as soon as a second match is found.
        """
        test = matcher(pattern, func)
        walk = Traversal(self)
        count = 0

        def visit(*values):
            nonlocal count
            if test(pack(values)):
                count += 1
                if count > 1:
                    walk.stop()

        walk.run(visit)
        return count == 1
