"""
A python library of operations over anything that can be traversed.

A source only needs an :code:`each(func)` method which calls `func` on
every element in order. By subclassing :class:`Enumerable`, or through
:func:`wrap`, it gains searching, filtering, aggregation, grouping,
windowing and ordering operations, all written in terms of that single
method. Sources may be unbounded as long as the operations stop early.

Operations that need a callback and are called without one return a
:class:`Deferred` handle instead, which is itself a source and can be
combined with the other operations:

    >>> wrap(range(7)).each_slice(3).map(sum)
    [3, 12, 6]

A callback can end the operation which invoked it by raising
:class:`Break`.
"""

from . import instrument
from .enumerable import Deferred, Enumerable, wrap
from .errors import EvaluationError, seterr
from .matching import case_eq
from .traversal import Break, Traversable, traverse

__all__ = [
    "Enumerable",
    "Deferred",
    "Traversable",
    "wrap",
    "traverse",
    "Break",
    "EvaluationError",
    "seterr",
    "case_eq",
    "instrument",
]
