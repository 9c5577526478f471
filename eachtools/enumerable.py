from abc import abstractmethod
from collections.abc import Iterable

from .aggregation import Aggregation
from .errors import EvaluationError, format_stack, seterr
from .quantifiers import Quantifiers
from .search import Search
from .selection import Selection
from .transformation import Transformation
from .traversal import Traversable, Visitor, operation, traverse
from .utils import get_logger
from .windowing import Windowing


logger = get_logger(__name__)


class Enumerable(Quantifiers, Search, Aggregation, Selection,
                 Transformation, Windowing, Traversable):
    """Interface and mixin for sources.

    Subclasses implement :meth:`each` which calls a function on every
    element, in order. All the other methods are derived from it.

    Multiple arguments passed to the function during a single visit are
    seen as one element: the tuple of these arguments.

    Example:

        >>> class Countdown(Enumerable):
        ...     def __init__(self, start):
        ...         self.start = start
        ...     def each(self, func):
        ...         for i in range(self.start, 0, -1):
        ...             func(i)
        ...         return self
        >>> Countdown(5).select(lambda x: x % 2 == 1)
        [5, 3, 1]
        >>> Countdown(5).each_slice(2).to_a()
        [[5, 4], [3, 2], [1]]
    """

    @abstractmethod
    def each(self, func):
        """Call `func` on every element, in order."""
        raise NotImplementedError

    def to_enum(self, method, *args, **kwargs):
        """Return a handle on the operation `method` awaiting its callback."""
        logger.debug("deferring %s on %s", method, self.__class__.__name__)
        return Deferred(self, method, args, kwargs)


class Deferred(Enumerable):
    """An operation on a source, waiting for its callback.

    Operations that need a callback return such a handle when called
    without one. Calling :meth:`each` with a callback runs the operation,
    every other method of :class:`Enumerable` is available as well.

    Example:

        >>> pairs = wrap(['a', 'b']).each_with_index()
        >>> pairs.to_a()
        [('a', 0), ('b', 1)]
        >>> pairs.map(lambda p: p[0] * (p[1] + 1))
        ['a', 'bb']
    """
    def __init__(self, source, method, args=(), kwargs=None):
        self.source = source
        self.method = method
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self.stack = format_stack(3)

    def each(self, func):
        run = getattr(self.source, self.method)
        if isinstance(func, Visitor):
            return run(*self.args, func=func, **self.kwargs)

        try:
            return run(*self.args, func=func, **self.kwargs)

        except Exception as error:
            if seterr() == 'passthrough' or isinstance(error, EvaluationError):
                raise
            else:
                msg = "Failed to evaluate {} created at:\n{}".format(
                    self, self.stack)
                raise EvaluationError(msg) from error

    def __repr__(self):
        args = [repr(a) for a in self.args]
        args += ["{}={!r}".format(k, v) for k, v in self.kwargs.items()]
        return "<Deferred {}.{}({})>".format(
            self.source.__class__.__name__, self.method, ", ".join(args))


class Wrapped(Enumerable):
    def __init__(self, source):
        self.source = source

    @operation
    def each(self, func=None):
        if func is None:
            return self.to_enum("each")

        traverse(self.source, func)
        return self


def wrap(source):
    """Return an :class:`Enumerable` view of `source`.

    Args:
        source: An object with an :code:`each` method, any iterable
            (mappings are visited with key and value), or None for an
            empty source.

    Example:

        >>> wrap({'a': 1, 'b': 2}).map(lambda kv: kv[0] * kv[1])
        ['a', 'bb']
        >>> wrap(None).to_h()
        {}
    """
    if isinstance(source, Enumerable):
        return source
    elif source is None:
        return Wrapped(())
    elif isinstance(source, (Traversable, Iterable)):
        return Wrapped(source)
    else:
        raise TypeError(
            "cannot wrap '" + source.__class__.__name__
            + "' object, it is neither traversable nor iterable")
