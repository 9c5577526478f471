"""The traversal primitive and the machinery shared by all operations.

A source is any object with an ``each(func)`` method which calls ``func``
once per element, in order. Everything else in the package is written
against this single method through :func:`traverse`.
"""

import functools
import inspect
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from .errors import EvaluationError, seterr


class Traversable(ABC):
    """Interface for objects that visit their elements with a callback.

    Any class defining an ``each`` method is considered a subclass. Python
    lists, tuples, ranges, sets and dicts are registered as well and are
    visited by iteration.
    """

    @abstractmethod
    def each(self, func):
        """Call `func` on every element, in order."""
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Traversable:
            for B in C.__mro__:
                if "each" in B.__dict__:
                    return B.__dict__["each"] is not None or NotImplemented
        return NotImplemented


for _builtin in (list, tuple, range, set, frozenset, dict):
    Traversable.register(_builtin)


def traverse(source, func):
    """Run the traversal primitive of `source` with `func`."""
    each = getattr(source, "each", None)
    if callable(each):
        return each(func)
    elif isinstance(source, Mapping):
        for key, value in source.items():
            func(key, value)
    elif isinstance(source, Iterable):
        for item in source:
            func(item)
    else:
        raise TypeError(
            "'" + source.__class__.__name__ + "' object is not traversable")


class Visitor:
    """The own visiting function of an operation.

    Operations passed a visitor run it as is: errors it raises come from
    EachTools, not from a user callback.
    """
    def __init__(self, func):
        self.func = func

    def __call__(self, *values):
        return self.func(*values)


def walk(source, visit):
    """Like :func:`traverse`, for the visiting functions of operations."""
    if not isinstance(visit, Visitor):
        visit = Visitor(visit)
    return traverse(source, visit)


def pack(values):
    """Turn the arguments of one visit into a single element."""
    if len(values) == 1:
        return values[0]
    elif len(values) == 0:
        return None
    else:
        return values


# Early termination -----------------------------------------------------------

class Break(BaseException):
    """Raise from a callback to end the operation that invoked it.

    The operation stops traversing its source and returns `value`. This is
    the only way to stop an unbounded traversal such as :code:`cycle()`.

    Example:

        >>> def stop_at_3(x):
        ...     if x == 3:
        ...         raise Break("done")
        >>> wrap(range(10)).each_with_index(stop_at_3)
        'done'
    """
    def __init__(self, value=None):
        super().__init__(value)
        self.value = value


class Stop(BaseException):
    """Unwinds a traversal up to the frame that owns it."""
    def __init__(self, owner, value):
        super().__init__()
        self.owner = owner
        self.value = value


class Traversal:
    """A single run over a source which the visitor may cut short."""
    def __init__(self, source):
        self.source = source
        self.halted = False
        self.value = None

    def stop(self, value=None):
        raise Stop(self, value)

    def run(self, visit):
        try:
            walk(self.source, visit)
        except Stop as stop:
            if stop.owner is not self:
                raise
            self.halted = True
            self.value = stop.value

        return self


# Callbacks -------------------------------------------------------------------

class Callback:
    """Wrap a user callback for one operation call.

    Failures are reported as :class:`EvaluationError` and a :class:`Break`
    from the callback is redirected to the operation which received it.
    """
    def __init__(self, func, name):
        if not callable(func):
            raise TypeError(
                "'" + func.__class__.__name__ + "' object is not callable")

        self.func = func
        self.name = name
        self.calls = 0

    def __call__(self, *args):
        i = self.calls
        self.calls += 1
        try:
            return self.func(*args)

        except Break as brk:
            raise Stop(self, brk.value) from None

        except Exception as error:
            if seterr() == 'passthrough' or isinstance(error, EvaluationError):
                raise
            else:
                msg = "Failed to evaluate {} callback on call {}".format(
                    self.name, i)
                raise EvaluationError(msg) from error


def operation(method):
    """Decorate an operation whose `func` argument is a user callback.

    The callback is wrapped into a :class:`Callback` before the operation
    runs, and a :class:`Break` raised by it makes the operation return.
    A :class:`Visitor` from another operation is passed through as is.
    """
    signature = inspect.signature(method)

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        func = bound.arguments.get("func")
        if func is None or isinstance(func, Visitor):
            return method(*bound.args, **bound.kwargs)

        callback = Callback(func, method.__name__)
        bound.arguments["func"] = callback
        try:
            return method(*bound.args, **bound.kwargs)
        except Stop as stop:
            if stop.owner is not callback:
                raise
            return stop.value

    return wrapper
