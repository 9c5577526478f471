"""Case equality, used by quantifiers and :code:`grep`."""

import re

from .utils import MISSING


def case_eq(pattern, value):
    """Return wether `value` belongs to the case described by `pattern`.

    - a class matches its instances,
    - a compiled regular expression matches strings it can find a match in,
    - a range matches the values it contains,
    - another callable matches values for which it returns a truthy result,
    - anything else matches the values equal to it.
    """
    return pattern_matcher(pattern)(value)


def pattern_matcher(pattern):
    if isinstance(pattern, type):
        return lambda value: isinstance(value, pattern)

    elif isinstance(pattern, re.Pattern):
        kind = type(pattern.pattern)
        return lambda value: (isinstance(value, kind)
                              and pattern.search(value) is not None)

    elif isinstance(pattern, range):
        return lambda value: value in pattern

    elif callable(pattern):
        return lambda value: bool(pattern(value))

    else:
        return lambda value: bool(pattern == value)


def matcher(pattern=MISSING, func=None):
    """Resolve the match test of a quantifier call.

    A pattern takes precedence over a callback, without either elements
    match when they are truthy.
    """
    if pattern is not MISSING:
        return pattern_matcher(pattern)
    elif func is not None:
        return lambda value: bool(func(value))
    else:
        return bool
