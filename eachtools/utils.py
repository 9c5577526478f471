"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


class Missing:
    """Marker for optional arguments where `None` is a legit value."""
    def __repr__(self):
        return "<missing>"


MISSING = Missing()


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def as_size(n, message):
    """Convert `n` to a non-negative integer or raise ValueError."""
    n = int(n)
    if n < 0:
        raise ValueError(message)

    return n


def as_window(size, message):
    """Convert `size` to a strictly positive integer or raise ValueError."""
    size = int(size)
    if size <= 0:
        raise ValueError(message)

    return size


def is_immutable(obj):
    return obj is None or isinstance(
        obj, (numbers.Number, str, bytes, tuple, frozenset))
