"""Operations that build new collections from the elements."""

import functools
from collections.abc import Iterable

from .traversal import Traversable, operation, pack, walk


def materialize(obj):
    """Return the elements of `obj` as a list."""
    if isinstance(obj, Traversable):
        result = []
        walk(obj, lambda *values: result.append(pack(values)))
        return result
    elif isinstance(obj, Iterable):
        return list(obj)
    else:
        raise TypeError(
            "wrong argument type " + obj.__class__.__name__
            + " (must be traversable or iterable)")


class Transformation:
    def to_a(self):
        """Return the elements in a list."""
        result = []
        walk(self, lambda *values: result.append(pack(values)))
        return result

    entries = to_a

    @operation
    def map(self, func=None):
        """Return the list of :code:`func(x)` for each element `x`."""
        if func is None:
            return self.to_enum("map")

        result = []
        walk(self, lambda *values: result.append(func(pack(values))))
        return result

    collect = map

    @operation
    def flat_map(self, func=None):
        """Map elements with `func` and concatenate the results.

        Results which are traversable (lists, tuples, other sources...) are
        spliced in, other values are appended. Only one level is flattened.

        Example:

            >>> wrap([1, 2]).flat_map(lambda x: [x, [x]])
            [1, [1], 2, [2]]
        """
        if func is None:
            return self.to_enum("flat_map")

        result = []

        def push(*values):
            result.append(pack(values))

        def visit(*values):
            mapped = func(pack(values))
            if isinstance(mapped, Traversable):
                walk(mapped, push)
            else:
                result.append(mapped)

        walk(self, visit)
        return result

    collect_concat = flat_map

    @operation
    def group_by(self, func=None):
        """Group elements by :code:`func(element)`.

        Return:
            (Dict[Any, List]): The groups, keys in the order in which they
            were first encountered.
        """
        if func is None:
            return self.to_enum("group_by")

        groups = {}

        def visit(*values):
            value = pack(values)
            groups.setdefault(func(value), []).append(value)

        walk(self, visit)
        return groups

    @operation
    def uniq(self, func=None):
        """Return elements without duplicates, keeping first occurrences.

        Duplicates are detected on the elements themselves or on
        :code:`func(element)` when `func` is given. Unhashable keys, such as
        lists, are compared by equality.

        Example:

            >>> wrap([3, 1, 3, 2, 1]).uniq()
            [3, 1, 2]
            >>> wrap([1, 2, 1, 2]).each_slice(2).uniq()
            [[1, 2]]
        """
        result = []
        seen = set()
        seen_unhashable = []

        def visit(*values):
            value = pack(values)
            key = func(value) if func is not None else value
            try:
                if key in seen:
                    return
                seen.add(key)
            except TypeError:
                if key in seen_unhashable:
                    return
                seen_unhashable.append(key)
            result.append(value)

        walk(self, visit)
        return result

    @operation
    def sort_by(self, func=None):
        """Return elements sorted by :code:`func(element)`.

        Elements with equal keys keep their original order, elements are
        never compared with each other.
        """
        if func is None:
            return self.to_enum("sort_by")

        elements = []
        keys = []

        def visit(*values):
            value = pack(values)
            keys.append((func(value), len(elements)))
            elements.append(value)

        walk(self, visit)
        keys.sort()
        return [elements[i] for _, i in keys]

    @operation
    def sort(self, func=None):
        """Return the elements sorted.

        Args:
            func (Callable[[Any, Any], int]): optional comparison function
                returning a negative, null or positive number.
        """
        result = self.to_a()
        if func is not None:
            result.sort(key=functools.cmp_to_key(func))
        else:
            result.sort()
        return result

    @operation
    def to_h(self, func=None):
        """Build a dictionary from key-value pairs.

        Each element, or :code:`func(element)` if `func` is given, must be a
        list or tuple of two items. Later pairs overwrite earlier ones with
        the same key.

        Raises:
            TypeError: an element is not a list or a tuple.
            ValueError: an element does not have exactly two items.
        """
        result = {}

        def visit(*values):
            pair = pack(values)
            if func is not None:
                pair = func(pair)
            if not isinstance(pair, (list, tuple)):
                raise TypeError(
                    "wrong element type " + pair.__class__.__name__
                    + " (expected list or tuple)")
            if len(pair) != 2:
                raise ValueError(
                    "element has wrong length (expected 2, was {})".format(
                        len(pair)))
            result[pair[0]] = pair[1]

        walk(self, visit)
        return result

    @operation
    def zip(self, *others, func=None):
        """Merge elements with those of other sources at the same position.

        The other sources are read entirely first. Missing positions are
        filled with None.

        Return:
            The list of rows :code:`[x, others[0][i], others[1][i], ...]`,
            or None if `func` is given in which case it is called on each
            row instead.

        Example:

            >>> wrap([1, 2, 3]).zip(['a', 'b'])
            [[1, 'a'], [2, 'b'], [3, None]]
        """
        others = [materialize(o) for o in others]
        result = [] if func is None else None
        i = 0

        def visit(*values):
            nonlocal i
            row = [pack(values)]
            for other in others:
                row.append(other[i] if i < len(other) else None)
            i += 1
            if result is None:
                func(row)
            else:
                result.append(row)

        walk(self, visit)
        return result
