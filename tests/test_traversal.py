import pytest
from eachtools import Break, Deferred, Enumerable, Traversable, traverse, wrap


class Naturals(Enumerable):
    def each(self, func):
        i = 0
        while True:
            func(i)
            i += 1


class Pairs(Enumerable):
    def __init__(self, n):
        self.n = n

    def each(self, func):
        for i in range(self.n):
            func(i, str(i))
        return self


def test_traverse():
    visited = []
    traverse([1, 2, 3], visited.append)
    assert visited == [1, 2, 3]

    visited = []
    traverse({'a': 1, 'b': 2}, lambda k, v: visited.append((k, v)))
    assert visited == [('a', 1), ('b', 2)]

    visited = []
    traverse(Pairs(2), lambda *values: visited.append(values))
    assert visited == [(0, '0'), (1, '1')]

    visited = []
    traverse((i * 2 for i in range(3)), visited.append)
    assert visited == [0, 2, 4]

    with pytest.raises(TypeError):
        traverse(42, visited.append)


def test_traversable():
    class Custom:
        def each(self, func):
            func(1)

    assert isinstance(Custom(), Traversable)
    assert isinstance(Pairs(1), Traversable)
    assert isinstance([], Traversable)
    assert isinstance({}, Traversable)
    assert isinstance(range(3), Traversable)
    assert not isinstance("abc", Traversable)
    assert not isinstance(1, Traversable)

    assert wrap(Custom()).to_a() == [1]


def test_multiple_values():
    assert Pairs(3).to_a() == [(0, '0'), (1, '1'), (2, '2')]
    assert Pairs(3).map(lambda p: p[1]) == ['0', '1', '2']
    assert Pairs(3).to_h() == {0: '0', 1: '1', 2: '2'}
    assert wrap({'a': 1}).first() == ('a', 1)


def test_wrap():
    src = wrap([1, 2, 3])
    assert isinstance(src, Enumerable)
    assert wrap(src) is src
    assert wrap(None).to_a() == []
    assert wrap(None).to_h() == {}
    assert wrap("ab").to_a() == ['a', 'b']
    with pytest.raises(TypeError):
        wrap(3.5)

    # generators can only be traversed once
    src = wrap(i for i in range(3))
    assert src.to_a() == [0, 1, 2]
    assert src.to_a() == []


def test_deferred():
    src = wrap([1, 2, 3, 4])

    handle = src.select()
    assert isinstance(handle, Deferred)
    assert handle.source is src
    assert handle.method == "select"
    assert handle.each(lambda x: x % 2 == 1) == [1, 3]
    assert handle.each(lambda x: x % 2 == 0) == [2, 4]

    assert repr(src.each_slice(2)) == "<Deferred Wrapped.each_slice(2)>"
    assert repr(src.detect(ifnone=None)) == \
        "<Deferred Wrapped.detect(ifnone=None)>"

    assert wrap(range(7)).each_slice(3).map(sum) == [3, 12, 6]
    assert src.each_with_index().to_a() == [(1, 0), (2, 1), (3, 2), (4, 3)]
    assert src.each_slice(2).each_with_index().map(lambda p: p[0][0] * p[1]) \
        == [0, 3]
    assert src.map().each(lambda x: x * 10) == [10, 20, 30, 40]


def test_deferred_early_stop():
    assert Naturals().each_slice(2).first(3) == [[0, 1], [2, 3], [4, 5]]
    assert Naturals().each_with_index().detect(lambda p: p[0] == 3) == (3, 3)
    assert Naturals().map().first(2) == [0, 1]
    assert Naturals().each_cons(3).take_while(lambda w: w[0] < 2) == \
        [[0, 1, 2], [1, 2, 3]]


@pytest.mark.timeout(3)
def test_break():
    def stop_at(n, value):
        def func(x):
            if x == n:
                raise Break(value)
            return x
        return func

    assert wrap(range(10)).map(stop_at(3, "stopped")) == "stopped"
    assert Naturals().each_with_index(
        lambda x, i: stop_at(5, i)(x)) == 5
    assert Naturals().select(stop_at(2, None)) is None

    # break from the callback of a composed operation ends that operation
    slices = []

    def collect_slices(s):
        if len(slices) == 2:
            raise Break(slices)
        slices.append(s)

    assert Naturals().each_slice(2).map(collect_slices) == [[0, 1], [2, 3]]

    # break from an inner operation does not leak to the outer one
    def has_small_divisor(x):
        def check(d):
            if x % d == 0:
                raise Break(True)
            return False
        return wrap(range(2, 4)).detect(check) is True

    assert wrap(range(2, 10)).select(has_small_divisor) == [2, 3, 4, 6, 8, 9]


def test_each():
    src = wrap(range(5))
    seen = []
    assert src.each(seen.append) is src
    assert seen == [0, 1, 2, 3, 4]

    def stop_at_2(x):
        if x == 2:
            raise Break("stop")
        seen.append(x)

    seen = []
    assert src.each(stop_at_2) == "stop"
    assert seen == [0, 1]

    pairs = []
    src = wrap({'a': 1})
    assert src.each(lambda k, v: pairs.append((k, v))) is src
    assert pairs == [('a', 1)]

    handle = src.each()
    assert isinstance(handle, Deferred)
    assert handle.to_a() == [0, 1, 2, 3, 4]


def test_each_is_abstract():
    class Incomplete(Enumerable):
        pass

    with pytest.raises(TypeError):
        Incomplete()
