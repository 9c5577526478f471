from random import randint

import pytest
from eachtools import Deferred, Enumerable, wrap
from eachtools.instrument import debug


class Naturals(Enumerable):
    def each(self, func):
        i = 0
        while True:
            func(i)
            i += 1


def test_detect():
    assert wrap(range(10)).detect(lambda x: x * x > 10) == 4
    assert wrap(range(3)).detect(lambda x: x > 5) is None
    assert wrap(range(3)).detect(lambda x: x > 5, ifnone=lambda: -1) == -1
    assert wrap(range(3)).find(lambda x: x > 0) == 1
    assert Naturals().detect(lambda x: x * x > 50) == 8

    handle = wrap([1, 2, 3, 4]).detect()
    assert isinstance(handle, Deferred)
    assert handle.each(lambda x: x > 2) == 3

    handle = wrap([1]).detect(ifnone=lambda: "none")
    assert handle.each(lambda x: x > 5) == "none"

    def visit(i, v):
        visit.n += 1

    visit.n = 0
    assert debug(list(range(100)), visit).detect(lambda x: x == 10) == 10
    assert visit.n == 11


def test_find_index():
    data = [randint(0, 100) for _ in range(100)]
    target = data[randint(0, 99)]

    assert wrap(data).find_index(target) == data.index(target)
    assert wrap(data).find_index(func=lambda x: x == target) == \
        data.index(target)
    assert wrap(data).find_index(-1) is None
    assert wrap([]).find_index(func=lambda x: True) is None
    assert wrap([None, 1]).find_index(None) == 0
    assert Naturals().find_index(func=lambda x: x * 3 > 10) == 4

    handle = wrap(['a', 'b']).find_index()
    assert isinstance(handle, Deferred)
    assert handle.each(lambda x: x == 'b') == 1

    with pytest.raises(TypeError):
        wrap(data).find_index(1, 2)


def test_include():
    data = wrap([1, 2, 3])
    assert data.include(2)
    assert not data.include(4)
    assert data.member(3)
    assert 1 in data
    assert 5 not in data
    assert not wrap([]).include(None)
    assert wrap({'a': 1}).include(('a', 1))
    assert Naturals().include(1000)
