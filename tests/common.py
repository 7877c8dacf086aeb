import itertools
import unittest

from intpoly.common import FrozenDict, ADT, typechecked

class Pair(ADT):
    __slots__ = ("a", "b")
    def __init__(self, a, b):
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
    def children(self):
        return (self.a, self.b)

class TestCommonUtils(unittest.TestCase):

    def test_frozendict_unordered(self):
        d1 = FrozenDict([('a', 1), ('b', 2)])
        d2 = FrozenDict([('b', 2), ('a', 1)])
        assert hash(d1) == hash(d2)
        assert d1 == d2

    def test_frozendict_repr(self):
        for items in itertools.permutations([(1, -1), (2, 3)]):
            d = FrozenDict(items)
            assert eval(repr(d)) == d

    def test_adt_value_semantics(self):
        assert Pair(1, 2) == Pair(1, 2)
        assert Pair(1, 2) != Pair(2, 1)
        assert hash(Pair(1, 2)) == hash(Pair(1, 2))
        assert repr(Pair(1, "x")) == "Pair(1, 'x')"

    def test_adt_immutable(self):
        p = Pair(1, 2)
        with self.assertRaises(AttributeError):
            p.a = 3
        with self.assertRaises(AttributeError):
            del p.a
        assert p == Pair(1, 2)

    def test_typechecked(self):
        @typechecked
        def f(x : int, s : str) -> int:
            return x + len(s)
        assert f(1, "ab") == 3
        with self.assertRaises(AssertionError):
            f("1", "")
        with self.assertRaises(AssertionError):
            f(1, s=2)
