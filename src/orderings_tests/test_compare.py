from decimal import Decimal as D
from fractions import Fraction
from itertools import product

import pytest
from numpy.testing import assert_raises
from zuper_commons.types import ZTypeError, ZValueError

from orderings import (
    compare,
    EQ,
    greater_than,
    GT,
    is_eq,
    less_than,
    LT,
    Ord,
    OrdConstants,
    Ordering,
    register_ord,
    TypeMismatch,
    unregister,
)
from . import logger
from .comparables import ALL_VALUES, pair

INF = float("inf")


def test_literal_scenarios():
    assert compare(3, 5) is LT
    assert compare(5, 3) is GT
    assert compare(4, 4) is EQ
    assert compare("abc", "abd") is LT
    assert compare(b"b", b"a") is GT


def test_pairs():
    assert compare(pair(1, 2), pair(1, 3)) is LT
    assert compare(pair(2, 1), pair(1, 9)) is GT
    assert compare(pair(2, "x"), pair(2, "x")) is EQ


def test_mixed_numbers():
    assert compare(1, 2.5) is LT
    assert compare(D(1), Fraction(1, 2)) is GT
    assert compare(D("3.5"), Fraction(7, 2)) is EQ


def test_partial_application():
    c3 = compare(3)
    assert callable(c3)
    assert c3(5) is LT
    assert compare(5)(3) is GT
    assert isinstance(compare(1, 1), Ordering)


@pytest.mark.parametrize("values", ALL_VALUES)
def test_properties(values):
    for a in values:
        assert compare(a, a) is EQ
    for a, b in product(values, repeat=2):
        r = compare(a, b)
        assert r in (LT, EQ, GT)
        assert compare(b, a) is r.invert()
        holds = [less_than(a, b), is_eq(a, b), greater_than(a, b)]
        assert holds.count(True) == 1, (a, b, holds)


def test_infinity():
    assert compare(INF, 10 ** 100) is GT
    assert compare(-INF, INF) is LT
    assert compare(INF, INF) is EQ
    assert compare(D("Infinity"), INF) is EQ
    # infinity is above values of any type
    assert compare(INF, "z") is GT
    assert compare(pair(1, 1), INF) is LT


def test_type_mismatch():
    assert compare(1, 1) is EQ
    with pytest.raises(TypeMismatch) as e:
        compare(1, "a")
    assert e.value.a == 1
    assert e.value.b == "a"
    assert e.value.origin == "compare"
    logger.info(e=str(e.value))

    assert_raises(TypeMismatch, compare, True, 1)
    assert_raises(TypeMismatch, compare, (1, 2), [1, 2])
    assert_raises(TypeMismatch, compare, pair(1, 2), (1, 2))
    assert_raises(TypeMismatch, compare(1), "a")


def test_unorderable_values():
    class Opaque:
        pass

    assert compare(Opaque, Opaque) is EQ
    assert_raises(ZTypeError, compare, Opaque(), Opaque())


class Bad:
    pass


class BadOrd(Ord[Bad]):
    def compare(self, a: Bad, b: Bad) -> Ordering:
        return 0


def test_comparator_result_checks():
    register_ord(Bad, BadOrd())
    try:
        assert compare(Bad(), Bad()) == 0
        OrdConstants.checks = True
        try:
            assert_raises(ZValueError, compare, Bad(), Bad())
        finally:
            OrdConstants.checks = False
    finally:
        unregister(Bad)


@pytest.mark.parametrize("nan", [float("nan"), D("NaN"), D("sNaN")])
def test_nan(nan):
    for x in (0, -1.5, D(1), Fraction(1, 3), nan):
        assert compare(nan, x) is GT
        assert compare(x, nan) is GT
        assert not is_eq(nan, x)
    # infinity is decided before the NaN rule
    assert compare(INF, nan) is GT
    assert compare(nan, INF) is LT
    assert compare(D("Infinity"), nan) is GT
    assert compare(D("-Infinity"), D(0)) is LT
