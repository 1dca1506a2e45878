from itertools import product

from numpy.testing import assert_equal, assert_raises
from zuper_commons.types import ZException

from orderings import compare, EQ, GT, LT, mappend, mconcat, mempty, OrdConstants, Ordering, ORDERINGS

from . import logger


def test_singletons():
    assert Ordering(-1) is LT
    assert Ordering["EQ"] is EQ
    assert len(list(Ordering)) == 3
    assert_equal(repr(GT), "GT")
    assert_equal(str(LT), "LT")


def test_monoid_laws():
    assert mempty() is EQ
    for x in ORDERINGS:
        assert mappend(EQ, x) is x
        assert mappend(x, EQ) is x
        assert mappend(LT, x) is LT
        assert mappend(GT, x) is GT
    for x, y, z in product(ORDERINGS, repeat=3):
        assert mappend(mappend(x, y), z) is mappend(x, mappend(y, z))


def test_mconcat():
    assert mconcat([]) is EQ
    assert mconcat([EQ, EQ]) is EQ
    assert mconcat([EQ, GT, LT]) is GT
    assert mconcat(iter([LT, GT])) is LT


def test_mconcat_stops_at_first_decision():
    evaluated = []

    def lazily():
        for o in (EQ, LT, GT):
            evaluated.append(o)
            yield o

    assert mconcat(lazily()) is LT
    assert_equal(evaluated, [EQ, LT])


def test_coercion_is_increasing():
    assert_equal([int(_) for _ in ORDERINGS], [-1, 0, 1])
    assert LT < EQ < GT
    assert GT >= GT
    assert sorted([GT, LT, EQ]) == [LT, EQ, GT]


def test_compare_orderings():
    assert compare(LT, GT) is LT
    assert compare(GT, EQ) is GT
    for x in ORDERINGS:
        assert compare(x, x) is EQ


def test_invert():
    assert LT.invert() is GT
    assert GT.invert() is LT
    assert EQ.invert() is EQ


def test_mappend_checks():
    OrdConstants.checks = True
    try:
        assert_raises(ZException, mappend, 0, LT)
        assert mappend(EQ, GT) is GT
    finally:
        OrdConstants.checks = False
    logger.info(orderings=ORDERINGS)
