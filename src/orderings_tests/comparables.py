from dataclasses import dataclass
from decimal import Decimal as D
from fractions import Fraction
from typing import Any

from orderings import FieldsOrd, ord_instance, ORDERINGS

__all__ = ["Pair", "pair", "NUMBERS", "STRINGS", "PAIRS", "TUPLES", "LISTS", "ALL_VALUES"]


@ord_instance(FieldsOrd(("first", "second")))
@dataclass(frozen=True)
class Pair:
    """ An ordered pair, compared on the first component and then on the second. """

    first: Any
    second: Any


def pair(first: Any, second: Any) -> Pair:
    return Pair(first, second)


NUMBERS = (-3, 0, 1, 2.5, 3, D("3.5"), Fraction(7, 2), 5, float("inf"))
STRINGS = ("", "a", "ab", "b", "ba")
PAIRS = (pair(0, "z"), pair(1, "a"), pair(1, "b"), pair(2, "a"))
TUPLES = ((), (0,), (1,), (1, 2), (1, 3), (2,))
LISTS = ([], [pair(1, 2)], [pair(1, 2), pair(0, 0)], [pair(1, 3)])

ALL_VALUES = (NUMBERS, STRINGS, PAIRS, TUPLES, LISTS, ORDERINGS)
