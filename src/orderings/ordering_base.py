from enum import Enum
from typing import Iterable

from zuper_commons.types import check_isinstance

from .constants import OrdConstants

__all__ = [
    "Ordering",
    "LT",
    "EQ",
    "GT",
    "ORDERINGS",
    "mempty",
    "mappend",
    "mconcat",
]


class Ordering(Enum):
    """
    The result of comparing two values.

    There are exactly three orderings, :any:`LT`, :any:`EQ` and :any:`GT`,
    and each one is a singleton, so they can be tested with ``is``.

    Orderings form a monoid, with :any:`EQ` as the identity and
    :py:meth:`mappend` as the combination. The combination keeps the
    first operand unless it is :any:`EQ`, which is what lexicographic
    comparison on several criteria needs.
    """

    LT = -1
    EQ = 0
    GT = 1

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    def __int__(self) -> int:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ordering):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Ordering):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Ordering):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Ordering):
            return NotImplemented
        return self.value >= other.value

    def invert(self) -> "Ordering":
        """ Swaps :any:`LT` and :any:`GT`; :any:`EQ` stays the same. """
        return _INVERSES[self]

    @staticmethod
    def mempty() -> "Ordering":
        """ The identity of the monoid. """
        return Ordering.EQ

    @staticmethod
    def mappend(a: "Ordering", b: "Ordering") -> "Ordering":
        """ Returns ``b`` if ``a`` is :any:`EQ`, otherwise ``a``. """
        if OrdConstants.checks:
            check_isinstance(a, Ordering, b=b)
            check_isinstance(b, Ordering, a=a)
        if a is Ordering.EQ:
            return b
        return Ordering.LT if a is Ordering.LT else Ordering.GT


LT = Ordering.LT
""" The "less than" ordering. """

EQ = Ordering.EQ
""" The "equal" ordering. """

GT = Ordering.GT
""" The "greater than" ordering. """

ORDERINGS = (LT, EQ, GT)
""" All possible orderings, in increasing order. """

_INVERSES = {LT: GT, EQ: EQ, GT: LT}


def mempty() -> Ordering:
    return Ordering.mempty()


def mappend(a: Ordering, b: Ordering) -> Ordering:
    return Ordering.mappend(a, b)


def mconcat(orderings: Iterable[Ordering]) -> Ordering:
    """
    Folds the orderings with :py:func:`mappend`, starting from :py:func:`mempty`.

    The iterable is consumed only up to the first ordering that is not :any:`EQ`,
    so a generator of comparisons is evaluated lazily.
    """
    res = mempty()
    for o in orderings:
        res = mappend(res, o)
        if res is not EQ:
            break
    return res
