import math
from decimal import Decimal
from typing import TypeVar

from toolz import curry
from zuper_commons.types import ZTypeError

from .checks import check_ordering
from .classes import data_type, implements_ordering, is_nan, type_check, type_kind
from .eq import is_eq
from .errors import type_mismatch
from .ordering_base import EQ, GT, LT, Ordering

__all__ = [
    "is_infinity",
    "compare",
    "less_than",
    "less_than_or_equal",
    "greater_than",
    "greater_than_or_equal",
    "maximum",
    "minimum",
]

X = TypeVar("X")


def is_infinity(x: object) -> bool:
    """ True for numbers equal to positive infinity, which is above every other value. """
    if type_kind(x) != "number" or is_nan(x):
        return False
    if isinstance(x, Decimal):
        return x.is_infinite() and not x.is_signed()
    return x == math.inf


@curry
def compare(a: X, b: X) -> Ordering:
    """
    Compares two values of the same type and returns an :py:class:`Ordering`.

    - Positive infinity is greater than anything else, and equal to itself.
    - Values of different types raise :py:class:`TypeMismatch`.
    - If the data type has a registered :py:class:`Ord` instance, its result is returned.
    - Otherwise equal values (see :py:func:`is_eq`) give :any:`EQ`, and ``<``
      decides between :any:`LT` and :any:`GT`.
    - NaN is neither equal to nor less than anything, so it gives :any:`GT`
      on either side.

    It can be applied partially: ``compare(a)(b)`` is the same as ``compare(a, b)``.

    Examples::

        compare(3, 5)           # LT
        compare((2, 1), (1, 9)) # GT
        compare("b", "a")       # GT
    """
    if is_infinity(a):
        return EQ if is_infinity(b) else GT
    if is_infinity(b):
        return LT
    if not type_check(a, b):
        type_mismatch(a, b, "compare")

    instance = implements_ordering(data_type(a))
    if instance is not None:
        res = instance.compare(a, b)
        check_ordering(res, a=a, b=b, instance=instance)
        return res

    if is_nan(a) or is_nan(b):
        return GT
    if is_eq(a, b):
        return EQ
    try:
        return LT if a < b else GT
    except TypeError as e:
        msg = "Values have no Ord instance and do not support '<'."
        raise ZTypeError(msg, a=a, b=b, T=data_type(a)) from e


@curry
def less_than(a: X, b: X) -> bool:
    return compare(a, b) is LT


@curry
def less_than_or_equal(a: X, b: X) -> bool:
    return compare(a, b) is not GT


@curry
def greater_than(a: X, b: X) -> bool:
    return compare(a, b) is GT


@curry
def greater_than_or_equal(a: X, b: X) -> bool:
    return compare(a, b) is not LT


@curry
def maximum(a: X, b: X) -> X:
    """ The greater of the two values; ``b`` if they are equal. """
    return b if less_than_or_equal(a, b) else a


@curry
def minimum(a: X, b: X) -> X:
    """ The lesser of the two values; ``a`` if they are equal. """
    return a if less_than_or_equal(a, b) else b
