from typing import TypeVar

from toolz import curry

from .classes import data_type, implements_eq, is_nan, type_check
from .errors import type_mismatch

__all__ = ["is_eq", "is_not_eq"]

X = TypeVar("X")


@curry
def is_eq(a: X, b: X) -> bool:
    """
    Equality of two values of the same type.

    Uses the instance registered for the data type if there is one,
    otherwise ``==``.
    """
    if not type_check(a, b):
        type_mismatch(a, b, "is_eq")
    if is_nan(a) or is_nan(b):
        return False
    instance = implements_eq(data_type(a))
    if instance is not None:
        return instance.is_eq(a, b)
    return a == b


@curry
def is_not_eq(a: X, b: X) -> bool:
    return not is_eq(a, b)
