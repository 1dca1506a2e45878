from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from zuper_commons.types import ZValueError

from .classes import Ord, register_ord
from .comparison import compare
from .ordering_base import mconcat, Ordering

__all__ = [
    "OrderingOrd",
    "SequenceOrd",
    "LexicographicOrd",
    "FieldsOrd",
    "KeyOrd",
    "ReversedOrd",
]

A = TypeVar("A")
B = TypeVar("B")


class OrderingOrd(Ord[Ordering]):
    """ Orders the orderings themselves: ``LT < EQ < GT``. """

    def compare(self, a: Ordering, b: Ordering) -> Ordering:
        return compare(int(a), int(b))

    def __repr__(self) -> str:
        return "OrderingOrd"


class SequenceOrd(Ord[Sequence[Any]]):
    """
    The lexicographic order on sequences.

    Elements are compared pairwise with :py:func:`compare`; if one sequence
    is a prefix of the other, the shorter one comes first.
    """

    def compare(self, a: Sequence[Any], b: Sequence[Any]) -> Ordering:
        return mconcat(self._comparisons(a, b))

    @staticmethod
    def _comparisons(a: Sequence[Any], b: Sequence[Any]) -> Iterator[Ordering]:
        yield from map(compare, a, b)
        yield compare(len(a), len(b))

    def __repr__(self) -> str:
        return "SequenceOrd"


class LexicographicOrd(Ord[Tuple[Any, ...]]):
    """ Compares tuples position by position, each position with its own order. """

    ords: Tuple[Ord[Any], ...]

    def __init__(self, ords: Tuple[Ord[Any], ...]):
        self.ords = tuple(ords)

    def __repr__(self) -> str:
        return f"LexicographicOrd({self.ords})"

    def compare(self, a: Tuple[Any, ...], b: Tuple[Any, ...]) -> Ordering:
        n = len(self.ords)
        if len(a) != n or len(b) != n:
            msg = f"Expected tuples of length {n}."
            raise ZValueError(msg, a=a, b=b, ords=self.ords)
        return mconcat(o.compare(x, y) for o, x, y in zip(self.ords, a, b))


class FieldsOrd(Ord[Any]):
    """
    Compares objects by a sequence of attributes, in order.
    Useful to give a dataclass a structural order.
    """

    fields: Tuple[str, ...]

    def __init__(self, fields: Sequence[str]):
        if not fields:
            raise ZValueError("At least one field is needed.", fields=fields)
        self.fields = tuple(fields)

    def __repr__(self) -> str:
        return f"FieldsOrd({self.fields})"

    def compare(self, a: Any, b: Any) -> Ordering:
        return mconcat(compare(getattr(a, f), getattr(b, f)) for f in self.fields)


@dataclass(frozen=True)
class KeyOrd(Ord[A], Generic[A, B]):
    """ Compares the values after converting them with ``convert``. """

    convert: Callable[[A], B]
    p0: Optional[Ord[B]] = None

    def compare(self, x: A, y: A) -> Ordering:
        c: Callable[[A], B] = self.convert
        x1: B = c(x)
        y1: B = c(y)
        if self.p0 is None:
            return compare(x1, y1)
        return self.p0.compare(x1, y1)


@dataclass(frozen=True)
class ReversedOrd(Ord[A]):
    """ The opposite of another order. """

    p0: Ord[A]

    def compare(self, a: A, b: A) -> Ordering:
        return self.p0.compare(a, b).invert()


register_ord(Ordering, OrderingOrd())
register_ord(tuple, SequenceOrd())
register_ord(list, SequenceOrd())
