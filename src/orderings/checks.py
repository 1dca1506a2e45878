from zuper_commons.types import ZValueError

from .constants import OrdConstants
from .ordering_base import Ordering

__all__ = ["check_ordering"]


def check_ordering(o: object, **kwargs) -> None:
    """Checks that a comparator gave back one of the three orderings."""
    if not OrdConstants.checks:
        return

    if not isinstance(o, Ordering):
        msg = "A comparator must return LT, EQ or GT."
        raise ZValueError(msg, o=o, **kwargs)
