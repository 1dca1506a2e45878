from typing import ClassVar

__all__ = ["OrdConstants"]


class OrdConstants:
    """Global constants for the package."""

    checks: ClassVar[bool] = False
    """
        If true activates extra checks on the results of comparators
        and on the operands of the Ordering monoid.
    """
