import numbers
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, ClassVar, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

from frozendict import frozendict
from zuper_commons.types import check_isinstance, ZValueError

from . import logger
from .ordering_base import EQ, Ordering

__all__ = [
    "Eq",
    "Ord",
    "Kind",
    "data_type",
    "type_kind",
    "type_check",
    "is_nan",
    "register_eq",
    "register_ord",
    "ord_instance",
    "unregister",
    "implements_eq",
    "implements_ordering",
    "registered_instances",
]

X = TypeVar("X")

Kind = Union[str, type]
""" Either the name of a primitive kind or a data type. """


class Eq(Generic[X], ABC):
    """
    The interface for an equality relation on a data type.
    The default is Python's ``==``.
    """

    def is_eq(self, a: X, b: X) -> bool:
        return a == b


class Ord(Eq[X]):
    """
    The interface for a total order on a data type.

    Only :py:meth:`compare` needs to be implemented; equality is derived
    from it so that the two always agree.
    """

    @abstractmethod
    def compare(self, a: X, b: X) -> Ordering:
        """
        Compares two values of the data type.

        It returns one of 3 outcomes:

        - :any:`LT`: ``a`` comes before ``b``.
        - :any:`EQ`: ``a`` and ``b`` are equal.
        - :any:`GT`: ``a`` comes after ``b``.

        """

    def is_eq(self, a: X, b: X) -> bool:
        return self.compare(a, b) is EQ


class InstanceRegistry:
    instances: ClassVar[Dict[type, Eq]] = {}


def data_type(x: object) -> type:
    return type(x)


def type_kind(x: object) -> Kind:
    """
    Returns what must match for two values to be comparable.

    The primitive kinds are ``"number"`` (any real number, including
    :py:class:`~decimal.Decimal` but excluding ``bool``), ``"bool"``, ``"str"``
    and ``"bytes"``. Any other value has its data type as kind.
    """
    if isinstance(x, bool):
        return "bool"
    if isinstance(x, (numbers.Real, Decimal)):
        return "number"
    if isinstance(x, str):
        return "str"
    if isinstance(x, bytes):
        return "bytes"
    return data_type(x)


def type_check(a: object, b: object) -> bool:
    return type_kind(a) == type_kind(b)


def is_nan(x: object) -> bool:
    """ True for numbers that are not a number. Never raises, also for signaling NaNs. """
    if type_kind(x) != "number":
        return False
    if isinstance(x, Decimal):
        return x.is_nan()
    return x != x


def _register(T: type, instance: Eq) -> None:
    check_isinstance(T, type, instance=instance)
    previous = InstanceRegistry.instances.get(T)
    if previous is not None:
        logger.warning("Replacing instance", T=T, previous=previous, instance=instance)
    else:
        logger.debug("Registering instance", T=T, instance=instance)
    InstanceRegistry.instances[T] = instance


def register_eq(T: type, instance: Eq) -> None:
    """ Declares that ``T`` uses ``instance`` for equality. """
    check_isinstance(instance, Eq, T=T)
    _register(T, instance)


def register_ord(T: type, instance: Ord) -> None:
    """ Declares that ``T`` is ordered by ``instance``. """
    check_isinstance(instance, Ord, T=T)
    _register(T, instance)


def ord_instance(instance: Ord) -> Callable[[Type[X]], Type[X]]:
    """ Class decorator version of :py:func:`register_ord`. """

    def register(T: Type[X]) -> Type[X]:
        register_ord(T, instance)
        return T

    return register


def unregister(T: type) -> None:
    if T not in InstanceRegistry.instances:
        msg = "No instance registered for this type"
        raise ZValueError(msg, T=T, registered=list(InstanceRegistry.instances))
    instance = InstanceRegistry.instances.pop(T)
    logger.debug("Unregistered instance", T=T, instance=instance)


def implements_eq(T: type) -> Optional[Eq]:
    """ Returns the instance for ``T`` or its nearest base class, if any. """
    for c in T.__mro__:
        instance = InstanceRegistry.instances.get(c)
        if instance is not None:
            return instance
    return None


def implements_ordering(T: type) -> Optional[Ord]:
    """
    Returns the :py:class:`Ord` instance for ``T`` or its nearest base class, if any.

    The nearest registration wins: if it is only an :py:class:`Eq`, there is no order,
    even when a base class further up has an :py:class:`Ord`.
    """
    instance = implements_eq(T)
    if isinstance(instance, Ord):
        return instance
    return None


def registered_instances() -> Mapping[type, Eq]:
    return frozendict(InstanceRegistry.instances)
