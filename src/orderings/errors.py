from typing import Any, NoReturn

from zuper_commons.types import ZTypeError

__all__ = ["TypeMismatch", "type_mismatch"]


class TypeMismatch(ZTypeError):
    """ Two values were given to an operation that needs values of the same type. """

    a: Any
    b: Any
    origin: str

    def __init__(self, msg: str, a: Any, b: Any, origin: str):
        self.a = a
        self.b = b
        self.origin = origin
        super().__init__(msg, a=a, b=b, Ta=type(a), Tb=type(b), origin=origin)


def type_mismatch(a: Any, b: Any, origin: str) -> NoReturn:
    msg = f"Values passed to {origin}() are not of the same comparable type."
    raise TypeMismatch(msg, a=a, b=b, origin=origin)
