"""
Field presence marker for partial updates.

``UNSET`` means "the client did not send this field". It is distinct
from ``None`` (sent as null) and from an empty list (sent as ``[]``),
which matters for relation fields where ``[]`` clears the set.
"""

from typing import TypeVar, Union

T = TypeVar("T")


class _Unset:
    """Singleton type of the UNSET marker."""

    _instance = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

Maybe = Union[T, _Unset]


def is_set(value: object) -> bool:
    """Return True when a field was supplied, even as None or empty."""
    return value is not UNSET
