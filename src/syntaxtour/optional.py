"""Optional values as an explicit sum type.

A value is either ``Present(value)`` or ``ABSENT``. Safe access goes through
``map_or``/``get_or_else`` with a fallback; ``unwrap`` forces the value and
fails loudly when there is none.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


class NullReferenceError(Exception):
    """Raised when an absent value is forced."""


@dataclass(frozen=True)
class Present:
    """A value that is there."""

    value: Any


@dataclass(frozen=True)
class Absent:
    """No value."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()

Option = Union[Present, Absent]


def optional(value: Any) -> Option:
    """Wrap a plain Python value, mapping None to ABSENT.

    Examples:
        >>> optional(None)
        ABSENT
        >>> optional("kotlin")
        Present(value='kotlin')
    """
    if value is None:
        return ABSENT
    return Present(value)


def is_present(opt: Option) -> bool:
    """Return True if opt holds a value."""
    return isinstance(opt, Present)


def get_or_else(opt: Option, default: T) -> Any:
    """Return the held value, or default when absent."""
    if isinstance(opt, Present):
        return opt.value
    return default


def map_or(opt: Option, fn: Callable[[Any], R], default: R) -> R:
    """Apply fn to the held value, falling back to default when absent.

    Examples:
        >>> map_or(Present("abc"), len, 0)
        3
        >>> map_or(ABSENT, len, 0)
        0
    """
    if isinstance(opt, Present):
        return fn(opt.value)
    return default


def safe_length(opt: Option) -> int:
    """Length of the held value, 0 when absent."""
    return map_or(opt, len, 0)


def unwrap(opt: Option) -> Any:
    """Force the held value out.

    Raises:
        NullReferenceError: If opt is absent.
    """
    if isinstance(opt, Present):
        return opt.value
    raise NullReferenceError("forced unwrap of an absent value")


def filter_present(items: Iterable[Any]) -> list[Any]:
    """Drop absent entries and unwrap present ones, keeping order.

    Accepts a mix of ``Present``, ``ABSENT``, raw ``None`` and raw values.

    Examples:
        >>> filter_present([1, Present(2), ABSENT, None, 3])
        [1, 2, 3]
    """
    result = []
    for item in items:
        if item is None or isinstance(item, Absent):
            continue
        if isinstance(item, Present):
            result.append(item.value)
        else:
            result.append(item)
    return result
