"""Optional values as a tagged variant.

``Some(value)`` marks presence, ``Nothing()`` marks absence. ``None`` is a
legal value inside ``Some``; absence is never modelled as a null reference.

Examples:
    >>> Some(2).map(lambda x: x * 10)
    Some(value=20)
    >>> NOTHING.map(lambda x: x * 10)
    Nothing()
    >>> maybe(None).get_or_else("fallback")
    'fallback'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from optica.domain.errors import UnwrapError


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def bind[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def get_or_else(self, default: Any) -> T:
        return self.value

    def to_optional(self) -> T | None:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value. All instances compare equal."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def bind(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def get_or_else[D](self, default: D) -> D:
        return default

    def to_optional(self) -> None:
        return None

    def unwrap(self) -> Any:
        raise UnwrapError("Called unwrap() on Nothing")


NOTHING = Nothing()

type Maybe[T] = Some[T] | Nothing


def maybe[T](value: T | None) -> Maybe[T]:
    """Wrap *value* in ``Some``, or return ``NOTHING`` when it is None."""
    if value is None:
        return NOTHING
    return Some(value)


from_optional = maybe
