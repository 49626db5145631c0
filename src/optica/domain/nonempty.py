"""NonEmptyList — an ordered sequence guaranteed to hold at least one item.

Used as the error carrier of a validation ``Failure``. Concatenation keeps
the left operand's items first, so errors accumulate in argument order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from optica.domain.errors import EmptyListError


@dataclass(frozen=True, slots=True)
class NonEmptyList[T]:
    """Head plus a (possibly empty) tuple tail."""

    head: T
    tail: tuple[T, ...] = ()

    @classmethod
    def of(cls, first: T, *rest: T) -> NonEmptyList[T]:
        return cls(first, tuple(rest))

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmptyList[T]:
        """Build from any iterable.

        Raises:
            EmptyListError: If *items* yields nothing.
        """
        iterator = iter(items)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyListError("NonEmptyList requires at least one item") from None
        return cls(first, tuple(iterator))

    def append(self, other: NonEmptyList[T]) -> NonEmptyList[T]:
        return NonEmptyList(self.head, (*self.tail, other.head, *other.tail))

    def __add__(self, other: NonEmptyList[T]) -> NonEmptyList[T]:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        return self.append(other)

    def map[U](self, f: Callable[[T], U]) -> NonEmptyList[U]:
        return NonEmptyList(f(self.head), tuple(f(item) for item in self.tail))

    def to_list(self) -> list[T]:
        return [self.head, *self.tail]

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            msg = f"NonEmptyList indices must be integers, not {type(index).__name__}"
            raise TypeError(msg)
        if index in (0, -len(self)):
            return self.head
        return self.tail[index - 1 if index > 0 else index]


def singleton[T](item: T) -> NonEmptyList[T]:
    return NonEmptyList(item)
