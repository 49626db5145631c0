"""Lens — a total, composable getter/setter pair for one field of an immutable value.

A ``Lens[S, A]`` focuses on a value of type ``A`` inside a whole of type
``S``. Reading never fails and writing always returns a new whole; nothing is
mutated in place.

Lens laws (caller obligation for every getter/setter pair):

- GetSet: ``lens.set(lens.get(s), s) == s``
- SetGet: ``lens.get(lens.set(a, s)) == a``
- SetSet: ``lens.set(a2, lens.set(a1, s)) == lens.set(a2, s)``

Lenses compose with :meth:`Lens.and_then` (or ``>>``) to reach nested
fields. Composing with a :class:`~optica.domain.partial.PartialLens` yields a
partial lens.

Examples:
    >>> from dataclasses import dataclass
    >>> @dataclass(frozen=True)
    ... class Point:
    ...     x: int
    ...     y: int
    >>> x = Lens.attr("x")
    >>> x.set(5, Point(1, 2))
    Point(x=5, y=2)
    >>> x.update(Point(1, 2), lambda v: v + 1)
    Point(x=2, y=2)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any, overload

from optica.domain.errors import UnsupportedTargetError
from optica.domain.instance import InstanceLens

if TYPE_CHECKING:
    from optica.domain.partial import PartialLens


def replace_attr(obj: Any, name: str, value: Any) -> Any:
    """Return a copy of *obj* with attribute *name* set to *value*.

    Supports frozen dataclasses, pydantic models and named tuples.

    Raises:
        UnsupportedTargetError: For any other type.
    """
    if hasattr(obj, "model_copy"):
        return obj.model_copy(update={name: value})
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.replace(obj, **{name: value})
    if isinstance(obj, tuple) and hasattr(obj, "_replace"):
        return obj._replace(**{name: value})
    kind = type(obj).__name__
    msg = f"Cannot rebuild {kind!r}: expected a dataclass, pydantic model, or named tuple"
    raise UnsupportedTargetError(msg)


def replace_index(seq: Sequence[Any], index: int, value: Any) -> Sequence[Any]:
    """Return a copy of *seq* with position *index* replaced, keeping tuple vs list."""
    items = list(seq)
    items[index] = value
    if isinstance(seq, tuple):
        return tuple(items)
    return items


@dataclass(frozen=True, slots=True)
class Lens[S, A]:
    """Total accessor: ``get: S -> A`` and ``set: (A, S) -> S``."""

    get: Callable[[S], A]
    set: Callable[[A, S], S]

    @classmethod
    def create(cls, getter: Callable[[S], A], setter: Callable[[A, S], S]) -> Lens[S, A]:
        return cls(getter, setter)

    def update(self, whole: S, f: Callable[[A], A]) -> S:
        """Apply *f* to the focused value and return the rebuilt whole."""
        return self.set(f(self.get(whole)), whole)

    @overload
    def and_then[B](self, inner: Lens[A, B]) -> Lens[S, B]: ...

    @overload
    def and_then[B](self, inner: PartialLens[A, B]) -> PartialLens[S, B]: ...

    def and_then(self, inner: Any) -> Any:
        """Compose with a lens focusing inside this lens's focus.

        A total inner lens gives a total lens. A partial inner lens gives a
        partial lens whose outer leg is never absent.
        """
        if isinstance(inner, Lens):
            outer = self

            def get(whole: Any) -> Any:
                return inner.get(outer.get(whole))

            def set_(value: Any, whole: Any) -> Any:
                return outer.set(inner.set(value, outer.get(whole)), whole)

            return Lens(get, set_)
        return self.to_partial().and_then(inner)

    def __rshift__(self, inner: Any) -> Any:
        return self.and_then(inner)

    def xmap[B](self, forward: Callable[[A], B], backward: Callable[[B], A]) -> Lens[S, B]:
        """View the focus through an isomorphism ``forward``/``backward``."""
        lens = self
        return Lens(
            lambda whole: forward(lens.get(whole)),
            lambda value, whole: lens.set(backward(value), whole),
        )

    def pair[S2, A2](self, other: Lens[S2, A2]) -> Lens[tuple[S, S2], tuple[A, A2]]:
        """Run this lens and *other* side by side over a pair of wholes."""
        lens = self
        return Lens(
            lambda wholes: (lens.get(wholes[0]), other.get(wholes[1])),
            lambda values, wholes: (
                lens.set(values[0], wholes[0]),
                other.set(values[1], wholes[1]),
            ),
        )

    def to_partial(self) -> PartialLens[S, A]:
        from optica.domain.partial import PartialLens

        return PartialLens.from_lens(self)

    def bind(self, instance: S) -> InstanceLens[S, A]:
        """Pin this lens to *instance* (see :class:`InstanceLens`)."""
        return InstanceLens(instance, self)

    # --- Stock lenses ---

    @staticmethod
    def identity() -> Lens[Any, Any]:
        return Lens(lambda whole: whole, lambda value, _whole: value)

    @staticmethod
    def attr(name: str) -> Lens[Any, Any]:
        """Lens on attribute *name* of a dataclass, pydantic model, or named tuple."""
        return Lens(
            lambda whole: getattr(whole, name),
            lambda value, whole: replace_attr(whole, name, value),
        )

    @staticmethod
    def key(key: Hashable) -> Lens[Mapping[Any, Any], Any]:
        """Lens on a mapping entry that is always present. ``set`` returns a new dict."""
        return Lens(
            lambda mapping: mapping[key],
            lambda value, mapping: {**mapping, key: value},
        )

    @staticmethod
    def index(index: int) -> Lens[Sequence[Any], Any]:
        """Lens on a tuple or list position that is always in range."""
        return Lens(
            lambda seq: seq[index],
            lambda value, seq: replace_index(seq, index, value),
        )

    @staticmethod
    def first() -> Lens[tuple[Any, Any], Any]:
        return Lens(lambda pair: pair[0], lambda value, pair: (value, pair[1]))

    @staticmethod
    def second() -> Lens[tuple[Any, Any], Any]:
        return Lens(lambda pair: pair[1], lambda value, pair: (pair[0], value))


def compose(first: Lens[Any, Any], *rest: Lens[Any, Any]) -> Lens[Any, Any]:
    """Left fold of :meth:`Lens.and_then` over one or more lenses."""
    return reduce(lambda acc, lens: acc.and_then(lens), rest, first)
