"""PartialLens — a composable accessor for a field that may be absent.

A ``PartialLens[S, A]`` holds a single locator::

    get_or_set: S -> Maybe[(rebuild: A -> S, current: A)]

The locator either reports absence (``Nothing``) or hands back the current
value together with a function that rebuilds the whole around a new value.
Because the rebuild is derived from the same ``S`` that produced the value,
a write is only reachable when a read would have succeeded:

- Setting or updating through an absent path returns the whole unchanged.
- Absence never raises; it is a plain ``Nothing``.

Composition short-circuits as soon as either leg is absent. When the outer
field is present but the inner one is not, the outer rebuild is dropped, so
a write through the composed lens leaves the entire whole untouched rather
than rewriting the outer field alone.

Examples:
    >>> entry = PartialLens.key("city")
    >>> entry.try_get({"city": "Orlando"})
    Some(value='Orlando')
    >>> entry.set("Miami", {})
    {}
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from optica.domain.instance import InstancePartialLens
from optica.domain.lens import Lens, replace_index
from optica.domain.maybe import NOTHING, Maybe, Some

type Locator[S, A] = Callable[[S], Maybe[tuple[Callable[[A], S], A]]]


@dataclass(frozen=True, slots=True)
class PartialLens[S, A]:
    """Accessor for a field whose presence depends on the whole."""

    get_or_set: Locator[S, A]

    @classmethod
    def create(
        cls,
        getter: Callable[[S], Maybe[A]],
        setter: Callable[[A, S], S],
    ) -> PartialLens[S, A]:
        """Build from a getter returning ``Maybe`` and a total setter.

        The setter is only ever called when the getter reported a value.
        """

        def locate(whole: S) -> Maybe[tuple[Callable[[A], S], A]]:
            return getter(whole).map(lambda current: (lambda value: setter(value, whole), current))

        return cls(locate)

    @classmethod
    def from_lens(cls, lens: Lens[S, A]) -> PartialLens[S, A]:
        """A partial lens that is never absent."""

        def locate(whole: S) -> Maybe[tuple[Callable[[A], S], A]]:
            return Some((lambda value: lens.set(value, whole), lens.get(whole)))

        return cls(locate)

    def try_get(self, whole: S) -> Maybe[A]:
        return self.get_or_set(whole).map(lambda found: found[1])

    def get_or_else(self, whole: S, default: Any) -> Any:
        return self.try_get(whole).get_or_else(default)

    def set(self, value: A, whole: S) -> S:
        match self.get_or_set(whole):
            case Some((rebuild, _)):
                return rebuild(value)
            case _:
                return whole

    def update(self, whole: S, f: Callable[[A], A]) -> S:
        match self.get_or_set(whole):
            case Some((rebuild, current)):
                return rebuild(f(current))
            case _:
                return whole

    def and_then[B](self, inner: PartialLens[A, B] | Lens[A, B]) -> PartialLens[S, B]:
        """Compose with an inner partial (or total) lens.

        Absent when either leg is absent. A present outer with an absent
        inner is reported as absent, discarding the outer rebuild.
        """
        inner_lens = PartialLens.from_lens(inner) if isinstance(inner, Lens) else inner
        outer = self

        def locate(whole: S) -> Maybe[tuple[Callable[[B], S], B]]:
            match outer.get_or_set(whole):
                case Some((rebuild_outer, current_outer)):
                    return inner_lens.get_or_set(current_outer).map(
                        lambda found: (
                            lambda value: rebuild_outer(found[0](value)),
                            found[1],
                        )
                    )
                case _:
                    return NOTHING

        return PartialLens(locate)

    def __rshift__[B](self, inner: PartialLens[A, B] | Lens[A, B]) -> PartialLens[S, B]:
        return self.and_then(inner)

    def bind(self, instance: S) -> InstancePartialLens[S, A]:
        """Pin this partial lens to *instance*."""
        return InstancePartialLens(instance, self)

    # --- Stock partial lenses ---

    @staticmethod
    def some() -> PartialLens[Maybe[Any], Any]:
        """Focus on the value inside a ``Maybe``; writing wraps it in ``Some``."""
        return PartialLens.create(lambda option: option, lambda value, _option: Some(value))

    @staticmethod
    def key(key: Hashable) -> PartialLens[Mapping[Any, Any], Any]:
        """Mapping entry present only when *key* is in the mapping."""

        def locate(mapping: Mapping[Any, Any]) -> Maybe[tuple[Callable[[Any], Any], Any]]:
            if key not in mapping:
                return NOTHING
            return Some((lambda value: {**mapping, key: value}, mapping[key]))

        return PartialLens(locate)

    @staticmethod
    def index(index: int) -> PartialLens[Sequence[Any], Any]:
        """Sequence position present only when *index* is in range."""

        def locate(seq: Sequence[Any]) -> Maybe[tuple[Callable[[Any], Any], Any]]:
            if not -len(seq) <= index < len(seq):
                return NOTHING
            return Some((lambda value: replace_index(seq, index, value), seq[index]))

        return PartialLens(locate)

    @staticmethod
    def when(predicate: Callable[[Any], bool], lens: Lens[Any, Any]) -> PartialLens[Any, Any]:
        """Restrict a total *lens* to wholes that satisfy *predicate*."""

        def locate(whole: Any) -> Maybe[tuple[Callable[[Any], Any], Any]]:
            if not predicate(whole):
                return NOTHING
            return Some((lambda value: lens.set(value, whole), lens.get(whole)))

        return PartialLens(locate)
