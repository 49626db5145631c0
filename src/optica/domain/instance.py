"""Instance-bound optics.

An instance wrapper pins one value to a lens so call sites read
``person.name_l.set("hector")`` instead of ``Person.NAME.set("hector", person)``.
The held instance is never mutated: ``set`` and ``update`` return a new whole.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from optica.domain.lens import Lens
    from optica.domain.maybe import Maybe
    from optica.domain.partial import PartialLens


@dataclass(frozen=True, slots=True)
class InstanceLens[S, A]:
    """A total lens bound to one instance."""

    instance: S
    lens: Lens[S, A]

    @classmethod
    def create(cls, instance: S, lens: Lens[S, A]) -> InstanceLens[S, A]:
        return cls(instance, lens)

    def get(self) -> A:
        return self.lens.get(self.instance)

    def set(self, value: A) -> S:
        return self.lens.set(value, self.instance)

    def update(self, f: Callable[[A], A]) -> S:
        return self.lens.update(self.instance, f)


@dataclass(frozen=True, slots=True)
class InstancePartialLens[S, A]:
    """A partial lens bound to one instance."""

    instance: S
    lens: PartialLens[S, A]

    @classmethod
    def create(cls, instance: S, lens: PartialLens[S, A]) -> InstancePartialLens[S, A]:
        return cls(instance, lens)

    def try_get(self) -> Maybe[A]:
        return self.lens.try_get(self.instance)

    def get_or_else(self, default: Any) -> Any:
        return self.lens.get_or_else(self.instance, default)

    def set(self, value: A) -> S:
        return self.lens.set(value, self.instance)

    def update(self, f: Callable[[A], A]) -> S:
        return self.lens.update(self.instance, f)


def bind(instance: Any, optic: Any) -> InstanceLens[Any, Any] | InstancePartialLens[Any, Any]:
    """Bind *instance* to a Lens or PartialLens, picking the matching wrapper."""
    return optic.bind(instance)
