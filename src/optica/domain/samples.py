"""Sample models showing how application types declare and use optics.

``Person`` pairs class-level lenses with instance-bound wrappers and builds
itself through the validation applicative. ``Search`` nests an optional
``StateCity`` that in turn holds an optional city, reached through one
composed partial lens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from optica.domain.instance import InstanceLens, InstancePartialLens
from optica.domain.lens import Lens
from optica.domain.maybe import NOTHING, Maybe, Some
from optica.domain.partial import PartialLens
from optica.domain.validation import Validated, failure, lift, success, validator

MANDATORY_MESSAGE = "Mandatory field"
POSITIVE_MESSAGE = "Field must be positive"

mandatory = validator(lambda s: bool(s), MANDATORY_MESSAGE)


def positive(age: int) -> Validated[int, str]:
    if age <= 0:
        return failure(POSITIVE_MESSAGE)
    return success(age)


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int

    NAME: ClassVar[Lens[Person, str]] = Lens.create(
        lambda p: p.name, lambda value, p: Person(value, p.age)
    )
    AGE: ClassVar[Lens[Person, int]] = Lens.create(
        lambda p: p.age, lambda value, p: Person(p.name, value)
    )

    @property
    def name_l(self) -> InstanceLens[Person, str]:
        return InstanceLens(self, Person.NAME)

    @property
    def age_l(self) -> InstanceLens[Person, int]:
        return InstanceLens(self, Person.AGE)

    @classmethod
    def try_new(cls, name: str, age: int) -> Validated[Person, str]:
        """Validate both fields, reporting every failing one."""
        return lift(cls, 2).ap(mandatory(name)).ap(positive(age))


@dataclass(frozen=True, slots=True)
class StateCity:
    state: str
    city: Maybe[str] = NOTHING

    CITY: ClassVar[PartialLens[StateCity, str]] = PartialLens.create(
        lambda sc: sc.city, lambda value, sc: StateCity(sc.state, Some(value))
    )


@dataclass(frozen=True, slots=True)
class Search:
    name: Maybe[str] = NOTHING
    state_city: Maybe[StateCity] = NOTHING

    STATE_CITY: ClassVar[PartialLens[Search, StateCity]] = PartialLens.create(
        lambda s: s.state_city, lambda value, s: Search(s.name, Some(value))
    )
    CITY: ClassVar[PartialLens[Search, str]] = STATE_CITY >> StateCity.CITY

    @property
    def city_p(self) -> InstancePartialLens[Search, str]:
        return InstancePartialLens(self, Search.CITY)
