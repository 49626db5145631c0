"""Tests for the total Lens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import pytest
from pydantic import BaseModel

from optica.domain.errors import UnsupportedTargetError
from optica.domain.instance import InstanceLens
from optica.domain.lens import Lens, compose
from optica.domain.maybe import NOTHING, Some
from optica.domain.partial import PartialLens
from optica.domain.samples import Person


@dataclass(frozen=True)
class Address:
    street: str
    zip_code: str


@dataclass(frozen=True)
class Customer:
    person: Person
    address: Address


class Point(NamedTuple):
    x: int
    y: int


class Tag(BaseModel):
    model_config = {"frozen": True}

    label: str
    weight: int = 1


CUSTOMER_ADDRESS = Lens.attr("address")
ADDRESS_STREET = Lens.attr("street")
CUSTOMER_PERSON = Lens.attr("person")


class TestGetSetUpdate:
    def test_get(self, john: Person) -> None:
        assert Person.NAME.get(john) == "john"
        assert Person.AGE.get(john) == 55

    def test_set(self, john: Person) -> None:
        hector = Person.NAME.set("hector", john)
        assert hector.name == "hector"
        assert hector.age == 55
        assert john.name == "john"

    def test_update(self, john: Person) -> None:
        john_doe = Person.NAME.update(john, lambda x: x + " doe")
        assert john_doe.name == "john doe"

    def test_update_calls_function_once(self, john: Person) -> None:
        calls: list[int] = []

        def bump(age: int) -> int:
            calls.append(age)
            return age + 1

        assert Person.AGE.update(john, bump).age == 56
        assert calls == [55]

    def test_create_matches_constructor(self) -> None:
        lens = Lens.create(lambda p: p[0], lambda v, p: (v, p[1]))
        assert lens.set(9, (1, 2)) == (9, 2)


@pytest.mark.parametrize(
    ("lens", "whole", "values"),
    [
        (Person.NAME, Person("john", 55), ["hector", "", "john"]),
        (Person.AGE, Person("john", 55), [1, 55, 100]),
        (Lens.key("a"), {"a": 1, "b": 2}, [0, 1, 5]),
        (Lens.index(0), (1, 2, 3), [7, 1]),
        (Lens.first(), ("l", "r"), ["x"]),
        (Lens.second(), ("l", "r"), ["x"]),
        (Lens.identity(), 42, [0, 42]),
        (
            CUSTOMER_ADDRESS >> ADDRESS_STREET,
            Customer(Person("ann", 30), Address("Main St", "32801")),
            ["Oak Ave", "Main St"],
        ),
        (Lens.key("n").xmap(str, int), {"n": 1}, ["2", "7"]),
        (Person.NAME.pair(Lens.first()), (Person("john", 55), (1, 2)), [("a", 0), ("john", 1)]),
    ],
)
class TestLensLaws:
    def test_get_set(self, lens: Lens, whole: object, values: list[object]) -> None:
        assert lens.set(lens.get(whole), whole) == whole

    def test_set_get(self, lens: Lens, whole: object, values: list[object]) -> None:
        for value in values:
            assert lens.get(lens.set(value, whole)) == value

    def test_set_set(self, lens: Lens, whole: object, values: list[object]) -> None:
        for first in values:
            for second in values:
                assert lens.set(second, lens.set(first, whole)) == lens.set(second, whole)

    def test_double_set_is_idempotent(
        self, lens: Lens, whole: object, values: list[object]
    ) -> None:
        for value in values:
            once = lens.set(value, whole)
            assert lens.set(value, once) == once


class TestComposition:
    def test_get_through_nested_fields(self) -> None:
        customer = Customer(Person("ann", 30), Address("Main St", "32801"))
        street = CUSTOMER_ADDRESS.and_then(ADDRESS_STREET)
        assert street.get(customer) == "Main St"

    def test_set_rebuilds_every_level(self) -> None:
        customer = Customer(Person("ann", 30), Address("Main St", "32801"))
        moved = (CUSTOMER_ADDRESS >> ADDRESS_STREET).set("Oak Ave", customer)
        assert moved == Customer(Person("ann", 30), Address("Oak Ave", "32801"))
        assert customer.address.street == "Main St"

    def test_mixes_attr_and_explicit_lenses(self) -> None:
        customer = Customer(Person("ann", 30), Address("Main St", "32801"))
        older = (CUSTOMER_PERSON >> Person.AGE).update(customer, lambda a: a + 1)
        assert older.person.age == 31

    def test_associativity(self) -> None:
        whole = {"outer": ({"inner": 1}, "keep")}
        l1, l2, l3 = Lens.key("outer"), Lens.first(), Lens.key("inner")
        left = (l1 >> l2) >> l3
        right = l1 >> (l2 >> l3)
        assert left.get(whole) == right.get(whole) == 1
        for value in (0, 1, 99):
            assert left.set(value, whole) == right.set(value, whole)

    def test_compose_folds_left(self) -> None:
        whole = {"outer": ({"inner": 1}, "keep")}
        lens = compose(Lens.key("outer"), Lens.first(), Lens.key("inner"))
        assert lens.set(5, whole) == {"outer": ({"inner": 5}, "keep")}

    def test_identity_is_neutral(self, john: Person) -> None:
        lens = Lens.identity() >> Person.NAME
        assert lens.set("x", john) == Person.NAME.set("x", john)

    def test_with_partial_inner_yields_partial(self) -> None:
        lens = Lens.attr("value") >> PartialLens.key("k")
        assert isinstance(lens, PartialLens)
        assert lens.try_get(Some({"k": 1})) == Some(1)
        assert lens.try_get(Some({})) == NOTHING


class TestAttrLens:
    def test_named_tuple(self) -> None:
        assert Lens.attr("x").set(3, Point(1, 2)) == Point(3, 2)

    def test_pydantic_model(self) -> None:
        updated = Lens.attr("label").set("blue", Tag(label="red", weight=4))
        assert updated == Tag(label="blue", weight=4)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(UnsupportedTargetError):
            Lens.attr("real").set(1.0, 3j)


class TestStockLenses:
    def test_key_returns_new_dict(self) -> None:
        original = {"a": 1}
        updated = Lens.key("a").set(2, original)
        assert updated == {"a": 2}
        assert original == {"a": 1}

    def test_index_keeps_sequence_kind(self) -> None:
        assert Lens.index(1).set("x", [1, 2]) == [1, "x"]
        assert Lens.index(1).set("x", (1, 2)) == (1, "x")

    def test_xmap(self) -> None:
        celsius = Lens.key("temp")
        fahrenheit = celsius.xmap(lambda c: c * 9 / 5 + 32, lambda f: (f - 32) * 5 / 9)
        reading = {"temp": 100.0}
        assert fahrenheit.get(reading) == 212.0
        assert fahrenheit.set(32.0, reading) == {"temp": 0.0}

    def test_pair(self, john: Person) -> None:
        both = Person.NAME.pair(Lens.first())
        wholes = (john, (1, 2))
        assert both.get(wholes) == ("john", 1)
        assert both.set(("jim", 9), wholes) == (Person("jim", 55), (9, 2))


class TestBind:
    def test_bind_returns_instance_lens(self, john: Person) -> None:
        bound = Person.NAME.bind(john)
        assert isinstance(bound, InstanceLens)
        assert bound.set("hector") == Person("hector", 55)
