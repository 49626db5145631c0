"""Validation applicative — build values while accumulating every failure.

A validated value is either ``Success(value)`` or ``Failure(errors)`` where
``errors`` is a :class:`~optica.domain.nonempty.NonEmptyList`. Combining
several independently validated inputs through :func:`ap` keeps going past
the first failure and concatenates the error lists in argument order:

=================  =================  ======================
accumulated        next               result
=================  =================  ======================
``Success(f)``     ``Success(a)``     ``Success(f(a))``
``Success(f)``     ``Failure(e)``     ``Failure(e)``
``Failure(e1)``    ``Success(_)``     ``Failure(e1)``
``Failure(e1)``    ``Failure(e2)``    ``Failure(e1 ++ e2)``
=================  =================  ======================

Constructors are lifted with an explicit arity (:func:`lift`) or through the
variadic :func:`apply_all`; there is no signature introspection.

Examples:
    >>> mandatory = validator(bool, "Mandatory field")
    >>> positive = validator(lambda n: n > 0, "Field must be positive")
    >>> apply_all(lambda name, age: (name, age), mandatory(""), positive(-1))
    Failure(errors=NonEmptyList(head='Mandatory field', tail=('Field must be positive',)))
    >>> lift(lambda name, age: (name, age), 2).ap(mandatory("john")).ap(positive(55))
    Success(value=('john', 55))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any

from optica.domain.errors import UnwrapError
from optica.domain.nonempty import NonEmptyList


@dataclass(frozen=True, slots=True)
class Success[T]:
    """A validated value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self.value))

    def map_errors(self, f: Callable[[Any], Any]) -> Success[T]:
        return self

    def bind[U, E](self, f: Callable[[T], Validated[U, E]]) -> Validated[U, E]:
        return f(self.value)

    def ap(self, nxt: Validated[Any, Any]) -> Validated[Any, Any]:
        """Apply the wrapped function to *nxt*, keeping *nxt*'s errors if it failed."""
        match nxt:
            case Success(value):
                return Success(self.value(value))  # type: ignore[operator]
            case _:
                return nxt

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """One or more validation errors."""

    errors: NonEmptyList[E]

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_errors[F](self, f: Callable[[E], F]) -> Failure[F]:
        return Failure(self.errors.map(f))

    def bind(self, f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def ap(self, nxt: Validated[Any, E]) -> Failure[E]:
        match nxt:
            case Failure(errors):
                return Failure(self.errors + errors)
            case _:
                return self

    def unwrap(self) -> Any:
        errors = self.errors.to_list()
        raise UnwrapError(f"Called unwrap() on Failure: {errors!r}", errors)

    def unwrap_or[D](self, default: D) -> D:
        return default


type Validated[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    return Success(value)


pure = success


def failure[E](error: E, *more: E) -> Failure[E]:
    return Failure(NonEmptyList.of(error, *more))


def validator[T](predicate: Callable[[T], bool], message: str) -> Callable[[T], Validated[T, str]]:
    """Turn a predicate into a validator failing with *message*."""

    def validate(value: T) -> Validated[T, str]:
        if predicate(value):
            return Success(value)
        return failure(message)

    return validate


def curry(fn: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Curry *fn* into *arity* nested one-argument functions.

    ``curry(f, 0)`` returns ``f()`` itself, so a nullary constructor lifts
    to its result.
    """
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")

    def collect(args: tuple[Any, ...]) -> Any:
        if len(args) == arity:
            return fn(*args)
        return lambda arg: collect((*args, arg))

    return collect(())


def lift(ctor: Callable[..., Any], arity: int) -> Success[Any]:
    """Seed an ``ap`` chain with *ctor* curried to *arity* arguments."""
    return Success(curry(ctor, arity))


def ap[A, B, E](acc: Validated[Callable[[A], B], E], nxt: Validated[A, E]) -> Validated[B, E]:
    """Applicative apply with error accumulation (see module table)."""
    return acc.ap(nxt)


def apply_all[R, E](ctor: Callable[..., R], *validated: Validated[Any, E]) -> Validated[R, E]:
    """Build ``ctor(*values)`` from validated inputs, or collect every failure."""
    return reduce(ap, validated, lift(ctor, len(validated)))


def sequence[T, E](results: Iterable[Validated[T, E]]) -> Validated[list[T], E]:
    """Turn many validated values into one validated list, accumulating errors."""
    seed: Validated[list[T], E] = Success([])
    return reduce(
        lambda acc, item: acc.map(lambda values: lambda value: [*values, value]).ap(item),
        results,
        seed,
    )


def traverse[A, T, E](
    items: Iterable[A], f: Callable[[A], Validated[T, E]]
) -> Validated[list[T], E]:
    """Validate every item with *f* and collect the results."""
    return sequence(f(item) for item in items)
