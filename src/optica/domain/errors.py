"""Exceptions for programmer errors.

Absence of an optional field and failed validation are ordinary values
(``Nothing`` and ``Failure``), never exceptions. The types here only signal
misuse: unwrapping something that holds no value, or pointing a lens at a
value it cannot rebuild.
"""

from __future__ import annotations

from typing import Any


class OpticaError(Exception):
    """Base class for all optica exceptions."""


class UnwrapError(OpticaError):
    """Raised when unwrapping ``Nothing`` or a validation ``Failure``.

    Attributes:
        errors: The accumulated validation errors, empty when unwrapping
            ``Nothing``.
    """

    def __init__(self, message: str, errors: list[Any] | None = None) -> None:
        super().__init__(message)
        self.errors: list[Any] = errors or []


class EmptyListError(OpticaError, ValueError):
    """Raised when a NonEmptyList is built from an empty iterable."""


class UnsupportedTargetError(OpticaError, TypeError):
    """Raised when an attribute lens cannot rebuild its target type."""
