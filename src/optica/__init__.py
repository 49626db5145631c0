"""optica — composable lenses, partial lenses, and accumulating validation."""

from optica.domain.instance import InstanceLens, InstancePartialLens, bind
from optica.domain.lens import Lens, compose
from optica.domain.maybe import NOTHING, Maybe, Nothing, Some, maybe
from optica.domain.nonempty import NonEmptyList
from optica.domain.partial import PartialLens
from optica.domain.validation import (
    Failure,
    Success,
    Validated,
    ap,
    apply_all,
    failure,
    lift,
    sequence,
    success,
    traverse,
    validator,
)

__version__ = "0.1.0"

__all__ = [
    "NOTHING",
    "Failure",
    "InstanceLens",
    "InstancePartialLens",
    "Lens",
    "Maybe",
    "NonEmptyList",
    "Nothing",
    "PartialLens",
    "Some",
    "Success",
    "Validated",
    "__version__",
    "ap",
    "apply_all",
    "bind",
    "compose",
    "failure",
    "lift",
    "maybe",
    "sequence",
    "success",
    "traverse",
    "validator",
]
