"""LawService — check lenses and partial lenses against their algebraic laws.

Correctness of a caller-supplied getter/setter pair is never enforced at
runtime by the optics themselves. This service runs the laws over sample
wholes and values so callers (and ``optica laws``) can verify a lens before
relying on it.

Total lens laws, for every whole ``s`` and values ``a``, ``a2``:

- get-set: ``set(get(s), s) == s``
- set-get: ``get(set(a, s)) == a``
- set-set: ``set(a2, set(a, s)) == set(a2, s)``
- double-set: ``set(a, set(a, s)) == set(a, s)``

Partial lens laws:

- absent-set / absent-update: an absent focus leaves the whole unchanged.
- round-trip: writing back the current value keeps it readable.
- identity-update: ``update(s, identity) == s`` when present.
- set-get: writing ``a`` through a present focus reads back ``a``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from optica.domain.lens import Lens
from optica.domain.maybe import NOTHING, Some
from optica.domain.partial import PartialLens
from optica.domain.samples import Person, Search, StateCity
from optica.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class LawViolation(BaseModel):
    """One failed law instance."""

    model_config = {"frozen": True}

    law: str
    whole: str
    # repr of the checked value; None for laws that take no value
    value: str | None = None
    detail: str


_NO_VALUE: Any = object()


def _violation(law: str, whole: Any, detail: str, value: Any = _NO_VALUE) -> LawViolation:
    return LawViolation(
        law=law,
        whole=repr(whole),
        value=None if value is _NO_VALUE else repr(value),
        detail=detail,
    )


def check_lens_laws(
    lens: Lens[Any, Any],
    wholes: Iterable[Any],
    values: Iterable[Any],
) -> list[LawViolation]:
    """Return every violation of the total lens laws over *wholes* x *values*."""
    values = list(values)
    violations: list[LawViolation] = []
    for whole in wholes:
        restored = lens.set(lens.get(whole), whole)
        if restored != whole:
            violations.append(_violation("get-set", whole, f"rebuilt {restored!r}"))
        for value in values:
            once = lens.set(value, whole)
            seen = lens.get(once)
            if seen != value:
                violations.append(_violation("set-get", whole, f"read back {seen!r}", value))
            twice = lens.set(value, once)
            if twice != once:
                violations.append(_violation("double-set", whole, f"got {twice!r}", value))
            for later in values:
                stacked = lens.set(later, once)
                direct = lens.set(later, whole)
                if stacked != direct:
                    violations.append(
                        _violation("set-set", whole, f"{stacked!r} != {direct!r}", (value, later))
                    )
    return violations


def check_partial_lens_laws(
    lens: PartialLens[Any, Any],
    wholes: Iterable[Any],
    values: Iterable[Any],
) -> list[LawViolation]:
    """Return every violation of the partial lens laws over *wholes* x *values*."""
    values = list(values)
    violations: list[LawViolation] = []
    for whole in wholes:
        match lens.try_get(whole):
            case Some(current):
                roundtrip = lens.try_get(lens.set(current, whole))
                if roundtrip != Some(current):
                    violations.append(
                        _violation("round-trip", whole, f"read back {roundtrip!r}", current)
                    )
                unchanged = lens.update(whole, lambda a: a)
                if unchanged != whole:
                    violations.append(
                        _violation("identity-update", whole, f"rebuilt {unchanged!r}")
                    )
                for value in values:
                    seen = lens.try_get(lens.set(value, whole))
                    if seen != Some(value):
                        violations.append(
                            _violation("set-get", whole, f"read back {seen!r}", value)
                        )
            case _:
                for value in values:
                    after_set = lens.set(value, whole)
                    if after_set != whole:
                        violations.append(
                            _violation("absent-set", whole, f"rebuilt {after_set!r}", value)
                        )
                    after_update = lens.update(whole, lambda _a, v=value: v)
                    if after_update != whole:
                        violations.append(
                            _violation("absent-update", whole, f"rebuilt {after_update!r}", value)
                        )
    return violations


@dataclass(frozen=True)
class LawCase:
    """A named optic with the sample wholes and values to check it against."""

    name: str
    optic: Lens[Any, Any] | PartialLens[Any, Any]
    wholes: tuple[Any, ...]
    values: tuple[Any, ...]


def sample_cases() -> list[LawCase]:
    """Law cases for the sample models and the stock lenses."""
    john = Person("john", 55)
    jane = Person("jane", 31)
    no_state = Search(Some("John"), NOTHING)
    no_city = Search(NOTHING, Some(StateCity("FL")))
    orlando = Search(NOTHING, Some(StateCity("FL", Some("Orlando"))))
    return [
        LawCase("Person.NAME", Person.NAME, (john, jane), ("hector", "john", "")),
        LawCase("Person.AGE", Person.AGE, (john, jane), (1, 55, 99)),
        LawCase(
            "StateCity.CITY",
            StateCity.CITY,
            (StateCity("FL"), StateCity("FL", Some("Tampa"))),
            ("Orlando",),
        ),
        LawCase("Search.CITY", Search.CITY, (no_state, no_city, orlando), ("Orlando", "Miami")),
        LawCase("Lens.key", Lens.key("a"), ({"a": 1}, {"a": 2, "b": 3}), (0, 1)),
        LawCase("Lens.index", Lens.index(1), ((1, 2, 3), [4, 5]), ("x", 2)),
        LawCase("PartialLens.key", PartialLens.key("a"), ({}, {"a": 1}), (0, 7)),
        LawCase("PartialLens.index", PartialLens.index(2), ((1, 2), (1, 2, 3)), ("x",)),
    ]


def _coverage_warnings(
    name: str,
    optic: Lens[Any, Any] | PartialLens[Any, Any],
    wholes: Iterable[Any],
) -> list[str]:
    """Warn when no whole exercises the present-focus laws of a partial lens."""
    if isinstance(optic, Lens):
        return []
    if any(isinstance(optic.try_get(whole), Some) for whole in wholes):
        return []
    return [f"{name}: no sample whole has the focus present; only absence laws were checked"]


class LawService:
    """Run law checks and package the outcome as a ServiceResult."""

    def check(
        self,
        name: str,
        optic: Lens[Any, Any] | PartialLens[Any, Any],
        wholes: Iterable[Any],
        values: Iterable[Any],
    ) -> ServiceResult:
        op = "check_laws"
        wholes = list(wholes)
        values = list(values)
        kind, violations = self._run(optic, wholes, values)
        logger.debug("Checked %s lens %s: %d violation(s)", kind, name, len(violations))
        warnings = _coverage_warnings(name, optic, wholes)

        data = {
            "lens": name,
            "kind": kind,
            "wholes": len(wholes),
            "values": len(values),
            "violations": [v.model_dump() for v in violations],
        }
        if violations:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="LAW_VIOLATION",
                    message=f"{len(violations)} law violation(s) in {name}",
                    detail={"laws": sorted({v.law for v in violations})},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def check_samples(self) -> ServiceResult:
        """Check every built-in sample case."""
        op = "check_samples"
        lenses: list[dict[str, Any]] = []
        failing: list[str] = []
        warnings: list[str] = []
        for case in sample_cases():
            kind, violations = self._run(case.optic, list(case.wholes), list(case.values))
            logger.debug("Checked %s lens %s: %d violation(s)", kind, case.name, len(violations))
            lenses.append({"lens": case.name, "kind": kind, "violations": len(violations)})
            warnings.extend(_coverage_warnings(case.name, case.optic, case.wholes))
            if violations:
                failing.append(case.name)

        data = {
            "count": len(lenses),
            "violation_count": sum(item["violations"] for item in lenses),
            "lenses": lenses,
        }
        if failing:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="LAW_VIOLATION",
                    message=f"Law violations in: {', '.join(failing)}",
                    detail={"lenses": failing},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @staticmethod
    def _run(
        optic: Lens[Any, Any] | PartialLens[Any, Any],
        wholes: list[Any],
        values: list[Any],
    ) -> tuple[str, list[LawViolation]]:
        if isinstance(optic, Lens):
            return "total", check_lens_laws(optic, wholes, values)
        return "partial", check_partial_lens_laws(optic, wholes, values)
