"""Tests for the lens law checker and LawService."""

from __future__ import annotations

from optica.domain.lens import Lens
from optica.domain.maybe import NOTHING, Some
from optica.domain.partial import PartialLens
from optica.domain.samples import Person, Search
from optica.services.laws import (
    LawService,
    check_lens_laws,
    check_partial_lens_laws,
    sample_cases,
)

# Setter ignores the value for negative numbers: breaks set-get.
CLAMPED = Lens.create(lambda box: box[0], lambda v, box: (max(v, 0),))

# Setter counts writes: breaks get-set and set-set.
COUNTING = Lens.create(lambda pair: pair[0], lambda v, pair: (v, pair[1] + 1))

# Setter maps None to 0: breaks set-get only for None.
DEFAULTING = Lens.create(lambda box: box[0], lambda v, _box: (0 if v is None else v,))

# Rebuild drops the value entirely.
VANISHING = PartialLens.create(lambda whole: whole, lambda _v, _whole: NOTHING)

# Rebuild ignores the new value.
STUCK = PartialLens.create(lambda whole: whole, lambda _v, whole: whole)


class TestCheckLensLaws:
    def test_lawful_lens(self) -> None:
        wholes = [Person("john", 55), Person("ann", 3)]
        assert check_lens_laws(Person.NAME, wholes, ["a", "b"]) == []

    def test_set_get_violation(self) -> None:
        violations = check_lens_laws(CLAMPED, [(1,)], [-5, 2])
        assert {v.law for v in violations} == {"set-get"}
        assert violations[0].value == "-5"

    def test_get_set_and_set_set_violations(self) -> None:
        laws = {v.law for v in check_lens_laws(COUNTING, [("a", 0)], ["b"])}
        assert {"get-set", "set-set", "double-set"} <= laws

    def test_none_value_is_reported(self) -> None:
        violations = check_lens_laws(DEFAULTING, [(1,)], [None])
        assert [v.law for v in violations] == ["set-get"]
        assert violations[0].value == "None"

    def test_valueless_law_has_no_value(self) -> None:
        violations = check_lens_laws(COUNTING, [("a", 0)], [])
        assert [v.law for v in violations] == ["get-set"]
        assert violations[0].value is None


class TestCheckPartialLensLaws:
    def test_lawful_partial_lens(self, no_state: Search, no_city: Search, orlando: Search) -> None:
        wholes = [no_state, no_city, orlando]
        assert check_partial_lens_laws(Search.CITY, wholes, ["Miami"]) == []

    def test_set_get_violation(self) -> None:
        assert check_partial_lens_laws(STUCK, [Some(1)], [2])[0].law == "set-get"

    def test_round_trip_and_identity_update_violations(self) -> None:
        laws = {v.law for v in check_partial_lens_laws(VANISHING, [Some(1)], [])}
        assert laws == {"round-trip", "identity-update"}

    def test_absent_wholes_are_untouched(self) -> None:
        assert check_partial_lens_laws(VANISHING, [NOTHING], [1, 2]) == []


class TestLawService:
    def test_check_ok(self) -> None:
        result = LawService().check("Person.AGE", Person.AGE, [Person("a", 1)], [2, 3])
        assert result.ok
        assert result.op == "check_laws"
        assert result.data["kind"] == "total"
        assert result.data["violations"] == []

    def test_check_reports_violation(self) -> None:
        result = LawService().check("clamped", CLAMPED, [(1,)], [-1])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LAW_VIOLATION"
        assert result.error.detail["laws"] == ["set-get"]
        assert result.data["violations"][0]["law"] == "set-get"

    def test_check_partial_kind(self, orlando: Search) -> None:
        result = LawService().check("Search.CITY", Search.CITY, [orlando], ["Miami"])
        assert result.ok
        assert result.data["kind"] == "partial"

    def test_check_samples_all_lawful(self) -> None:
        result = LawService().check_samples()
        assert result.ok, result.error
        assert result.op == "check_samples"
        assert result.data["count"] == len(sample_cases())
        assert result.data["violation_count"] == 0
        names = [row["lens"] for row in result.data["lenses"]]
        assert "Search.CITY" in names

    def test_check_warns_when_focus_never_present(self, no_state: Search, no_city: Search) -> None:
        result = LawService().check("Search.CITY", Search.CITY, [no_state, no_city], ["Miami"])
        assert result.ok
        assert result.warnings == [
            "Search.CITY: no sample whole has the focus present; only absence laws were checked"
        ]

    def test_check_no_warning_when_focus_present(self, no_state: Search, orlando: Search) -> None:
        result = LawService().check("Search.CITY", Search.CITY, [no_state, orlando], ["Miami"])
        assert result.warnings == []

    def test_total_lens_never_warns(self) -> None:
        assert LawService().check("Person.AGE", Person.AGE, [], [1]).warnings == []

    def test_check_samples_cover_present_focus(self) -> None:
        assert LawService().check_samples().warnings == []
