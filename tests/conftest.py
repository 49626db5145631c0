"""Shared pytest fixtures for optica tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from optica.domain.maybe import NOTHING, Some
from optica.domain.samples import Person, Search, StateCity


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def john() -> Person:
    return Person.try_new("john", 55).unwrap()


@pytest.fixture
def no_state() -> Search:
    """A search with a name but no state/city at all."""
    return Search(Some("John"), NOTHING)


@pytest.fixture
def no_city() -> Search:
    """A search whose state is present but city is absent."""
    return Search(NOTHING, Some(StateCity("FL")))


@pytest.fixture
def orlando() -> Search:
    return Search(NOTHING, Some(StateCity("FL", Some("Orlando"))))
