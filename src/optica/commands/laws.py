"""Command: check lens laws for the built-in sample lenses."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optica.commands._base import OpticaCommand

if TYPE_CHECKING:
    from optica.commands._context import AppContext


@click.command(
    cls=OpticaCommand,
    examples="""\
  optica laws
  optica laws --lens Search.CITY
  optica --json laws""",
)
@click.option("--lens", "lens_name", default=None, help="Check a single sample lens by name.")
@click.pass_obj
def laws(app: AppContext, lens_name: str | None) -> None:
    """Check the lens laws against the sample lenses."""
    from optica.services.laws import LawService, sample_cases

    svc = LawService()
    if lens_name is None:
        app.emit(svc.check_samples())
        return

    cases = {case.name: case for case in sample_cases()}
    case = cases.get(lens_name)
    if case is None:
        known = ", ".join(cases)
        raise click.BadParameter(f"Unknown lens {lens_name!r}. Known: {known}", param_hint="--lens")
    app.emit(svc.check(case.name, case.optic, case.wholes, case.values))
