"""Command: build a sample Person, reporting every invalid field."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from optica.commands._base import OpticaCommand

if TYPE_CHECKING:
    from optica.commands._context import AppContext


@click.command(
    cls=OpticaCommand,
    examples="""\
  optica validate john 55
  optica validate "" -- -1
  optica --json validate "" 10""",
)
@click.argument("name")
@click.argument("age", type=int)
@click.pass_obj
def validate(app: AppContext, name: str, age: int) -> None:
    """Validate NAME and AGE and construct a Person."""
    from optica.services.people import PersonService

    app.emit(PersonService().validate(name, age))
