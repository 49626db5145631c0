"""Root CLI group for optica with global flags and command registration."""

from __future__ import annotations

import click

from optica import __version__
from optica.commands import register_commands
from optica.commands._context import AppContext
from optica.config.settings import OpticaSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="optica")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """optica — lenses, partial lenses, and accumulating validation."""
    settings = OpticaSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
