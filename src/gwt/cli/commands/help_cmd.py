"""Help command - `gwt help` is the same as `gwt --help`."""

import click

from gwt.cli.output import machine_output


@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this message and exit."""
    parent = ctx.parent if ctx.parent is not None else ctx
    machine_output(parent.get_help())
