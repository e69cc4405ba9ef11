"""Configuration, shell integration and hook commands."""

import click

from gwt.cli.commands.config.completion_cmd import completion_cmd
from gwt.cli.commands.config.hooks_cmd import hooks_group
from gwt.cli.commands.config.shell_cmd import shell_group
from gwt.cli.commands.config.show_cmd import show_cmd
from gwt.cli.commands.config.state_cmd import state_cmd
from gwt.cli.help_formatter import GwtGroup
from gwt.cli.output import machine_output


@click.group("config", cls=GwtGroup, invoke_without_command=True)
@click.pass_context
def config_group(ctx: click.Context) -> None:
    """Show configuration and set up shell integration and hooks."""
    if ctx.invoked_subcommand is None:
        machine_output(ctx.get_help())


config_group.add_command(show_cmd)
config_group.add_command(state_cmd)
config_group.add_command(shell_group)
config_group.add_command(completion_cmd)
config_group.add_command(hooks_group)
