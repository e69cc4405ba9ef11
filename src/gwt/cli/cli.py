import click

from gwt.cli.alias import register_with_aliases
from gwt.cli.commands.config import config_group
from gwt.cli.commands.help_cmd import help_cmd
from gwt.cli.commands.list_cmd import list_cmd
from gwt.cli.commands.remove import remove_cmd
from gwt.cli.commands.select import select_cmd
from gwt.cli.commands.switch import switch_cmd
from gwt.cli.help_formatter import GwtGroup
from gwt.cli.output import machine_output
from gwt.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=GwtGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="gwt")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Switch between git worktrees kept as sibling directories."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        machine_output(ctx.get_help())


# Commands with @alias decorators use register_with_aliases() to auto-register aliases
register_with_aliases(cli, switch_cmd)  # Has @alias("sw")
register_with_aliases(cli, remove_cmd)  # Has @alias("rm")
register_with_aliases(cli, list_cmd)  # Has @alias("ls")
cli.add_command(select_cmd)
cli.add_command(config_group)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `gwt` console script."""
    cli()
