import click

from gwt.cli.help_formatter import GwtGroup
from gwt.cli.output import machine_output
from gwt.cli.shell_integration import render_shell_wrapper


@click.group("shell", cls=GwtGroup)
def shell_group() -> None:
    """Shell integration."""


@shell_group.command("init")
@click.argument("shell")
def init_cmd(shell: str) -> None:
    """Print the shell wrapper function for SHELL (bash or zsh).

    \b
    Add to your shell rc file:
      eval "$(gwt config shell init bash)"
    """
    machine_output(render_shell_wrapper(shell), nl=False)
