import click

from gwt.cli.output import machine_output
from gwt.core.context import GwtContext


@click.command("completion")
@click.argument("shell")
@click.pass_obj
def completion_cmd(ctx: GwtContext, shell: str) -> None:
    """Print the tab-completion script for SHELL (bash or zsh).

    \b
    Add to your shell rc file:
      eval "$(gwt config completion bash)"
    """
    script = ctx.completion.generate(shell)
    machine_output(script, nl=not script.endswith("\n"))
