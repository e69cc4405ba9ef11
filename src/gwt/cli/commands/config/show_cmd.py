import click

from gwt.cli.output import machine_output
from gwt.core.config_store import CONFIG_NAMESPACE
from gwt.core.context import GwtContext


@click.command("show")
@click.pass_obj
def show_cmd(ctx: GwtContext) -> None:
    """Show every gwt.* setting with the scope it comes from."""
    repo = ctx.require_repo()
    text = ctx.config_store.show(repo.root, rf"^{CONFIG_NAMESPACE}\.")
    if text:
        machine_output(text)
