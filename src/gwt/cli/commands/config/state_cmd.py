import click

from gwt.cli.output import machine_output
from gwt.core.config_store import CONFIG_NAMESPACE
from gwt.core.context import GwtContext


@click.command("state")
@click.argument("key")
@click.pass_obj
def state_cmd(ctx: GwtContext, key: str) -> None:
    """Print the stored value of gwt.KEY (e.g. previous-branch).

    Exits with status 1 and prints nothing when the key is not set.
    """
    repo = ctx.require_repo()
    value = ctx.config_store.get(repo.root, f"{CONFIG_NAMESPACE}.{key}")
    if value is None:
        raise SystemExit(1)
    machine_output(value)
