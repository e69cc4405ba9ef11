"""Hook commands - install the dispatcher and configure post-create callbacks."""

from pathlib import Path

import click

from gwt.cli.help_formatter import GwtGroup
from gwt.cli.output import machine_output
from gwt.core.config_store import ConfigScope
from gwt.core.context import GwtContext
from gwt.core.hooks import install_hook_dispatcher, set_post_create_callback


def _scope(global_: bool) -> ConfigScope:
    return ConfigScope.GLOBAL if global_ else ConfigScope.LOCAL


@click.group("hooks", cls=GwtGroup)
def hooks_group() -> None:
    """Post-create hooks run when a worktree is created."""


@hooks_group.command("install")
@click.option("--global", "global_", is_flag=True, help="Install for every repository.")
@click.pass_obj
def install_cmd(ctx: GwtContext, global_: bool) -> None:
    """Install the post-checkout dispatcher into git's hooks directory.

    Local installs go to this repository's core.hooksPath (default: its
    .git/hooks) and pin core.hooksPath locally so a global hooks path cannot
    shadow them. Global installs use the global core.hooksPath, or
    ~/.git-hooks if none is set.
    """
    result = install_hook_dispatcher(ctx, _scope(global_))

    if result.hooks_path_updated:
        ctx.feedback.info(f"Set {result.scope.value} core.hooksPath to {result.hooks_dir}")
    ctx.feedback.success(f"✓ Installed post-checkout dispatcher ({result.scope.value})")
    machine_output(str(result.dispatcher_path))


@hooks_group.command("set-post-create")
@click.option("--global", "global_", is_flag=True, help="Set the global callback.")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def set_post_create_cmd(ctx: GwtContext, global_: bool, path: Path) -> None:
    """Run PATH with <branch> <worktree path> after each worktree creation.

    Global callbacks run before local ones; a failing callback is reported
    but never blocks the checkout.
    """
    callback = set_post_create_callback(ctx, _scope(global_), path)

    if not callback.is_file():
        ctx.feedback.warning(f"{callback} does not exist yet")
    machine_output(f"{_scope(global_).value} gwt.hook.post-create={callback}")
