"""Remove command - delete a worktree and, by default, its branch."""

import click

from gwt.cli.alias import alias
from gwt.cli.completions import complete_worktree_branches
from gwt.cli.output import machine_output
from gwt.core.context import GwtContext
from gwt.core.remove import remove_worktree


@alias("rm")
@click.command("remove")
@click.option("--force", is_flag=True, help="Remove even with uncommitted changes.")
@click.option("--force-delete", is_flag=True, help="Delete the branch even if it is not merged.")
@click.option("--no-delete-branch", is_flag=True, help="Keep the branch.")
@click.argument("branch", required=False, shell_complete=complete_worktree_branches)
@click.pass_obj
def remove_cmd(
    ctx: GwtContext,
    branch: str | None,
    force: bool,
    force_delete: bool,
    no_delete_branch: bool,
) -> None:
    """Remove the worktree for BRANCH (default: the current worktree).

    The branch is deleted too when it is merged. Unmerged branches are kept
    with a warning unless --force-delete is given.

    Removing the worktree you are standing in moves your shell back to the
    main worktree.
    """
    result = remove_worktree(
        ctx,
        branch,
        force=force,
        force_delete=force_delete,
        no_delete_branch=no_delete_branch,
    )

    machine_output(f"Removed worktree {result.path}")
    if result.branch_deleted:
        machine_output(f"Deleted branch {result.branch}")
