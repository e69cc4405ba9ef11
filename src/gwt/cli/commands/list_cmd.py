"""List command - show every worktree of the repository."""

import click

from gwt.cli.alias import alias
from gwt.cli.output import machine_output
from gwt.core.context import GwtContext
from gwt.core.git.abc import WorktreeInfo
from gwt.core.worktrees import find_current_worktree, list_worktrees


def format_worktree_line(wt: WorktreeInfo, *, is_current: bool, path_width: int) -> str:
    """Format one worktree as `<marker> <path> <short sha> [<branch>]`.

    Args:
        wt: Worktree to format
        is_current: Whether the invoking shell is inside this worktree
        path_width: Column width used to align paths
    """
    marker = click.style("*", fg="green", bold=True) if is_current else " "
    path = str(wt.path).ljust(path_width)
    if is_current:
        path = click.style(path, fg="green")
    branch = (
        click.style(f"[{wt.branch}]", fg="yellow") if wt.branch is not None else "(detached HEAD)"
    )
    return f"{marker} {path}  {wt.short_head}  {branch}"


@alias("ls")
@click.command("list")
@click.pass_obj
def list_cmd(ctx: GwtContext) -> None:
    """List worktrees (current one marked with *)."""
    worktrees = list_worktrees(ctx)
    current = find_current_worktree(worktrees, ctx.cwd)
    path_width = max((len(str(wt.path)) for wt in worktrees), default=0)

    for wt in worktrees:
        is_current = current is not None and wt.path == current.path
        machine_output(format_worktree_line(wt, is_current=is_current, path_width=path_width))
