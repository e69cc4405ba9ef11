"""Dynamic completion callbacks for command arguments."""

import click
from click.shell_completion import CompletionItem

from gwt.core.context import GwtContext, create_context
from gwt.core.repo_discovery import NoRepoSentinel


def complete_worktree_branches(
    ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete with the branches that currently have a worktree."""
    root = ctx.find_root()
    gwt_ctx = root.obj if isinstance(root.obj, GwtContext) else create_context()
    if isinstance(gwt_ctx.repo, NoRepoSentinel):
        return []

    worktrees = gwt_ctx.git.list_worktrees(gwt_ctx.repo.root)
    return [
        CompletionItem(wt.branch, help=str(wt.path))
        for wt in worktrees
        if wt.branch is not None and wt.branch.startswith(incomplete)
    ]
