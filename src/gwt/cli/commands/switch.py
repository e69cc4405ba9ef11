"""Switch command - move the shell into a branch's worktree."""

import click

from gwt.cli.alias import alias
from gwt.cli.completions import complete_worktree_branches
from gwt.cli.output import machine_output
from gwt.core.context import GwtContext
from gwt.core.switch import switch_to


@alias("sw")
@click.command("switch")
@click.option(
    "-c",
    "--create",
    is_flag=True,
    help="Create the branch and/or its worktree if missing.",
)
@click.option(
    "--base",
    metavar="REF",
    help="Start point for a new branch (default: gwt.default-branch, else HEAD).",
)
@click.argument("branch", required=False, shell_complete=complete_worktree_branches)
@click.pass_obj
def switch_cmd(ctx: GwtContext, branch: str | None, create: bool, base: str | None) -> None:
    """Switch to the worktree for BRANCH.

    Worktrees live next to the main checkout as <repo>.<branch>, with every
    '/' or '\\' in the branch name replaced by '--'.

    \b
    Examples:
      gwt switch feature-x          # existing worktree
      gwt switch -c feature/login   # new branch + worktree at <repo>.feature--login
      gwt switch -c fix --base v2   # branch from v2
      gwt switch -                  # back to the previous branch

    Requires shell integration: eval "$(gwt config shell init bash)".
    """
    result = switch_to(ctx, branch, create=create, base=base)

    if result.created_branch:
        ctx.feedback.success(f"✓ Created branch {click.style(result.branch, fg='yellow')}")
    if result.created_worktree:
        ctx.feedback.success(f"✓ Created worktree {click.style(str(result.path), fg='cyan')}")

    machine_output(str(result.path))
