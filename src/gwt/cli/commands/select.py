"""Select command - pick a worktree with fzf and switch to it."""

import click

from gwt.cli.output import machine_output
from gwt.core.context import GwtContext
from gwt.core.errors import FuzzyFilterNotFound, ShellIntegrationRequired
from gwt.core.git.abc import WorktreeInfo
from gwt.core.switch import switch_to
from gwt.core.worktrees import list_worktrees

CANDIDATE_SEPARATOR = "\t"


def build_candidates(worktrees: list[WorktreeInfo]) -> list[str]:
    """One `<branch>\\t<path>` line per worktree with a branch checked out."""
    return [
        f"{wt.branch}{CANDIDATE_SEPARATOR}{wt.path}" for wt in worktrees if wt.branch is not None
    ]


def parse_candidate(line: str) -> str:
    """Extract the branch from a selected candidate line."""
    return line.split(CANDIDATE_SEPARATOR, 1)[0].strip()


@click.command("select")
@click.pass_obj
def select_cmd(ctx: GwtContext) -> None:
    """Pick a worktree interactively with fzf and switch to it.

    When stdin is not a terminal, its first line is used as a
    non-interactive fzf query and the best match is selected.
    """
    if not ctx.fuzzy_filter.is_installed():
        raise FuzzyFilterNotFound()
    if not ctx.directive.is_available():
        raise ShellIntegrationRequired()

    candidates = build_candidates(list_worktrees(ctx))

    stdin = click.get_text_stream("stdin")
    query = None if stdin.isatty() else stdin.readline().strip()

    selected = ctx.fuzzy_filter.select(candidates, query=query)
    if selected is None:
        ctx.feedback.info("No worktree selected")
        return

    result = switch_to(ctx, parse_candidate(selected), create=False, base=None)
    machine_output(str(result.path))
