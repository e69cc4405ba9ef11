"""Worktree registry queries.

Pure lookups over the WorktreeInfo list git reports, plus context-aware
wrappers that fetch the list through ctx.git. Nothing here mutates state.
"""

from pathlib import Path

from gwt.core.context import GwtContext
from gwt.core.errors import WorktreeNotFound
from gwt.core.git.abc import WorktreeInfo


def find_worktree_for_branch(worktrees: list[WorktreeInfo], branch: str) -> WorktreeInfo | None:
    """Find the worktree that has the given branch checked out."""
    for wt in worktrees:
        if wt.branch == branch:
            return wt
    return None


def find_current_worktree(worktrees: list[WorktreeInfo], current_dir: Path) -> WorktreeInfo | None:
    """Find the worktree containing current_dir.

    Returns the most specific (deepest) match so a worktree nested inside the
    main checkout wins over the main checkout.

    Examples:
        >>> worktrees = [WorktreeInfo(Path("/src/repo"), "main", is_root=True),
        ...              WorktreeInfo(Path("/src/repo.feat"), "feat")]
        >>> find_current_worktree(worktrees, Path("/src/repo.feat/lib")).branch
        'feat'
    """
    best_match: WorktreeInfo | None = None
    best_match_depth = -1

    for wt in worktrees:
        if current_dir.is_relative_to(wt.path):
            depth = len(wt.path.parts)
            if depth > best_match_depth:
                best_match = wt
                best_match_depth = depth

    return best_match


def find_main_worktree(worktrees: list[WorktreeInfo]) -> WorktreeInfo:
    """Return the main worktree (git always lists it first)."""
    for wt in worktrees:
        if wt.is_root:
            return wt
    return worktrees[0]


def list_worktrees(ctx: GwtContext) -> list[WorktreeInfo]:
    """List the repository's worktrees in git's native order.

    Raises:
        NotAGitRepository: If invoked outside a repository
    """
    repo = ctx.require_repo()
    return ctx.git.list_worktrees(repo.root)


def current_worktree(ctx: GwtContext) -> WorktreeInfo:
    """Return the worktree the process is standing in.

    Raises:
        NotAGitRepository: If invoked outside a repository
        WorktreeNotFound: If cwd is inside the repository's git dir rather than a worktree
    """
    worktrees = list_worktrees(ctx)
    wt = find_current_worktree(worktrees, ctx.cwd)
    if wt is None:
        raise WorktreeNotFound(str(ctx.cwd))
    return wt
