"""Remove engine: tear down a worktree and, by default, its branch.

Removing the worktree the caller is standing in is supported: the process
moves to the main worktree first, and the parent shell is told to follow with
a `cd` directive so it is not left in a deleted directory.

A worktree whose directory was deleted by hand has nothing left to lose: its
stale entry is pruned instead of removed, and branch cleanup proceeds as usual.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gwt.core.config_store import DEFAULT_BRANCH_KEY
from gwt.core.context import GwtContext
from gwt.core.errors import (
    CannotRemoveMainWorktree,
    ShellIntegrationRequired,
    UncommittedChanges,
    WorktreeNotFound,
    WorktreeRemovalFailed,
)
from gwt.core.git.abc import WorktreeInfo
from gwt.core.repo_discovery import RepoContext
from gwt.core.worktrees import find_current_worktree, find_main_worktree, find_worktree_for_branch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of a successful removal."""

    path: Path
    branch: str | None
    branch_deleted: bool
    was_self_removal: bool


def find_worktree_for_target(worktrees: list[WorktreeInfo], target: str) -> WorktreeInfo | None:
    """Resolve a remove target: a branch name first, then a worktree path or directory name."""
    by_branch = find_worktree_for_branch(worktrees, target)
    if by_branch is not None:
        return by_branch

    target_path = Path(target)
    for wt in worktrees:
        if target_path.is_absolute() and wt.path == target_path:
            return wt
        if wt.path.name == target:
            return wt
    return None


def _merge_target(ctx: GwtContext, repo: RepoContext, main: WorktreeInfo) -> str:
    configured = ctx.config_store.get(repo.root, DEFAULT_BRANCH_KEY)
    if configured:
        return configured
    if main.branch is not None:
        return main.branch
    return main.head or "HEAD"


def _delete_branch(
    ctx: GwtContext,
    repo: RepoContext,
    main: WorktreeInfo,
    branch: str,
    *,
    force_delete: bool,
) -> bool:
    """Delete the removed worktree's branch if it is safe (or forced).

    Returns:
        True if the branch was deleted
    """
    if force_delete:
        force = True
    else:
        into = _merge_target(ctx, repo, main)
        if not ctx.git.is_branch_merged(repo.root, branch, into):
            ctx.feedback.warning(
                f"could not delete branch '{branch}': not fully merged into '{into}' "
                "(use --force-delete to delete it anyway)"
            )
            return False
        force = False

    try:
        ctx.git.delete_branch(repo.root, branch, force=force)
    except RuntimeError as e:
        # The worktree is already gone; a surviving branch is reported, not fatal
        ctx.feedback.warning(f"could not delete branch '{branch}'\n{e}")
        return False
    logger.debug("Deleted branch '%s' (force=%s)", branch, force)
    return True


def _prune_leftovers(ctx: GwtContext, repo: RepoContext) -> None:
    """Prune after a successful remove; a failure here is only a warning."""
    try:
        ctx.git.prune_worktrees(repo.root)
    except RuntimeError as e:
        ctx.feedback.warning(f"could not prune worktree metadata\n{e}")


def remove_worktree(
    ctx: GwtContext,
    target: str | None,
    *,
    force: bool,
    force_delete: bool,
    no_delete_branch: bool,
) -> RemoveResult:
    """Remove the worktree for `target` (default: the current worktree).

    Args:
        ctx: Application context
        target: Branch name or worktree path/name; None means the current worktree
        force: Remove even with uncommitted changes
        force_delete: Delete the branch even if it is not merged
        no_delete_branch: Keep the branch

    Returns:
        RemoveResult describing what was removed

    Raises:
        WorktreeNotFound: No worktree matches the target
        CannotRemoveMainWorktree: The target is the main worktree
        ShellIntegrationRequired: Self-removal without a shell wrapper
        UncommittedChanges: The worktree is dirty and force is False
        WorktreeRemovalFailed: git refused to remove the worktree
    """
    repo = ctx.require_repo()
    worktrees = ctx.git.list_worktrees(repo.root)
    main = find_main_worktree(worktrees)
    current = find_current_worktree(worktrees, ctx.cwd)

    if target is None:
        wt = current
        if wt is None:
            raise WorktreeNotFound(str(ctx.cwd))
    else:
        wt = find_worktree_for_target(worktrees, target)
        if wt is None:
            raise WorktreeNotFound(target)

    if wt.is_root or wt.path == main.path:
        raise CannotRemoveMainWorktree(str(wt.path))

    is_self_removal = current is not None and current.path == wt.path
    # Checked before any mutation: the shell would be stranded in a deleted directory
    if is_self_removal and not ctx.directive.is_available():
        raise ShellIntegrationRequired()

    directory_missing = not ctx.git.path_exists(wt.path)

    if not directory_missing and not force and ctx.git.has_uncommitted_changes(wt.path):
        raise UncommittedChanges(str(wt.path))

    if is_self_removal:
        ctx.git.safe_chdir(main.path)

    if directory_missing:
        logger.debug("Worktree directory %s is gone; pruning its entry", wt.path)
        try:
            ctx.git.prune_worktrees(repo.root)
        except RuntimeError as e:
            raise WorktreeRemovalFailed(f"could not prune stale worktree {wt.path}\n{e}") from e
    else:
        try:
            ctx.git.remove_worktree(repo.root, wt.path, force=force)
        except RuntimeError as e:
            raise WorktreeRemovalFailed(f"could not remove worktree at {wt.path}\n{e}") from e
        _prune_leftovers(ctx, repo)
    logger.debug("Removed worktree %s", wt.path)

    branch_deleted = False
    if wt.branch is not None and not no_delete_branch:
        branch_deleted = _delete_branch(ctx, repo, main, wt.branch, force_delete=force_delete)

    if is_self_removal:
        ctx.directive.emit_cd(main.path)

    return RemoveResult(
        path=wt.path,
        branch=wt.branch,
        branch_deleted=branch_deleted,
        was_self_removal=is_self_removal,
    )
