"""Switch engine: land the shell in the worktree for a branch.

Every successful switch ends inside a worktree. An existing worktree for the
branch is reused; otherwise, with create=True, the branch is created if needed
and a sibling worktree is added for it. The branch being switched away from is
remembered so `gwt switch -` can go back.

A registered worktree whose directory was deleted by hand is never reused:
without create=True the switch fails, with it the stale entry is pruned and
the worktree is recreated.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gwt.core.config_store import DEFAULT_BRANCH_KEY
from gwt.core.context import GwtContext
from gwt.core.errors import (
    BranchNotFound,
    MissingBranchArgument,
    NoPreviousBranch,
    ShellIntegrationRequired,
    StaleWorktree,
    WorktreeCreationFailed,
)
from gwt.core.hooks import warn_if_dispatcher_missing
from gwt.core.naming import worktree_path_for_branch
from gwt.core.previous_branch import get_previous_branch, set_previous_branch
from gwt.core.worktrees import find_main_worktree, find_worktree_for_branch

logger = logging.getLogger(__name__)

PREVIOUS_BRANCH_TARGET = "-"


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of a successful switch."""

    path: Path
    branch: str
    created_branch: bool
    created_worktree: bool


def resolve_base(ctx: GwtContext, repo_root: Path, base: str | None) -> str:
    """Pick the start point for a new branch.

    Order: explicit base, then the configured gwt.default-branch, then the
    HEAD of the worktree the user is switching from.
    """
    if base:
        return base
    configured = ctx.config_store.get(repo_root, DEFAULT_BRANCH_KEY)
    if configured:
        return configured
    return "HEAD"


def switch_to(
    ctx: GwtContext,
    target: str | None,
    *,
    create: bool,
    base: str | None,
) -> SwitchResult:
    """Switch to the worktree for `target`, creating it when asked.

    Args:
        ctx: Application context
        target: Branch name, or "-" for the previously switched-from branch
        create: Create the branch and/or its worktree when missing
        base: Start point for a newly created branch

    Returns:
        SwitchResult describing the destination worktree

    Raises:
        ShellIntegrationRequired: No shell wrapper is listening for directives
        NoPreviousBranch: target is "-" and no switch was recorded yet
        MissingBranchArgument: target is empty
        StaleWorktree: The branch's worktree directory is gone and create is False
        BranchNotFound: No worktree for the branch and create is False
        WorktreeCreationFailed: The target directory exists or git refused
    """
    # Checked before any mutation: without the wrapper the shell cannot follow
    if not ctx.directive.is_available():
        raise ShellIntegrationRequired()

    repo = ctx.require_repo()

    if target == PREVIOUS_BRANCH_TARGET:
        previous = get_previous_branch(ctx.config_store, repo.root)
        if previous is None:
            raise NoPreviousBranch()
        logger.debug("Resolved '-' to previous branch '%s'", previous)
        target = previous

    if not target:
        raise MissingBranchArgument()

    from_branch = ctx.git.get_current_branch(ctx.cwd)
    worktrees = ctx.git.list_worktrees(repo.root)
    existing = find_worktree_for_branch(worktrees, target)

    if existing is not None and not ctx.git.path_exists(existing.path):
        if not create:
            raise StaleWorktree(target, str(existing.path))
        try:
            ctx.git.prune_worktrees(repo.root)
        except RuntimeError as e:
            raise WorktreeCreationFailed(
                f"could not prune stale worktree {existing.path}\n{e}"
            ) from e
        logger.debug("Pruned stale worktree %s for '%s'", existing.path, target)
        worktrees = ctx.git.list_worktrees(repo.root)
        existing = None

    created_branch = False
    created_worktree = False

    if existing is not None:
        logger.debug("Reusing worktree %s for '%s'", existing.path, target)
        if base:
            ctx.feedback.warning(f"--base ignored: '{target}' already has a worktree")
        path = existing.path
    else:
        branch_exists = ctx.git.branch_exists(repo.root, target)
        if not create:
            raise BranchNotFound(target, branch_exists=branch_exists)

        main = find_main_worktree(worktrees)
        path = worktree_path_for_branch(main.path, target)
        if ctx.git.path_exists(path):
            raise WorktreeCreationFailed(
                f"cannot create worktree for '{target}': {path} already exists"
            )

        if branch_exists:
            if base:
                ctx.feedback.warning(f"--base ignored: branch '{target}' already exists")
        else:
            start_point = resolve_base(ctx, repo.root, base)
            try:
                ctx.git.create_branch(ctx.cwd, target, start_point)
            except RuntimeError as e:
                raise WorktreeCreationFailed(
                    f"could not create branch '{target}' from '{start_point}'\n{e}"
                ) from e
            created_branch = True
            logger.debug("Created branch '%s' from '%s'", target, start_point)

        warn_if_dispatcher_missing(ctx, repo)

        try:
            ctx.git.add_worktree(repo.root, path, target)
        except RuntimeError as e:
            raise WorktreeCreationFailed(f"could not create worktree at {path}\n{e}") from e
        created_worktree = True
        logger.debug("Created worktree %s for '%s'", path, target)

    if from_branch is not None and from_branch != target:
        set_previous_branch(ctx.config_store, repo.root, from_branch)

    ctx.directive.emit_cd(path)

    return SwitchResult(
        path=path,
        branch=target,
        created_branch=created_branch,
        created_worktree=created_worktree,
    )
