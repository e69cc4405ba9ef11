"""Repository discovery functionality.

Discovers git repository information from a given path without requiring
full GwtContext (enables context creation outside a repository).
"""

from dataclasses import dataclass
from pathlib import Path

from gwt.core.git.abc import Git


@dataclass(frozen=True)
class RepoContext:
    """Represents a git repository: its main worktree root and common git dir."""

    root: Path
    git_common_dir: Path

    @property
    def repo_name(self) -> str:
        return self.root.name


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context check for this sentinel and fail with
    NotAGitRepository.
    """

    message: str = "not a git repository"


def discover_repo_or_sentinel(cwd: Path, git_ops: Git) -> RepoContext | NoRepoSentinel:
    """Find the repository containing `cwd`.

    Properly handles linked worktrees: the returned root is the main
    worktree (parent of the common git directory), not the linked worktree
    the caller happens to be standing in.

    Args:
        cwd: Current working directory to start search from
        git_ops: Git operations interface

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    if not git_ops.path_exists(cwd):
        return NoRepoSentinel(message=f"start path '{cwd}' does not exist")

    git_common_dir = git_ops.get_git_common_dir(cwd)
    if git_common_dir is None:
        return NoRepoSentinel()

    return RepoContext(root=git_common_dir.parent, git_common_dir=git_common_dir)
