"""The slice of git that gwt drives.

Everything gwt asks of git goes through the Git interface: RealGit shells out
to the `git` binary, FakeGit (tests/fakes/git.py) keeps the same state in
memory. Methods only report or change git state; policy (which branch, which
path, whether removal is safe) lives in the engines.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorktreeInfo:
    """One entry of `git worktree list`."""

    path: Path
    branch: str | None  # None when HEAD is detached
    head: str = ""
    is_root: bool = False

    @property
    def short_head(self) -> str:
        return self.head[:7]


class Git(ABC):
    """Runtime git operations; fakes expose setup through their constructors only."""

    @abstractmethod
    def get_git_common_dir(self, cwd: Path) -> Path | None:
        """Absolute common git dir shared by all worktrees, or None outside a repository."""
        ...

    @abstractmethod
    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        """Worktrees in git's order; the first is the main worktree (is_root=True)."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Branch checked out at `cwd`, or None in detached HEAD."""
        ...

    @abstractmethod
    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Whether refs/heads/<branch> exists."""
        ...

    @abstractmethod
    def create_branch(self, cwd: Path, branch_name: str, start_point: str) -> None:
        """Create `branch_name` at `start_point` without checking it out.

        `start_point` is resolved relative to `cwd`, so "HEAD" means the HEAD
        of the worktree the user ran gwt from.
        """
        ...

    @abstractmethod
    def delete_branch(self, cwd: Path, branch_name: str, *, force: bool) -> None:
        """Delete a local branch (`-D` when force, else `-d`)."""
        ...

    @abstractmethod
    def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
        """Whether every commit of `branch` is reachable from `into`."""
        ...

    @abstractmethod
    def add_worktree(self, repo_root: Path, path: Path, branch: str) -> None:
        """Check out the existing `branch` into a new worktree at `path`."""
        ...

    @abstractmethod
    def remove_worktree(self, repo_root: Path, path: Path, *, force: bool) -> None:
        """Remove the worktree at `path`; force discards uncommitted changes."""
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Staged, modified or untracked files present in the worktree."""
        ...

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        """Filesystem check, routed through git so tests need no real directories."""
        ...

    @abstractmethod
    def safe_chdir(self, path: Path) -> bool:
        """chdir into `path` if it exists; used before removing the current worktree.

        Returns:
            True if the process moved
        """
        ...

    @abstractmethod
    def prune_worktrees(self, repo_root: Path) -> None:
        """Forget worktrees whose directories no longer exist (`git worktree prune`)."""
        ...
