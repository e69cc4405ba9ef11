"""Git integration backed by the `git` executable."""

import os
import subprocess
from pathlib import Path

from gwt.core.git.abc import Git, WorktreeInfo
from gwt.core.subprocess import run_subprocess_with_context

_HEADS_PREFIX = "refs/heads/"


def _query(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run a read-only git command whose exit status is part of the answer.

    A `cwd` that no longer exists (a worktree deleted by hand) answers like a
    failed git command instead of raising from subprocess.
    """
    cmd = ["git", *args]
    if not cwd.is_dir():
        return subprocess.CompletedProcess(
            cmd, 128, stdout="", stderr=f"{cwd}: no such directory"
        )
    return subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
    )


class RealGit(Git):
    """Runs git as a subprocess.

    Queries whose non-zero exit is an answer (no repository, unknown ref, not an
    ancestor) go through `_query`; mutations go through
    run_subprocess_with_context so a refusal carries git's message.
    """

    def get_git_common_dir(self, cwd: Path) -> Path | None:
        """Absolute common dir; git prints it relative when run from the main worktree."""
        proc = _query(cwd, "rev-parse", "--git-common-dir")
        if proc.returncode != 0:
            return None
        common_dir = Path(proc.stdout.strip())
        if not common_dir.is_absolute():
            common_dir = cwd / common_dir
        return common_dir.resolve()

    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        proc = run_subprocess_with_context(
            ["git", "worktree", "list", "--porcelain"],
            operation_context="list worktrees",
            cwd=repo_root,
        )
        return parse_worktree_porcelain(proc.stdout)

    def get_current_branch(self, cwd: Path) -> str | None:
        proc = _query(cwd, "symbolic-ref", "--quiet", "--short", "HEAD")
        # symbolic-ref fails in detached HEAD
        if proc.returncode != 0:
            return None
        return proc.stdout.strip() or None

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        proc = _query(repo_root, "show-ref", "--verify", "--quiet", _HEADS_PREFIX + branch)
        return proc.returncode == 0

    def create_branch(self, cwd: Path, branch_name: str, start_point: str) -> None:
        run_subprocess_with_context(
            ["git", "branch", branch_name, start_point],
            operation_context=f"create branch '{branch_name}' at '{start_point}'",
            cwd=cwd,
        )

    def delete_branch(self, cwd: Path, branch_name: str, *, force: bool) -> None:
        run_subprocess_with_context(
            ["git", "branch", "-D" if force else "-d", branch_name],
            operation_context=f"delete branch '{branch_name}'",
            cwd=cwd,
        )

    def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
        """Check whether `branch` is an ancestor of `into`."""
        # 1 is "not an ancestor"; other codes (unknown ref) are also treated as unmerged
        proc = _query(repo_root, "merge-base", "--is-ancestor", branch, into)
        return proc.returncode == 0

    def add_worktree(self, repo_root: Path, path: Path, branch: str) -> None:
        run_subprocess_with_context(
            ["git", "worktree", "add", str(path), branch],
            operation_context=f"add worktree at {path} for '{branch}'",
            cwd=repo_root,
        )

    def remove_worktree(self, repo_root: Path, path: Path, *, force: bool) -> None:
        args = ["--force", str(path)] if force else [str(path)]
        run_subprocess_with_context(
            ["git", "worktree", "remove", *args],
            operation_context=f"remove worktree at {path}",
            cwd=repo_root,
        )

    def prune_worktrees(self, repo_root: Path) -> None:
        run_subprocess_with_context(
            ["git", "worktree", "prune"],
            operation_context="prune stale worktree entries",
            cwd=repo_root,
        )

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Any `status --porcelain` line counts, untracked files included."""
        proc = _query(cwd, "status", "--porcelain")
        return proc.returncode == 0 and proc.stdout.strip() != ""

    def path_exists(self, path: Path) -> bool:
        return path.exists()

    def safe_chdir(self, path: Path) -> bool:
        if path.is_dir():
            os.chdir(path)
            return True
        return False


def _parse_record(lines: list[str]) -> WorktreeInfo | None:
    fields: dict[str, str] = {}
    for line in lines:
        key, _, value = line.partition(" ")
        fields[key] = value
    if "worktree" not in fields:
        return None
    branch_ref = fields.get("branch")
    return WorktreeInfo(
        path=Path(fields["worktree"]),
        branch=branch_ref.removeprefix(_HEADS_PREFIX) if branch_ref else None,
        head=fields.get("HEAD", ""),
    )


def parse_worktree_porcelain(output: str) -> list[WorktreeInfo]:
    """Parse `git worktree list --porcelain` output.

    Records are separated by blank lines. The first record is the main
    worktree and is marked as root.
    """
    records: list[list[str]] = [[]]
    for raw in output.splitlines():
        line = raw.strip()
        if line:
            records[-1].append(line)
        elif records[-1]:
            records.append([])

    worktrees = [wt for wt in map(_parse_record, records) if wt is not None]
    if worktrees:
        # git always lists the main worktree first
        main = worktrees[0]
        worktrees[0] = WorktreeInfo(
            path=main.path, branch=main.branch, head=main.head, is_root=True
        )
    return worktrees
