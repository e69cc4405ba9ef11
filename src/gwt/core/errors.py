"""Error taxonomy for gwt operations.

Every failure the core can report is a GwtError subclass. Errors are terminal
for the current invocation: the CLI boundary prints the message as a one-line
diagnostic and exits with code 1. Nothing is retried.
"""


class GwtError(Exception):
    """Base class for all handled gwt failures."""


class NotAGitRepository(GwtError):
    def __init__(self, message: str = "not a git repository") -> None:
        super().__init__(message)


class MissingBranchArgument(GwtError):
    def __init__(self) -> None:
        super().__init__("missing branch name (usage: gwt switch [--create] <branch>|-)")


class BranchNotFound(GwtError):
    """No worktree exists for the branch and creation was not requested."""

    def __init__(self, branch: str, *, branch_exists: bool) -> None:
        self.branch = branch
        self.branch_exists = branch_exists
        if branch_exists:
            message = (
                f"branch '{branch}' has no worktree; "
                f"use 'gwt switch --create {branch}' to create one"
            )
        else:
            message = (
                f"branch '{branch}' not found; use 'gwt switch --create {branch}' to create it"
            )
        super().__init__(message)


class WorktreeNotFound(GwtError):
    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"worktree for '{target}' not found")


class NoPreviousBranch(GwtError):
    def __init__(self) -> None:
        super().__init__("no previous branch to switch to")


class UncommittedChanges(GwtError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"worktree '{path}' has uncommitted changes (use --force to remove anyway)"
        )


class ShellIntegrationRequired(GwtError):
    def __init__(self) -> None:
        super().__init__(
            "shell integration required: add 'eval \"$(gwt config shell init bash)\"' "
            "(or zsh) to your shell rc file"
        )


class HookAlreadyInstalled(GwtError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"hook already installed at {path}; remove it first to reinstall")


class UnsupportedShell(GwtError):
    def __init__(self, shell: str) -> None:
        self.shell = shell
        super().__init__(f"unsupported shell: {shell} (supported: bash, zsh)")


class WorktreeCreationFailed(GwtError):
    pass


class WorktreeRemovalFailed(GwtError):
    pass


class StaleWorktree(GwtError):
    def __init__(self, branch: str, path: str) -> None:
        self.branch = branch
        self.path = path
        super().__init__(
            f"worktree for '{branch}' at {path} no longer exists; "
            f"run 'gwt switch --create {branch}' to recreate it or 'git worktree prune'"
        )


class CannotRemoveMainWorktree(GwtError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"cannot remove the main worktree at {path}")


class FuzzyFilterNotFound(GwtError):
    def __init__(self) -> None:
        super().__init__("fzf not found on PATH; install fzf to use 'gwt select'")


class UnknownCommand(GwtError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown command '{name}' (see 'gwt --help')")
