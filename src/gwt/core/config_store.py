"""Persistent key/value configuration backed by git config.

gwt keeps all of its state in git's configuration store under the `gwt.`
namespace: repository-scoped (local) values such as the previous branch, and
user-scoped (global) values such as a global post-create callback. The store
is injected through GwtContext so tests can use an in-memory fake.
"""

import subprocess
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from gwt.core.subprocess import run_subprocess_with_context

CONFIG_NAMESPACE = "gwt"
PREVIOUS_BRANCH_KEY = "gwt.previous-branch"
DEFAULT_BRANCH_KEY = "gwt.default-branch"
POST_CREATE_HOOK_KEY = "gwt.hook.post-create"
HOOKS_PATH_KEY = "core.hooksPath"


class ConfigScope(Enum):
    LOCAL = "local"
    GLOBAL = "global"


class ConfigStore(ABC):
    """Abstract interface over scoped key/value configuration."""

    @abstractmethod
    def get(self, repo_root: Path, key: str, scope: ConfigScope | None = None) -> str | None:
        """Read a value.

        Args:
            repo_root: Repository the lookup is relative to
            key: Fully qualified key (e.g. "gwt.previous-branch")
            scope: LOCAL or GLOBAL; None reads the effective value (local wins)

        Returns:
            The value, or None when the key is absent. An empty string is a
            present (empty) value, not an absent one.
        """
        ...

    @abstractmethod
    def set(self, repo_root: Path, key: str, value: str, scope: ConfigScope) -> None:
        """Write a value at the given scope, replacing any previous value."""
        ...

    @abstractmethod
    def unset(self, repo_root: Path, key: str, scope: ConfigScope) -> None:
        """Remove a key at the given scope; absent keys are ignored."""
        ...

    @abstractmethod
    def show(self, repo_root: Path, pattern: str) -> str:
        """Render every entry matching `pattern` as `<scope>\\t<key> <value>` lines."""
        ...


class RealConfigStore(ConfigStore):
    """Production implementation using `git config`."""

    def get(self, repo_root: Path, key: str, scope: ConfigScope | None = None) -> str | None:
        cmd = ["git", "config"]
        if scope is not None:
            cmd.append(f"--{scope.value}")
        cmd.extend(["--get", key])
        result = subprocess.run(
            cmd,
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        # Exit code 1 means the key is not set
        if result.returncode != 0:
            return None
        return result.stdout.rstrip("\n")

    def set(self, repo_root: Path, key: str, value: str, scope: ConfigScope) -> None:
        run_subprocess_with_context(
            ["git", "config", f"--{scope.value}", key, value],
            operation_context=f"set {scope.value} config '{key}'",
            cwd=repo_root,
        )

    def unset(self, repo_root: Path, key: str, scope: ConfigScope) -> None:
        subprocess.run(
            ["git", "config", f"--{scope.value}", "--unset", key],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )

    def show(self, repo_root: Path, pattern: str) -> str:
        result = subprocess.run(
            ["git", "config", "--show-scope", "--get-regexp", pattern],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return ""
        return result.stdout.rstrip("\n")
