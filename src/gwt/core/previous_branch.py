"""Previous-branch tracking for `gwt switch -`.

A single repository-scoped config key holds the branch the user last
switched away from. It is overwritten on every successful switch and never
expires.
"""

from pathlib import Path

from gwt.core.config_store import PREVIOUS_BRANCH_KEY, ConfigScope, ConfigStore


def get_previous_branch(config_store: ConfigStore, repo_root: Path) -> str | None:
    """Read the previous branch; None when it was never recorded."""
    return config_store.get(repo_root, PREVIOUS_BRANCH_KEY, ConfigScope.LOCAL)


def set_previous_branch(config_store: ConfigStore, repo_root: Path, branch: str) -> None:
    config_store.set(repo_root, PREVIOUS_BRANCH_KEY, branch, ConfigScope.LOCAL)
