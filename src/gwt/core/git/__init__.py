"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via in-memory fakes.
"""

from gwt.core.git.abc import Git, WorktreeInfo
from gwt.core.git.real import RealGit

__all__ = [
    "Git",
    "WorktreeInfo",
    "RealGit",
]
