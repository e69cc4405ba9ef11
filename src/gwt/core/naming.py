"""Branch name to worktree path mapping.

Worktrees live next to the main worktree as `<main>.<sanitized-branch>`:

    ~/src/myproject                  (main worktree, on main)
    ~/src/myproject.feature-x        (branch feature-x)
    ~/src/myproject.fix--login       (branch fix/login)

Sanitizing is not collision-free: `fix/login` and `fix--login` map to the same
directory. Worktree creation refuses to reuse an existing directory, so a
collision surfaces as an error instead of silently sharing a checkout.
"""

from pathlib import Path

PATH_SEPARATOR_MARKER = "--"
WORKTREE_NAME_SEPARATOR = "."


def sanitize_branch_name(branch: str) -> str:
    """Replace every `/` and `\\` in a branch name with `--`.

    Nothing else is changed: case, unicode and whitespace pass through.

    Examples:
        >>> sanitize_branch_name("feature/with/slashes")
        'feature--with--slashes'
        >>> sanitize_branch_name("feature\\\\backslash")
        'feature--backslash'
    """
    return branch.replace("/", PATH_SEPARATOR_MARKER).replace("\\", PATH_SEPARATOR_MARKER)


def worktree_path_for_branch(main_worktree: Path, branch: str) -> Path:
    """Compute the sibling directory a branch's worktree lives in."""
    name = f"{main_worktree.name}{WORKTREE_NAME_SEPARATOR}{sanitize_branch_name(branch)}"
    return main_worktree.parent / name
