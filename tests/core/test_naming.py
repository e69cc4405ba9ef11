"""Tests for branch name to worktree path mapping."""

from pathlib import Path

import pytest

from gwt.core.naming import sanitize_branch_name, worktree_path_for_branch


@pytest.mark.parametrize(
    ("branch", "expected"),
    [
        ("feature-x", "feature-x"),
        ("feature/with/slashes", "feature--with--slashes"),
        ("feature\\backslash", "feature--backslash"),
        ("mixed/sep\\arators", "mixed--sep--arators"),
        ("Feature/ÜNICODE name", "Feature--ÜNICODE name"),
        ("", ""),
    ],
)
def test_sanitize_branch_name(branch: str, expected: str) -> None:
    assert sanitize_branch_name(branch) == expected


def test_sanitize_adds_one_marker_per_separator() -> None:
    branch = "a/b\\c/d"

    sanitized = sanitize_branch_name(branch)

    assert sanitized.count("--") == 3
    assert "/" not in sanitized
    assert "\\" not in sanitized


def test_sanitize_is_not_collision_free() -> None:
    assert sanitize_branch_name("fix/login") == sanitize_branch_name("fix--login")


def test_worktree_path_is_sibling_of_main_worktree() -> None:
    main = Path("/home/user/src/myproject")

    path = worktree_path_for_branch(main, "feature/login")

    assert path == Path("/home/user/src/myproject.feature--login")
    assert path.parent == main.parent
