"""Tests for the switch engine."""

from pathlib import Path

import pytest

from gwt.core.config_store import (
    DEFAULT_BRANCH_KEY,
    POST_CREATE_HOOK_KEY,
    PREVIOUS_BRANCH_KEY,
    ConfigScope,
)
from gwt.core.errors import (
    BranchNotFound,
    MissingBranchArgument,
    NoPreviousBranch,
    ShellIntegrationRequired,
    StaleWorktree,
    WorktreeCreationFailed,
)
from gwt.core.switch import resolve_base, switch_to
from tests.fakes.config_store import FakeConfigStore
from tests.fakes.directive import FakeDirectiveWriter
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.repo_env import RepoEnv


def test_create_then_switch_back_round_trip() -> None:
    env = RepoEnv()
    git = env.build_git()
    config = FakeConfigStore()
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, config_store=config, directive=directive)

    result = switch_to(ctx, "feature-x", create=True, base=None)

    feature_path = Path("/src/myproject.feature-x")
    assert result.path == feature_path
    assert result.created_branch
    assert result.created_worktree
    assert git.added_worktrees == [(feature_path, "feature-x")]
    assert directive.directives == [f"cd {feature_path}"]
    assert config.get(env.main, PREVIOUS_BRANCH_KEY, ConfigScope.LOCAL) == "main"

    # The shell now stands in the new worktree
    back_directive = FakeDirectiveWriter()
    ctx = env.build_context(
        git=git, config_store=config, directive=back_directive, cwd=feature_path
    )

    result = switch_to(ctx, "-", create=False, base=None)

    assert result.path == env.main
    assert not result.created_worktree
    assert back_directive.directives == ["cd /src/myproject"]
    assert config.get(env.main, PREVIOUS_BRANCH_KEY, ConfigScope.LOCAL) == "feature-x"


def test_switch_to_existing_worktree_reuses_it() -> None:
    env = RepoEnv()
    git = env.build_git(worktrees=[env.worktree("feature-x")])
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, directive=directive)

    result = switch_to(ctx, "feature-x", create=False, base=None)

    assert result.path == env.sibling("feature-x")
    assert git.added_worktrees == []
    assert git.created_branches == []
    assert directive.directives == [f"cd {env.sibling('feature-x')}"]


def test_create_flag_with_existing_worktree_does_not_create() -> None:
    env = RepoEnv()
    git = env.build_git(worktrees=[env.worktree("feature-x")])
    ctx = env.build_context(git=git)

    result = switch_to(ctx, "feature-x", create=True, base=None)

    assert not result.created_branch
    assert not result.created_worktree
    assert git.added_worktrees == []


def test_switch_previous_without_history_fails_without_directive() -> None:
    env = RepoEnv()
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=env.build_git(), directive=directive)

    with pytest.raises(NoPreviousBranch):
        switch_to(ctx, "-", create=False, base=None)

    assert directive.directives == []


def test_switch_requires_branch_name() -> None:
    env = RepoEnv()
    ctx = env.build_context(git=env.build_git())

    with pytest.raises(MissingBranchArgument):
        switch_to(ctx, None, create=False, base=None)


def test_switch_to_unknown_branch_without_create() -> None:
    env = RepoEnv()
    ctx = env.build_context(git=env.build_git())

    with pytest.raises(BranchNotFound) as exc_info:
        switch_to(ctx, "nope", create=False, base=None)

    assert not exc_info.value.branch_exists
    assert "not found" in str(exc_info.value)
    assert "--create" in str(exc_info.value)


def test_switch_to_branch_without_worktree_suggests_create() -> None:
    env = RepoEnv()
    git = env.build_git(local_branches={env.main: ["feature-y"]})
    ctx = env.build_context(git=git)

    with pytest.raises(BranchNotFound) as exc_info:
        switch_to(ctx, "feature-y", create=False, base=None)

    assert exc_info.value.branch_exists
    assert "has no worktree" in str(exc_info.value)
    assert git.added_worktrees == []


def test_create_for_existing_branch_only_adds_worktree() -> None:
    env = RepoEnv()
    git = env.build_git(local_branches={env.main: ["feature-y"]})
    ctx = env.build_context(git=git)

    result = switch_to(ctx, "feature-y", create=True, base=None)

    assert not result.created_branch
    assert result.created_worktree
    assert git.created_branches == []
    assert git.added_worktrees == [(env.sibling("feature-y"), "feature-y")]


def test_create_with_slashes_uses_sanitized_path() -> None:
    env = RepoEnv()
    git = env.build_git()
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, directive=directive)

    result = switch_to(ctx, "feature/with/slashes", create=True, base=None)

    assert result.path == Path("/src/myproject.feature--with--slashes")
    assert result.branch == "feature/with/slashes"
    assert directive.directives == ["cd /src/myproject.feature--with--slashes"]


def test_create_uses_explicit_base() -> None:
    env = RepoEnv()
    git = env.build_git()
    ctx = env.build_context(git=git)

    switch_to(ctx, "fix", create=True, base="v2")

    assert git.created_branches == [(env.main, "fix", "v2")]


def test_create_uses_configured_default_branch() -> None:
    env = RepoEnv()
    git = env.build_git()
    config = FakeConfigStore(local={env.main: {DEFAULT_BRANCH_KEY: "develop"}})
    ctx = env.build_context(git=git, config_store=config)

    switch_to(ctx, "fix", create=True, base=None)

    assert git.created_branches == [(env.main, "fix", "develop")]


def test_resolve_base_falls_back_to_head() -> None:
    env = RepoEnv()
    ctx = env.build_context(git=env.build_git())

    assert resolve_base(ctx, env.main, None) == "HEAD"
    assert resolve_base(ctx, env.main, "release") == "release"


def test_base_ignored_for_existing_worktree_warns() -> None:
    env = RepoEnv()
    feedback = FakeUserFeedback()
    ctx = env.build_context(
        git=env.build_git(worktrees=[env.worktree("feature-x")]), feedback=feedback
    )

    switch_to(ctx, "feature-x", create=True, base="v2")

    assert any("--base ignored" in w for w in feedback.warnings)


def test_create_refuses_existing_directory() -> None:
    env = RepoEnv()
    git = env.build_git(existing_paths={env.sibling("fix/login")})
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, directive=directive)

    with pytest.raises(WorktreeCreationFailed, match="already exists"):
        switch_to(ctx, "fix--login", create=True, base=None)

    assert git.created_branches == []
    assert directive.directives == []


def test_git_refusal_becomes_creation_failure() -> None:
    env = RepoEnv()
    git = env.build_git(add_worktree_error="fatal: 'feature-x' is already checked out")
    ctx = env.build_context(git=git)

    with pytest.raises(WorktreeCreationFailed, match="already checked out"):
        switch_to(ctx, "feature-x", create=True, base=None)


def test_switch_without_shell_integration_mutates_nothing() -> None:
    env = RepoEnv()
    git = env.build_git()
    config = FakeConfigStore()
    ctx = env.build_context(
        git=git, config_store=config, directive=FakeDirectiveWriter(available=False)
    )

    with pytest.raises(ShellIntegrationRequired):
        switch_to(ctx, "feature-x", create=True, base=None)

    assert git.created_branches == []
    assert git.added_worktrees == []
    assert config.set_calls == []


def test_detached_head_does_not_record_previous_branch() -> None:
    env = RepoEnv()
    git = env.build_git(
        worktrees=[env.worktree("feature-x")],
        current_branches={env.main: None},
    )
    config = FakeConfigStore()
    ctx = env.build_context(git=git, config_store=config)

    switch_to(ctx, "feature-x", create=False, base=None)

    assert config.get(env.main, PREVIOUS_BRANCH_KEY) is None


def test_switch_to_current_branch_keeps_previous_branch() -> None:
    env = RepoEnv()
    config = FakeConfigStore(local={env.main: {PREVIOUS_BRANCH_KEY: "feature-x"}})
    ctx = env.build_context(git=env.build_git(), config_store=config)

    switch_to(ctx, "main", create=False, base=None)

    assert config.get(env.main, PREVIOUS_BRANCH_KEY) == "feature-x"


def test_missing_dispatcher_warns_when_callback_configured() -> None:
    env = RepoEnv()
    feedback = FakeUserFeedback()
    config = FakeConfigStore(global_values={POST_CREATE_HOOK_KEY: "/hooks/setup.sh"})
    ctx = env.build_context(git=env.build_git(), config_store=config, feedback=feedback)

    switch_to(ctx, "feature-x", create=True, base=None)

    assert any("gwt config hooks install" in w for w in feedback.warnings)


def test_worktree_deleted_by_hand_is_not_reused() -> None:
    env = RepoEnv()
    feature = env.sibling("feature-x")
    git = env.build_git(worktrees=[env.worktree("feature-x")], missing_paths={feature})
    config = FakeConfigStore()
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, config_store=config, directive=directive)

    with pytest.raises(StaleWorktree, match="gwt switch --create feature-x"):
        switch_to(ctx, "feature-x", create=False, base=None)

    assert directive.directives == []
    assert config.set_calls == []
    assert git.pruned_worktrees == []


def test_create_recreates_worktree_deleted_by_hand() -> None:
    env = RepoEnv()
    feature = env.sibling("feature-x")
    git = env.build_git(worktrees=[env.worktree("feature-x")], missing_paths={feature})
    config = FakeConfigStore()
    directive = FakeDirectiveWriter()
    ctx = env.build_context(git=git, config_store=config, directive=directive)

    result = switch_to(ctx, "feature-x", create=True, base=None)

    assert result.path == feature
    assert not result.created_branch
    assert result.created_worktree
    assert git.pruned_worktrees == [feature]
    assert git.created_branches == []
    assert git.added_worktrees == [(feature, "feature-x")]
    assert directive.directives == [f"cd {feature}"]
    assert config.get(env.main, PREVIOUS_BRANCH_KEY, ConfigScope.LOCAL) == "main"
