"""Tests for post-create hook installation."""

import os
import stat
from pathlib import Path

import pytest

from gwt.core.config_store import HOOKS_PATH_KEY, POST_CREATE_HOOK_KEY, ConfigScope
from gwt.core.context import GwtContext
from gwt.core.errors import HookAlreadyInstalled, NotAGitRepository
from gwt.core.hooks import (
    DISPATCHER_MARKER,
    POST_CREATE_CALLBACKS,
    effective_hooks_dir,
    install_hook_dispatcher,
    is_dispatcher_installed,
    render_dispatcher_script,
    set_post_create_callback,
)
from tests.fakes.config_store import FakeConfigStore
from tests.fakes.git import FakeGit
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.repo_env import RepoEnv


def _env(tmp_path: Path) -> RepoEnv:
    return RepoEnv(main=tmp_path / "myproject")


def test_local_install_defaults_to_repository_hooks_dir(tmp_path: Path) -> None:
    env = _env(tmp_path)
    config = FakeConfigStore()
    ctx = env.build_context(git=env.build_git(), config_store=config)

    result = install_hook_dispatcher(ctx, ConfigScope.LOCAL)

    hooks_dir = env.git_dir / "hooks"
    assert result.hooks_dir == hooks_dir
    assert result.dispatcher_path == hooks_dir / "post-checkout"
    content = result.dispatcher_path.read_text(encoding="utf-8")
    assert content.startswith("#!/bin/sh\n")
    assert DISPATCHER_MARKER in content
    assert result.dispatcher_path.stat().st_mode & stat.S_IXUSR
    # Pinned locally so a global core.hooksPath cannot shadow it
    assert result.hooks_path_updated
    assert config.get(env.main, HOOKS_PATH_KEY, ConfigScope.LOCAL) == str(hooks_dir)


def test_local_install_respects_relative_local_hooks_path(tmp_path: Path) -> None:
    env = _env(tmp_path)
    config = FakeConfigStore(local={env.main: {HOOKS_PATH_KEY: ".githooks"}})
    ctx = env.build_context(git=env.build_git(), config_store=config)

    result = install_hook_dispatcher(ctx, ConfigScope.LOCAL)

    assert result.dispatcher_path == env.main / ".githooks" / "post-checkout"
    assert result.dispatcher_path.is_file()
    assert not result.hooks_path_updated
    assert config.get(env.main, HOOKS_PATH_KEY, ConfigScope.LOCAL) == ".githooks"
    assert config.set_calls == []


def test_local_install_wins_over_global_hooks_path(tmp_path: Path) -> None:
    env = _env(tmp_path)
    global_hooks = tmp_path / "global-hooks"
    config = FakeConfigStore(global_values={HOOKS_PATH_KEY: str(global_hooks)})
    ctx = env.build_context(git=env.build_git(), config_store=config)
    repo = ctx.require_repo()

    assert effective_hooks_dir(ctx, repo) == global_hooks

    install_hook_dispatcher(ctx, ConfigScope.LOCAL)

    assert effective_hooks_dir(ctx, repo) == env.git_dir / "hooks"
    assert is_dispatcher_installed(ctx, repo)


def test_global_install_respects_configured_hooks_path(tmp_path: Path) -> None:
    env = _env(tmp_path)
    global_hooks = tmp_path / "global-hooks"
    config = FakeConfigStore(global_values={HOOKS_PATH_KEY: str(global_hooks)})
    ctx = env.build_context(git=env.build_git(), config_store=config)

    result = install_hook_dispatcher(ctx, ConfigScope.GLOBAL)

    assert result.dispatcher_path == global_hooks / "post-checkout"
    assert not result.hooks_path_updated
    assert config.set_calls == []


def test_global_install_defaults_to_home_hooks_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    env = _env(tmp_path)
    config = FakeConfigStore()
    ctx = env.build_context(git=env.build_git(), config_store=config)

    result = install_hook_dispatcher(ctx, ConfigScope.GLOBAL)

    assert result.hooks_dir == home / ".git-hooks"
    assert result.dispatcher_path.is_file()
    assert result.hooks_path_updated
    assert config.get(env.main, HOOKS_PATH_KEY, ConfigScope.GLOBAL) == str(home / ".git-hooks")


def test_global_install_warns_about_local_override(tmp_path: Path) -> None:
    env = _env(tmp_path)
    config = FakeConfigStore(
        local={env.main: {HOOKS_PATH_KEY: ".githooks"}},
        global_values={HOOKS_PATH_KEY: str(tmp_path / "global-hooks")},
    )
    feedback = FakeUserFeedback()
    ctx = env.build_context(git=env.build_git(), config_store=config, feedback=feedback)

    install_hook_dispatcher(ctx, ConfigScope.GLOBAL)

    assert len(feedback.warnings) == 1
    assert "will not run here" in feedback.warnings[0]


def test_install_never_overwrites_existing_hook(tmp_path: Path) -> None:
    env = _env(tmp_path)
    hooks_dir = env.git_dir / "hooks"
    hooks_dir.mkdir(parents=True)
    existing = hooks_dir / "post-checkout"
    existing.write_text("#!/bin/sh\necho mine\n", encoding="utf-8")
    ctx = env.build_context(git=env.build_git())

    with pytest.raises(HookAlreadyInstalled):
        install_hook_dispatcher(ctx, ConfigScope.LOCAL)

    assert existing.read_text(encoding="utf-8") == "#!/bin/sh\necho mine\n"


def test_install_outside_repository(tmp_path: Path) -> None:
    ctx = GwtContext.for_test(git=FakeGit(existing_paths={tmp_path}), cwd=tmp_path)

    with pytest.raises(NotAGitRepository):
        install_hook_dispatcher(ctx, ConfigScope.LOCAL)


def test_foreign_post_checkout_hook_is_not_the_dispatcher(tmp_path: Path) -> None:
    env = _env(tmp_path)
    hooks_dir = env.git_dir / "hooks"
    hooks_dir.mkdir(parents=True)
    (hooks_dir / "post-checkout").write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    ctx = env.build_context(git=env.build_git())

    assert not is_dispatcher_installed(ctx, ctx.require_repo())


def test_set_post_create_callback_makes_path_absolute(tmp_path: Path) -> None:
    env = _env(tmp_path)
    config = FakeConfigStore()
    ctx = env.build_context(git=env.build_git(), config_store=config)

    stored = set_post_create_callback(ctx, ConfigScope.LOCAL, Path("scripts/setup.sh"))

    assert stored == env.main / "scripts" / "setup.sh"
    assert config.get(env.main, POST_CREATE_HOOK_KEY, ConfigScope.LOCAL) == str(stored)
    assert config.get(env.main, POST_CREATE_HOOK_KEY, ConfigScope.GLOBAL) is None


def test_callbacks_run_global_before_local() -> None:
    assert [c.scope for c in POST_CREATE_CALLBACKS] == [ConfigScope.GLOBAL, ConfigScope.LOCAL]

    script = render_dispatcher_script(POST_CREATE_CALLBACKS)

    global_call = script.index("run_callback global gwt.hook.post-create")
    local_call = script.index("run_callback local gwt.hook.post-create")
    assert global_call < local_call


def test_dispatcher_ignores_ordinary_checkouts() -> None:
    script = render_dispatcher_script(POST_CREATE_CALLBACKS)

    # Anything but the all-zero previous HEAD is a plain checkout
    assert '*[!0]*) exit 0 ;;' in script
    assert script.rstrip().endswith("exit 0")


@pytest.mark.skipif(os.name != "posix", reason="hook scripts need a POSIX shell")
def test_installed_dispatcher_mode(tmp_path: Path) -> None:
    env = _env(tmp_path)
    ctx = env.build_context(git=env.build_git())

    result = install_hook_dispatcher(ctx, ConfigScope.LOCAL)

    mode = result.dispatcher_path.stat().st_mode
    assert mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) == (
        stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
    )
