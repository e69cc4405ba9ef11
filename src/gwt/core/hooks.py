"""Post-create hook installation.

gwt does not run post-create callbacks itself. Instead it installs a small
`post-checkout` dispatcher into git's hooks directory; git runs it after
`git worktree add` (whether issued by gwt or by hand), and the dispatcher
forwards the event to the callbacks configured under `gwt.hook.post-create`.

Hooks directory precedence follows git's own: a local `core.hooksPath`
overrides a global one. Installing at local scope pins the local setting
when it is unset, so the dispatcher wins over an inherited global hooks path;
a value the user already set (relative or not) is left as written.
"""

import shlex
import stat
from dataclasses import dataclass
from pathlib import Path

from gwt.core.config_store import HOOKS_PATH_KEY, POST_CREATE_HOOK_KEY, ConfigScope
from gwt.core.context import GwtContext
from gwt.core.errors import HookAlreadyInstalled
from gwt.core.repo_discovery import RepoContext

DISPATCHER_NAME = "post-checkout"
DISPATCHER_MARKER = "# gwt post-checkout hook"
DEFAULT_GLOBAL_HOOKS_DIR = Path("~/.git-hooks")
LOCAL_HOOKS_DIR_NAME = "hooks"


@dataclass(frozen=True)
class CallbackDescriptor:
    """One configured callback the dispatcher consults, in invocation order."""

    scope: ConfigScope
    config_key: str


# Global callbacks run before local ones; each runs independently.
POST_CREATE_CALLBACKS: tuple[CallbackDescriptor, ...] = (
    CallbackDescriptor(scope=ConfigScope.GLOBAL, config_key=POST_CREATE_HOOK_KEY),
    CallbackDescriptor(scope=ConfigScope.LOCAL, config_key=POST_CREATE_HOOK_KEY),
)


@dataclass(frozen=True)
class HookInstallResult:
    scope: ConfigScope
    hooks_dir: Path
    dispatcher_path: Path
    hooks_path_updated: bool


def render_dispatcher_script(callbacks: tuple[CallbackDescriptor, ...]) -> str:
    """Render the post-checkout dispatcher.

    git calls post-checkout with <previous HEAD> <new HEAD> <branch flag>.
    `git worktree add` reports the null commit as previous HEAD, which is how
    the dispatcher tells worktree creation apart from an ordinary checkout.
    """
    calls = "\n".join(
        f"run_callback {c.scope.value} {shlex.quote(c.config_key)}" for c in callbacks
    )
    return f"""#!/bin/sh
{DISPATCHER_MARKER}
# Installed by 'gwt config hooks install'. Runs the configured post-create
# callbacks with <branch> <worktree path> when git creates a new worktree.

case "$1" in
    *[!0]*) exit 0 ;;
esac

branch=$(git rev-parse --abbrev-ref HEAD 2>/dev/null)
worktree=$(pwd -P)

run_callback() {{
    callback=$(git config --"$1" --get "$2" 2>/dev/null) || return 0
    [ -n "$callback" ] || return 0
    "$callback" "$branch" "$worktree"
    status=$?
    if [ "$status" -ne 0 ]; then
        echo "gwt: warning: $1 post-create hook '$callback' failed (exit $status)" >&2
    fi
    return 0
}}

{calls}

exit 0
"""


def _expand_hooks_path(value: str, repo_root: Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = repo_root / path
    return path


def resolve_hooks_dir(ctx: GwtContext, repo: RepoContext, scope: ConfigScope) -> Path:
    """Determine the directory the dispatcher is installed into for `scope`.

    Local: the local core.hooksPath, else the repository's own hooks dir.
    Global: the global core.hooksPath, else ~/.git-hooks.
    """
    configured = ctx.config_store.get(repo.root, HOOKS_PATH_KEY, scope)
    if configured:
        return _expand_hooks_path(configured, repo.root)
    if scope is ConfigScope.LOCAL:
        return repo.git_common_dir / LOCAL_HOOKS_DIR_NAME
    return DEFAULT_GLOBAL_HOOKS_DIR.expanduser()


def effective_hooks_dir(ctx: GwtContext, repo: RepoContext) -> Path:
    """The hooks directory git actually uses for this repository."""
    configured = ctx.config_store.get(repo.root, HOOKS_PATH_KEY)
    if configured:
        return _expand_hooks_path(configured, repo.root)
    return repo.git_common_dir / LOCAL_HOOKS_DIR_NAME


def install_hook_dispatcher(ctx: GwtContext, scope: ConfigScope) -> HookInstallResult:
    """Install the post-checkout dispatcher at `scope`.

    Raises:
        NotAGitRepository: If invoked outside a repository
        HookAlreadyInstalled: If a post-checkout hook already exists there
    """
    repo = ctx.require_repo()
    hooks_dir = resolve_hooks_dir(ctx, repo, scope)
    dispatcher_path = hooks_dir / DISPATCHER_NAME

    if dispatcher_path.exists():
        raise HookAlreadyInstalled(str(dispatcher_path))

    hooks_dir.mkdir(parents=True, exist_ok=True)
    dispatcher_path.write_text(render_dispatcher_script(POST_CREATE_CALLBACKS), encoding="utf-8")
    mode = dispatcher_path.stat().st_mode
    dispatcher_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    configured = ctx.config_store.get(repo.root, HOOKS_PATH_KEY, scope)
    hooks_path_updated = False
    if not configured:
        # An existing value at this scope is kept as written
        ctx.config_store.set(repo.root, HOOKS_PATH_KEY, str(hooks_dir), scope)
        hooks_path_updated = True

    if scope is ConfigScope.GLOBAL:
        local_override = ctx.config_store.get(repo.root, HOOKS_PATH_KEY, ConfigScope.LOCAL)
        if local_override:
            ctx.feedback.warning(
                f"this repository sets a local core.hooksPath ({local_override}); "
                "the global dispatcher will not run here"
            )

    return HookInstallResult(
        scope=scope,
        hooks_dir=hooks_dir,
        dispatcher_path=dispatcher_path,
        hooks_path_updated=hooks_path_updated,
    )


def set_post_create_callback(ctx: GwtContext, scope: ConfigScope, callback: Path) -> Path:
    """Configure the post-create callback script for `scope`.

    Returns:
        The absolute callback path that was stored
    """
    repo = ctx.require_repo()
    if not callback.is_absolute():
        callback = ctx.cwd / callback
    ctx.config_store.set(repo.root, POST_CREATE_HOOK_KEY, str(callback), scope)
    return callback


def is_dispatcher_installed(ctx: GwtContext, repo: RepoContext) -> bool:
    dispatcher_path = effective_hooks_dir(ctx, repo) / DISPATCHER_NAME
    if not dispatcher_path.is_file():
        return False
    return DISPATCHER_MARKER in dispatcher_path.read_text(encoding="utf-8", errors="replace")


def warn_if_dispatcher_missing(ctx: GwtContext, repo: RepoContext) -> None:
    """Warn when a post-create callback is configured but git will never run it."""
    if ctx.config_store.get(repo.root, POST_CREATE_HOOK_KEY) is None:
        return
    if is_dispatcher_installed(ctx, repo):
        return
    ctx.feedback.warning(
        "a post-create hook is configured but the dispatcher is not installed; "
        "run 'gwt config hooks install'"
    )
