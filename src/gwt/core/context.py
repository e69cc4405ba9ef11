"""GwtContext: the integrations and location one gwt invocation runs with."""

from dataclasses import dataclass
from pathlib import Path

import click

from gwt.cli.output import user_output
from gwt.core.completion import Completion, RealCompletion
from gwt.core.config_store import ConfigStore, RealConfigStore
from gwt.core.directive import DirectiveWriter, FileDirectiveWriter
from gwt.core.errors import NotAGitRepository
from gwt.core.fuzzy_filter import FuzzyFilter, RealFuzzyFilter
from gwt.core.git.abc import Git
from gwt.core.git.real import RealGit
from gwt.core.repo_discovery import NoRepoSentinel, RepoContext, discover_repo_or_sentinel
from gwt.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class GwtContext:
    """Everything a gwt command touches: integrations, cwd and the repository.

    Built once per invocation by create_context() and passed to commands as
    the Click context object; tests pass GwtContext.for_test(...) instead.
    """

    git: Git
    config_store: ConfigStore
    directive: DirectiveWriter
    fuzzy_filter: FuzzyFilter
    completion: Completion
    feedback: UserFeedback
    cwd: Path
    repo: RepoContext | NoRepoSentinel

    def require_repo(self) -> RepoContext:
        """Return the repository context or fail with NotAGitRepository."""
        if isinstance(self.repo, NoRepoSentinel):
            raise NotAGitRepository(self.repo.message)
        return self.repo

    @staticmethod
    def for_test(
        git: Git | None = None,
        config_store: ConfigStore | None = None,
        directive: DirectiveWriter | None = None,
        fuzzy_filter: FuzzyFilter | None = None,
        completion: Completion | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        repo: RepoContext | NoRepoSentinel | None = None,
    ) -> "GwtContext":
        """Build a context from fakes; unspecified integrations get empty fakes.

        When `repo` is omitted it is discovered through the (fake) git, so a
        FakeGit configured with git_common_dirs yields a RepoContext and an
        empty FakeGit yields NoRepoSentinel.

        Example:
            >>> git = FakeGit(worktrees={repo_root: [WorktreeInfo(repo_root, "main")]})
            >>> ctx = GwtContext.for_test(git=git, cwd=repo_root)
        """
        from tests.fakes.completion import FakeCompletion
        from tests.fakes.config_store import FakeConfigStore
        from tests.fakes.directive import FakeDirectiveWriter
        from tests.fakes.fuzzy_filter import FakeFuzzyFilter
        from tests.fakes.git import FakeGit
        from tests.fakes.user_feedback import FakeUserFeedback

        if git is None:
            git = FakeGit()

        if config_store is None:
            config_store = FakeConfigStore()

        if directive is None:
            directive = FakeDirectiveWriter()

        if fuzzy_filter is None:
            fuzzy_filter = FakeFuzzyFilter()

        if completion is None:
            completion = FakeCompletion()

        if feedback is None:
            feedback = FakeUserFeedback()

        if cwd is None:
            cwd = Path("/test/default/cwd")

        if repo is None:
            repo = discover_repo_or_sentinel(cwd, git)

        return GwtContext(
            git=git,
            config_store=config_store,
            directive=directive,
            fuzzy_filter=fuzzy_filter,
            completion=completion,
            feedback=feedback,
            cwd=cwd,
            repo=repo,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Return (cwd, None), or (None, reason) when the directory was deleted under us.

    Removing a worktree from another terminal leaves shells standing in a
    directory that no longer exists; Path.cwd() raises in that case.
    """
    try:
        return (Path.cwd(), None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def create_context() -> GwtContext:
    """Wire the production context: real git, git config, directive file and fzf."""
    cwd, error_msg = safe_cwd()
    if cwd is None:
        user_output(click.style("Error: ", fg="red") + str(error_msg))
        user_output("Change to an existing directory (e.g. the main worktree) and retry.")
        raise SystemExit(1)

    git = RealGit()
    return GwtContext(
        git=git,
        config_store=RealConfigStore(),
        directive=FileDirectiveWriter.from_environment(),
        fuzzy_filter=RealFuzzyFilter(),
        completion=RealCompletion(),
        feedback=InteractiveFeedback(),
        cwd=cwd,
        repo=discover_repo_or_sentinel(cwd, git),
    )
