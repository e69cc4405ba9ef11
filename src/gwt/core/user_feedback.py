"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from gwt.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output on stderr.

    Engines report progress and recoverable problems through ctx.feedback
    instead of printing directly, so tests can assert on messages with
    FakeUserFeedback.

    Usage:
        ctx.feedback.info("Creating branch...")
        ctx.feedback.warning("could not delete branch 'x': not fully merged")
        ctx.feedback.success("✓ Removed worktree")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Plain progress line."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Green completion line."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Yellow "Warning: " line; the command carries on."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Red "Error: " line."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with colors."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style("Error: ", fg="red") + message)
