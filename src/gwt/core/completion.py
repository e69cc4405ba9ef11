"""Shell completion script generation.

Completion scripts come from Click's own completion machinery for the `gwt`
command group. This abstraction enables dependency injection for testing
without mock.patch.
"""

from abc import ABC, abstractmethod

from click.shell_completion import get_completion_class

from gwt.core.errors import UnsupportedShell

SUPPORTED_SHELLS = ("bash", "zsh")
PROG_NAME = "gwt"
COMPLETE_VAR = "_GWT_COMPLETE"


class Completion(ABC):
    """Abstract interface for shell completion script generation."""

    @abstractmethod
    def generate(self, shell: str) -> str:
        """Generate the completion script for `shell`.

        Raises:
            UnsupportedShell: If the shell is not bash or zsh
        """
        ...


class RealCompletion(Completion):
    """Production implementation using Click's completion classes."""

    def generate(self, shell: str) -> str:
        if shell not in SUPPORTED_SHELLS:
            raise UnsupportedShell(shell)
        completion_class = get_completion_class(shell)
        if completion_class is None:
            raise UnsupportedShell(shell)

        from gwt.cli.cli import cli

        completion = completion_class(cli, {}, PROG_NAME, COMPLETE_VAR)
        return completion.source()
