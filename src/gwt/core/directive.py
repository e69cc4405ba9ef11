"""Directory-change directives for the cooperating shell wrapper.

A child process cannot change its parent shell's working directory. The shell
function generated by `gwt config shell init` creates a temporary file, exports
its path as GWT_DIRECTIVE_FILE, runs gwt, and then sources the file. gwt
appends a single `cd <path>` line to it when the shell should move.
"""

import os
import shlex
from abc import ABC, abstractmethod
from pathlib import Path

from gwt.cli.debug import debug_log
from gwt.core.errors import ShellIntegrationRequired

DIRECTIVE_FILE_ENV = "GWT_DIRECTIVE_FILE"


def render_cd_directive(path: Path) -> str:
    """Render the shell line that moves the parent shell to `path`."""
    return f"cd {shlex.quote(str(path))}"


class DirectiveWriter(ABC):
    """Output channel for directives consumed by the parent shell."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether a shell wrapper is listening for directives."""
        ...

    @abstractmethod
    def emit_cd(self, path: Path) -> None:
        """Ask the parent shell to change directory to `path`."""
        ...


class FileDirectiveWriter(DirectiveWriter):
    """Appends directives to the file named by GWT_DIRECTIVE_FILE."""

    def __init__(self, directive_file: Path | None) -> None:
        self._directive_file = directive_file

    @staticmethod
    def from_environment() -> "FileDirectiveWriter":
        value = os.environ.get(DIRECTIVE_FILE_ENV)
        return FileDirectiveWriter(Path(value) if value else None)

    def is_available(self) -> bool:
        return self._directive_file is not None

    def emit_cd(self, path: Path) -> None:
        if self._directive_file is None:
            raise ShellIntegrationRequired()
        line = render_cd_directive(path)
        debug_log(f"directive: {line} -> {self._directive_file}")
        with self._directive_file.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
