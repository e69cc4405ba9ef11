"""Fuzzy picker integration.

`gwt select` hands a list of candidate lines to an external filter program
(fzf) and consumes the one line it returns. All matching and UI behavior is
fzf's; gwt only builds the candidates and interprets the selection.
"""

import shutil
import subprocess
from abc import ABC, abstractmethod

from gwt.cli.debug import debug_log

FZF_EXECUTABLE = "fzf"


class FuzzyFilter(ABC):
    """Abstract interface over an external fuzzy filter."""

    @abstractmethod
    def is_installed(self) -> bool:
        """Whether the filter program is available on PATH."""
        ...

    @abstractmethod
    def select(self, candidates: list[str], *, query: str | None) -> str | None:
        """Pick one candidate.

        Args:
            candidates: Lines to choose from
            query: Non-interactive query; None runs the interactive picker

        Returns:
            The selected line, or None when nothing was selected (no match,
            or the user cancelled)
        """
        ...


class RealFuzzyFilter(FuzzyFilter):
    """Production implementation that runs fzf."""

    def is_installed(self) -> bool:
        return shutil.which(FZF_EXECUTABLE) is not None

    def select(self, candidates: list[str], *, query: str | None) -> str | None:
        cmd = [FZF_EXECUTABLE, "--delimiter", "\t", "--with-nth", "1"]
        if query is None:
            cmd.extend(["--height", "40%", "--reverse", "--prompt", "worktree> "])
        else:
            cmd.extend(["--filter", query])

        debug_log(f"run: {' '.join(cmd)} with {len(candidates)} candidates")
        # stderr stays attached to the terminal so the interactive UI can draw
        result = subprocess.run(
            cmd,
            input="\n".join(candidates) + "\n",
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        # fzf exits 1 on no match and 130 when the user cancels
        if result.returncode != 0:
            return None

        lines = result.stdout.splitlines()
        if not lines:
            return None
        return lines[0]
