"""Subprocess execution for the git and fzf integrations.

Integration classes never let CalledProcessError escape: a failed command is
re-raised as RuntimeError naming what gwt was trying to do, the command line,
its exit code and git's stderr. Engines catch that RuntimeError and wrap it in
the matching GwtError, so git's own explanation reaches the user verbatim.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from gwt.cli.debug import debug_log


def _format_command(cmd: Sequence[str]) -> str:
    return " ".join(str(arg) for arg in cmd)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Run `cmd`, capturing text output, and fail loudly on a non-zero exit.

    Args:
        cmd: Command and arguments to execute
        operation_context: What is being attempted, e.g. "add worktree at /src/x";
            rendered as "Failed to <operation_context>"
        cwd: Working directory for the command
        **kwargs: Passed through to subprocess.run() (e.g. input=...)

    Raises:
        RuntimeError: If the command exits non-zero or cannot be found
    """
    debug_log(f"run: {_format_command(cmd)} (cwd={cwd})")
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        lines = [
            f"Failed to {operation_context}",
            f"Command: {_format_command(cmd)}",
            f"Exit code: {e.returncode}",
        ]
        stderr_text = (e.stderr or "").strip()
        if stderr_text:
            lines.append(f"stderr: {stderr_text}")
        raise RuntimeError("\n".join(lines)) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}"
        ) from e
