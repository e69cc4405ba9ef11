"""Fake completion script generation for testing."""

from gwt.core.completion import SUPPORTED_SHELLS, Completion
from gwt.core.errors import UnsupportedShell


class FakeCompletion(Completion):
    """Returns canned completion scripts and records requested shells."""

    def __init__(self, *, scripts: dict[str, str] | None = None) -> None:
        self._scripts = scripts or {}
        self._generated: list[str] = []

    @property
    def generated(self) -> list[str]:
        return self._generated

    def generate(self, shell: str) -> str:
        if shell not in SUPPORTED_SHELLS:
            raise UnsupportedShell(shell)
        self._generated.append(shell)
        return self._scripts.get(shell, f"# {shell} completion for gwt\n")
