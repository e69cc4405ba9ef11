"""Command alias support.

Commands declare their short names next to their definition with @alias, and
the group registers them in one call with register_with_aliases().

    @alias("sw")
    @click.command("switch")
    def switch_cmd(...): ...

    register_with_aliases(cli, switch_cmd)   # registers "switch" and "sw"
"""

from collections.abc import Callable

import click

ALIASES_ATTR = "_gwt_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a Click command."""

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, ALIASES_ATTR, names)
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Register a command under its name and every alias declared with @alias."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)
