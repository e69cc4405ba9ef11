"""Custom Click group: organized help output and the error boundary."""

import click

from gwt.cli.output import user_output
from gwt.core.errors import GwtError, UnknownCommand

WORKTREE_COMMAND_ORDER = ("switch", "remove", "list", "select")


class GwtGroup(click.Group):
    """Click Group used for every gwt command group.

    - Help output lists commands in sections, with aliases apart.
    - An unknown sub-command is a handled failure (exit code 1), not a usage error.
    - Any GwtError raised below this group becomes a one-line red
      "Error: ..." on stderr and exit code 1.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if (
            self.get_command(ctx, cmd_name) is None
            and not ctx.resilient_parsing
            and not cmd_name.startswith("-")
        ):
            raise UnknownCommand(cmd_name)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except GwtError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write_usage(
            ctx.command_path, " ".join(self.collect_usage_pieces(ctx)), prefix="usage: "
        )

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Worktree commands first, in workflow order, then the rest, then aliases."""
        worktrees: dict[str, click.Command] = {}
        others: list[tuple[str, str]] = []
        aliases: list[tuple[str, str]] = []

        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            if name != cmd.name:
                aliases.append((name, f"Alias for '{cmd.name}'"))
            elif name in WORKTREE_COMMAND_ORDER:
                worktrees[name] = cmd
            else:
                others.append((name, cmd.get_short_help_str(limit=formatter.width)))

        ordered = [
            (name, worktrees[name].get_short_help_str(limit=formatter.width))
            for name in WORKTREE_COMMAND_ORDER
            if name in worktrees
        ]
        for title, rows in (("Worktrees", ordered), ("Commands", others), ("Aliases", aliases)):
            if rows:
                with formatter.section(title):
                    formatter.write_dl(rows)
