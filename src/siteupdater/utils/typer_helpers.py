"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from siteupdater.utils import exit_codes
from siteupdater.utils.ui.console import get_console


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Commands starting with ``attempted`` first, then close spellings (max 3)."""
    prefixed = sorted(name for name in available if name.startswith(attempted))
    close = get_close_matches(attempted, available, n=3, cutoff=0.6)
    return list(dict.fromkeys(prefixed + close))[:3]


class SuggestingGroup(TyperGroup):
    """Typer group that suggests commands on typos.

    Used by the root app and by the ``sites``, ``settings`` and ``config``
    groups, so ``siteupdater sites lst`` gets the same hint as
    ``siteupdater updte``.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            available = [name for name, cmd in self.commands.items() if not cmd.hidden]
            suggestions = suggest_commands(attempted, available)
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.command_path}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print()
            console.print(f"Run '{ctx.command_path} --help' for usage.")
            raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from e
