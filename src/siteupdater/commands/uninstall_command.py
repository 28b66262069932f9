"""Command 'uninstall' of siteupdater"""

import typer

from siteupdater.services.host_service import get_host
from siteupdater.utils.ui.formatters import format_error, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def uninstall(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every option the plugin created."""
    host = get_host()
    if not yes:
        confirm = typer.confirm(f"Delete all data of '{host.slug}'?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    host.uninstaller.uninstall()
    format_success(f"Uninstalled '{host.slug}'")
