"""Command 'version' of siteupdater"""

import typer

from siteupdater import __version__
from siteupdater.updater.routines import DATABASE_VERSION
from siteupdater.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(f"siteupdater {__version__} (database version {DATABASE_VERSION})")
