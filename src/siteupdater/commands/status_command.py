"""Command 'status' of siteupdater"""

import typer

from siteupdater.models.configuration import Scope
from siteupdater.services.host_service import get_host
from siteupdater.updater.routines import DATABASE_VERSION
from siteupdater.utils.ui.formatters import format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def status(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (defaults to output.format)"
    ),
) -> None:
    """Show the database version of every scope."""
    host = get_host()
    store = host.version_store

    if host.runtime.multisite:
        scopes = [Scope.site(site_id) for site_id in host.sites.list_site_ids(host.runtime.network_id)]
    else:
        scopes = [Scope.network(host.runtime.network_id)]

    rows = []
    for scope in scopes:
        db_version = store.current_version(scope)
        rows.append(
            {
                "scope": str(scope),
                "db_version": db_version,
                "target": DATABASE_VERSION,
                "pending": max(DATABASE_VERSION - db_version, 0),
            }
        )
    format_output(rows, output or host.config.output.format)
