"""Command 'deactivate' of siteupdater"""

import typer

from siteupdater.services.host_service import get_host
from siteupdater.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def deactivate(
    network_wide: bool = typer.Option(
        False, "--network-wide", help="Deactivate on every site of the network"
    ),
) -> None:
    """Deactivate the plugin. Settings are kept."""
    host = get_host()
    site_ids = host.deactivator.deactivate(network_wide)
    format_success(
        f"Deactivated '{host.slug}' on site(s): {', '.join(str(s) for s in site_ids)}"
    )
