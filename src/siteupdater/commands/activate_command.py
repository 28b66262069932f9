"""Command 'activate' of siteupdater"""

import typer

from siteupdater.services.host_service import get_host
from siteupdater.updater.routines import DATABASE_VERSION
from siteupdater.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .update_command import run_update

app = typer.Typer()


@app.command()
@command_wrapper
def activate(
    network_wide: bool = typer.Option(
        False, "--network-wide", help="Activate on every site of the network"
    ),
    no_update: bool = typer.Option(
        False, "--no-update", help="Do not run pending database updates"
    ),
) -> None:
    """Activate the plugin and bring its database up to date."""
    host = get_host()
    site_ids = host.activator.activate(
        network_wide,
        host.default_configuration,
        host.config.configuration_option_name,
    )
    format_success(
        f"Activated '{host.slug}' on site(s): {', '.join(str(s) for s in site_ids)}"
    )

    if no_update:
        format_info("Skipped database update")
        return

    run_update(host, DATABASE_VERSION)
