"""Settings commands for the plugin's option arrays."""

import typer

from siteupdater.services.host_service import get_host
from siteupdater.utils import exit_codes
from siteupdater.utils.typer_helpers import SuggestingGroup
from siteupdater.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Plugin settings commands")


@app.command("view")
@command_wrapper
def view_settings(
    group: str = typer.Option("general", "--group", "-g", help="general or example"),
    network: bool = typer.Option(False, "--network", help="Network settings"),
    site: int | None = typer.Option(None, "--site", help="Site id (defaults to main site)"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (defaults to output.format)"
    ),
) -> None:
    """View a settings group."""
    host = get_host()
    if network:
        format_output(
            host.network_settings.get_network_general_options(),
            output or host.config.output.format,
        )
        return

    site_id = site if site is not None else host.runtime.main_site_id
    host.sites.get_site(site_id)
    with host.runtime.switched_to_site(site_id):
        try:
            options = host.settings.option_group(group)
        except ValueError as e:
            raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    format_output(options, output or host.config.output.format)


@app.command("set")
@command_wrapper
def set_setting(
    field: str = typer.Argument(..., help="Field id, e.g. debug-cb"),
    value: str = typer.Argument(..., help="New value"),
    group: str = typer.Option("general", "--group", "-g", help="general or example"),
    network: bool = typer.Option(False, "--network", help="Network settings"),
    site: int | None = typer.Option(None, "--site", help="Site id (defaults to main site)"),
) -> None:
    """Set one field; the whole group is sanitized before it is stored."""
    host = get_host()
    if network:
        stored = host.network_settings.update_field(field, value)
    else:
        site_id = site if site is not None else host.runtime.main_site_id
        host.sites.get_site(site_id)
        with host.runtime.switched_to_site(site_id):
            try:
                stored = host.settings.update_field(group, field, value)
            except ValueError as e:
                raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e

    format_success(f"'{field}' set to '{stored[field]}'")
