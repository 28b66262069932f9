"""Site (tenant) management commands."""

import typer

from siteupdater.services.host_service import get_host
from siteupdater.utils import exit_codes
from siteupdater.utils.typer_helpers import SuggestingGroup
from siteupdater.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Site management commands")


@app.command("list")
@command_wrapper
def list_sites(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (defaults to output.format)"
    ),
) -> None:
    """List the sites of the network."""
    host = get_host()
    format_output(
        host.sites.list_sites(host.runtime.network_id),
        output or host.config.output.format,
    )


@app.command("add")
@command_wrapper
def add_site(
    domain: str = typer.Argument(..., help="Site domain"),
    path: str = typer.Option("/", "--path", help="Site path"),
) -> None:
    """Add a site; runs the per-site activation when network-active."""
    host = get_host()
    try:
        site_id = host.sites.add_site(domain, path, host.runtime.network_id)
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Site {site_id} created")

    if host.activator.activate_new_site(
        site_id, host.default_configuration, host.config.configuration_option_name
    ):
        format_info(f"Activated '{host.slug}' on site {site_id}")


@app.command("remove")
@command_wrapper
def remove_site(
    site_id: int = typer.Argument(..., help="Site id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a site and its options."""
    host = get_host()
    if site_id == host.runtime.main_site_id:
        raise AppError("The main site cannot be removed", exit_codes.ERROR_INVALID_ARGS)
    if not yes and not typer.confirm(f"Delete site {site_id} and all its options?"):
        raise typer.Exit(0)
    host.sites.delete_site(site_id)
    format_success(f"Site {site_id} deleted")
