"""Command 'update' of siteupdater"""

import typer

from siteupdater.models.exceptions import SiteUpdaterError
from siteupdater.services.host_service import Host, get_host
from siteupdater.updater.routines import DATABASE_VERSION
from siteupdater.utils import exit_codes
from siteupdater.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer()


def run_update(host: Host, target: int) -> dict:
    """Run the update pass and report what was applied."""
    try:
        results = host.updater.update(target, host.config.configuration_option_name)
    except SiteUpdaterError:
        raise
    except Exception as e:
        raise AppError(f"Update routine failed: {e}", exit_codes.ERROR_UPDATE_FAILED) from e

    store = host.version_store
    for scope, versions in results.items():
        if versions:
            format_success(
                f"{scope}: applied routine(s) {', '.join(str(v) for v in versions)}"
            )
        else:
            format_info(
                f"{scope}: nothing to apply (database version {store.current_version(scope)})"
            )
    return results


@app.command()
@command_wrapper
def update(
    target: int = typer.Option(
        DATABASE_VERSION, "--target", "-t", min=0, help="Target database version"
    ),
) -> None:
    """Apply pending database update routines."""
    run_update(get_host(), target)
