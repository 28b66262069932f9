"""Main entry point for siteupdater."""

import typer

from siteupdater.commands import (
    activate_command,
    config,
    deactivate_command,
    settings,
    sites,
    status_command,
    uninstall_command,
    update_command,
    version_command,
)
from siteupdater.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="siteupdater",
    cls=SuggestingGroup,
    help="Plugin lifecycle and versioned database updates for single sites and networks",
    no_args_is_help=True,
)

# Sub-command groups
app.add_typer(sites.app, name="sites", help="Site management commands")
app.add_typer(settings.app, name="settings", help="Plugin settings commands")
app.add_typer(config.app, name="config", help="Configuration management")

# Top-level commands
app.command("version")(version_command.version)
app.command("activate")(activate_command.activate)
app.command("deactivate")(deactivate_command.deactivate)
app.command("update")(update_command.update)
app.command("status")(status_command.status)
app.command("uninstall")(uninstall_command.uninstall)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
