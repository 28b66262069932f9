"""Configuration management commands."""

import typer

from siteupdater.services.config_service import get_config_service
from siteupdater.utils.typer_helpers import SuggestingGroup
from siteupdater.utils.ui.console import get_console
from siteupdater.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | list[str]:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if "," in value:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


@app.command("view")
def view_config(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (defaults to output.format)"
    ),
) -> None:
    """View current configuration."""
    try:
        config = get_config_service().config
        format_output(config.model_dump(), output or config.output.format)
    except Exception as e:
        format_error(f"Failed to view config: {str(e)}")
        raise typer.Exit(1)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., multisite)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., multisite)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()
    parsed_value = _parse_value(value)
    if isinstance(config_service.get(key), list) and not isinstance(parsed_value, list):
        parsed_value = [str(parsed_value)]
    try:
        config_service.set(key, parsed_value)
    except (KeyError, ValueError) as e:
        format_error(f"Failed to set config: {str(e)}")
        raise typer.Exit(1)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except (KeyError, ValueError) as e:
        format_error(f"Failed to reset config: {str(e)}")
        raise typer.Exit(1)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
