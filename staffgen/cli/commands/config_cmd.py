"""Config command for viewing and managing staffgen configuration."""

import typer

from ..app import app, console
from ... import config as config_module
from ...config import get_config, reset_config, coerce_value


VALID_KEYS = {
    "defaults.count",
    "defaults.min_age",
    "defaults.max_age",
    "defaults.output_format",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.count, defaults.max_age)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify staffgen configuration.

    Examples:
        staffgen config show
        staffgen config set defaults.count 100
        staffgen config set defaults.output_format csv
        staffgen config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] staffgen config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]staffgen Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan] (staffgen generate)")
    console.print(f"  count         = {config.defaults.count}")
    console.print(f"  min_age       = {config.defaults.min_age:g}")
    console.print(f"  max_age       = {config.defaults.max_age:g}")
    console.print(f"  output_format = {config.defaults.output_format}")

    console.print()
    config_file = config_module.CONFIG_FILE
    if config_file.exists():
        console.print(f"Config file: {config_file}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({config_file})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    try:
        coerced = coerce_value(key, value)
    except ValueError as e:
        console.print(f"[red]Invalid value for {key}:[/red] {value} ({e})")
        raise typer.Exit(1)

    config = get_config()
    setattr(config.defaults, key.split(".", 1)[1], coerced)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {config_module.CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    config_file = config_module.CONFIG_FILE
    if config_file.exists():
        config_file.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {config_file}")
    else:
        console.print("Config already at defaults (no config file exists)")
