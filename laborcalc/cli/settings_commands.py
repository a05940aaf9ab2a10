"""Settings CLI commands for Labor Calc.

Manages settings.json - rules directory and default jurisdiction.
"""

import click
from pathlib import Path

from laborcalc.sdk import (
    load_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_settings_path,
    get_rules_dir,
    get_registry,
    reset_registry,
    RuleDataError,
    RuleRegistry,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - rules_dir: custom directory of jurisdiction rule files
    - default_jurisdiction: code used when -j is not given
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  rules_dir: {get_rules_dir()}")
    click.echo(f"  default_jurisdiction: {get_setting('default_jurisdiction') or 'default'}")


@settings.command("rules-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom rules_dir, revert to bundled rules")
def settings_rules_dir(path, clear):
    """Set or clear the custom rules directory.

    PATH is a directory of <code>.yaml rule files. Every file is validated
    before the setting is saved.

    Examples:
        labor-calc settings rules-dir ~/labor-rules
        labor-calc settings rules-dir --clear
    """
    if clear:
        if clear_setting("rules_dir"):
            reset_registry()
            click.echo("Cleared rules_dir setting.")
            click.echo(f"Rules directory is now: {get_rules_dir()}")
        else:
            click.echo("rules_dir was not set.")
        return

    if not path:
        current = get_setting("rules_dir")
        if current:
            click.echo(f"Current rules_dir: {current}")
        else:
            click.echo(f"No custom rules_dir set. Using: {get_rules_dir()}")
        return

    rules_path = Path(path).expanduser().resolve()
    if not rules_path.is_dir():
        raise click.ClickException(f"Not a directory: {rules_path}")

    try:
        registry = RuleRegistry.from_directory(rules_path)
    except RuleDataError as e:
        raise click.ClickException(f"Invalid rule data: {e}")

    set_setting("rules_dir", str(rules_path))
    reset_registry()
    click.echo(f"Set rules_dir: {rules_path} ({len(registry.codes())} jurisdiction(s))")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("jurisdiction")
@click.argument("code", required=False)
@click.option("--clear", is_flag=True, help="Clear default_jurisdiction")
def settings_jurisdiction(code, clear):
    """Set or clear the default jurisdiction used by calculations.

    Examples:
        labor-calc settings jurisdiction uae
        labor-calc settings jurisdiction --clear
    """
    if clear:
        if clear_setting("default_jurisdiction"):
            click.echo("Cleared default_jurisdiction setting.")
        else:
            click.echo("default_jurisdiction was not set.")
        return

    if not code:
        current = get_setting("default_jurisdiction")
        click.echo(f"Current default_jurisdiction: {current or 'default (not set)'}")
        return

    try:
        registry = get_registry()
    except RuleDataError as e:
        raise click.ClickException(f"Invalid rule data: {e}")

    if code not in registry:
        known = ", ".join(registry.codes())
        raise click.ClickException(f"Unknown jurisdiction '{code}'. Known: {known}")

    resolved = registry.lookup(code).code
    set_setting("default_jurisdiction", resolved)
    click.echo(f"Set default_jurisdiction: {resolved}")
