"""Labor Calc CLI - Command-line interface for statutory benefit calculations."""

import logging
import os

import click

from laborcalc import __version__

from .calc_commands import gratuity, overtime, leave
from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group


def _configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


@click.group()
@click.version_option(version=__version__, prog_name="labor-calc")
def cli():
    """Labor Calc - End-of-service gratuity, overtime and leave calculations.

    Each calculation uses the labor-law parameters of a jurisdiction
    (-j CODE). Unknown codes use the default rule set.

    Settings are loaded from (in order):

    \b
    1. LABOR_CALC_CONFIG_PATH environment variable
    2. ~/.config/labor-calc/settings.json (XDG default)

    Run 'labor-calc rules list' to see available jurisdictions.
    """
    _configure_logging()


# Calculations
cli.add_command(gratuity)
cli.add_command(overtime)
cli.add_command(leave)

# Subcommand groups
cli.add_command(rules_group)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
