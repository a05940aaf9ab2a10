"""Rules CLI commands - browse jurisdiction rule sets."""

import json

import click
import yaml
from rich.console import Console

from laborcalc.sdk import get_registry, get_rules_dir, RuleDataError
from .renderers.result_renderer import render_rule_set, render_rule_sets


def _load_registry():
    try:
        return get_registry()
    except RuleDataError as e:
        raise click.ClickException(f"Invalid rule data in {get_rules_dir()}: {e}")


@click.group()
def rules():
    """Browse jurisdiction rule sets.

    Rule files are read from (in order):

    \b
    1. LABOR_CALC_RULES_PATH environment variable
    2. settings.json 'rules_dir' key
    3. Rule files bundled with labor-calc
    """
    pass


@rules.command("list")
@click.option("--region", default=None, help="Only show jurisdictions in this region (e.g., gcc)")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
def rules_list(region, output_format):
    """List available jurisdictions."""
    registry = _load_registry()
    rule_sets = registry.list_rule_sets(region=region)

    if output_format == "json":
        data = [
            {"code": r.code, "name": r.name, "region": r.region, "currency_code": r.currency_code}
            for r in rule_sets
        ]
        click.echo(json.dumps({"jurisdictions": data, "default": registry.default.code}, indent=2))
        return

    render_rule_sets(Console(), rule_sets, registry.default)
    click.echo(f"Rules directory: {get_rules_dir()}")


@rules.command("show")
@click.argument("code")
@click.option("--format", "output_format", type=click.Choice(["table", "yaml", "json"]), default="table",
              help="Output format (default: table)")
def rules_show(code, output_format):
    """Show the rule set CODE resolves to.

    Unknown codes show the default rule set, exactly as calculations would
    use it.
    """
    registry = _load_registry()
    rule_set = registry.lookup(code)

    if code not in registry and code.strip().lower() != registry.default.code:
        click.echo(f"No rules for '{code}'; showing default rule set.", err=True)

    data = rule_set.model_dump(mode="json")
    if output_format == "json":
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    else:
        render_rule_set(Console(), rule_set)
