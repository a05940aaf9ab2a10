"""Benefit calculation commands: gratuity, overtime, leave."""

import json

import click
from rich.console import Console

from laborcalc.sdk import RuleDataError, calculate, get_registry, get_setting
from laborcalc.sdk.schemas import BenefitType, OvertimeType, SeparationType
from .renderers.result_renderer import render_result


jurisdiction_option = click.option(
    "--jurisdiction", "-j", default=None,
    help="Jurisdiction code (e.g., uae, sau). Defaults to the default_jurisdiction setting.",
)
format_option = click.option(
    "--format", "output_format", type=click.Choice(["table", "json"]), default="table",
    help="Output format (default: table)",
)


def _run(benefit: BenefitType, jurisdiction: str, raw_inputs: dict, output_format: str) -> None:
    """Calculate and print, or exit 1 with the InvalidInput message."""
    if jurisdiction is None:
        jurisdiction = get_setting("default_jurisdiction")

    try:
        registry = get_registry()
    except RuleDataError as e:
        raise click.ClickException(f"Invalid rule data: {e}")

    result = calculate(jurisdiction, benefit, raw_inputs, registry=registry)

    if not result.ok:
        raise click.ClickException(f"Cannot calculate: {result.message}")

    rules = registry.lookup(jurisdiction)

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    render_result(Console(), result, rules)


@click.command("gratuity")
@click.argument("salary")
@click.argument("years")
@click.option("--months", default=None, help="Additional months of service beyond YEARS")
@click.option("--resignation", is_flag=True, help="Employee resigned (default: terminated by employer)")
@jurisdiction_option
@format_option
def gratuity(salary, years, months, resignation, jurisdiction, output_format):
    """Calculate end-of-service gratuity.

    SALARY is the final monthly salary; YEARS the years of service.

    \b
    Examples:
      labor-calc gratuity 3000 3 -j uae
      labor-calc gratuity 3000 3 --months 6 --resignation -j uae
    """
    separation = SeparationType.RESIGNATION if resignation else SeparationType.TERMINATION
    _run(BenefitType.GRATUITY, jurisdiction, {
        "monthly_salary": salary,
        "years_of_service": years,
        "months_of_service": months,
        "separation_type": separation.value,
    }, output_format)


@click.command("overtime")
@click.argument("salary")
@click.argument("hours")
@click.option("--type", "overtime_type", type=click.Choice([t.value for t in OvertimeType]),
              default=OvertimeType.NORMAL.value, help="Day category of the overtime (default: normal)")
@jurisdiction_option
@format_option
def overtime(salary, hours, overtime_type, jurisdiction, output_format):
    """Calculate overtime pay.

    SALARY is the monthly salary; HOURS the overtime hours worked.

    \b
    Examples:
      labor-calc overtime 2400 10 -j uae
      labor-calc overtime 2400 8 --type holiday -j sau
    """
    _run(BenefitType.OVERTIME, jurisdiction, {
        "monthly_salary": salary,
        "overtime_hours": hours,
        "overtime_type": overtime_type,
    }, output_format)


@click.command("leave")
@click.argument("salary")
@click.argument("years")
@click.option("--unused-days", default="0", help="Unused leave days to encash (default: 0)")
@jurisdiction_option
@format_option
def leave(salary, years, unused_days, jurisdiction, output_format):
    """Calculate annual leave entitlement and encashment of unused days.

    SALARY is the monthly salary; YEARS the years of service.

    \b
    Examples:
      labor-calc leave 3000 2 --unused-days 5 -j uae
    """
    _run(BenefitType.LEAVE, jurisdiction, {
        "monthly_salary": salary,
        "years_of_service": years,
        "unused_leave_days": unused_days,
    }, output_format)
