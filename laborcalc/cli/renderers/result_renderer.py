"""Rich renderer for calculation results and rule sets.

Transforms SDK results into formatted Rich panels and tables.
"""

from decimal import Decimal

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from laborcalc.sdk.schemas import BenefitType, CalculationResult, EmploymentRuleSet


TITLES = {
    BenefitType.GRATUITY: "Estimated Gratuity",
    BenefitType.OVERTIME: "Overtime Pay",
    BenefitType.LEAVE: "Leave Encashment",
}


def _money(amount: Decimal, currency_code: str) -> str:
    return f"{amount:,.2f} {currency_code}"


def render_result(console: Console, result: CalculationResult, rules: EmploymentRuleSet) -> None:
    """Render a calculation result.

    Args:
        console: Rich Console instance
        result: Successful CalculationResult
        rules: Rule set the result was computed under
    """
    lines = [f"[bold green]{_money(result.amount, result.currency_code)}[/bold green]"]
    if result.entitlement_days is not None:
        lines.append(f"Annual entitlement: [bold]{result.entitlement_days}[/bold] days")
    lines.append(f"[dim]Based on {rules.name} labor law (rules v{rules.version})[/dim]")

    console.print(Panel(
        "\n".join(lines),
        title=TITLES.get(result.benefit_type, result.benefit_type.value),
        border_style="green",
    ))

    if result.breakdown:
        _render_breakdown(console, result)


def _render_breakdown(console: Console, result: CalculationResult) -> None:
    """Render breakdown lines as a two-column table."""
    table = Table(title="Breakdown", box=box.SIMPLE, show_header=False)
    table.add_column("Item", style="dim")
    table.add_column("Amount", justify="right")

    for item in result.breakdown:
        label = item.label.replace("_", " ").capitalize()
        style = "red" if item.amount < 0 else None
        table.add_row(label, _money(item.amount, result.currency_code), style=style)

    console.print(table)


def render_rule_sets(console: Console, rule_sets: list, default: EmploymentRuleSet) -> None:
    """Render a summary table of jurisdictions."""
    table = Table(title="Jurisdictions", expand=False)
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Region")
    table.add_column("Currency")
    table.add_column("Gratuity", justify="right")
    table.add_column("Overtime", justify="right")
    table.add_column("Leave", justify="right")

    for rules in [*rule_sets, default]:
        premium = round((rules.overtime.normal_rate - 1) * 100)
        table.add_row(
            rules.code,
            rules.name,
            rules.region or "",
            rules.currency_code,
            f"{rules.gratuity.first_years_rate} days/yr",
            f"+{premium}%",
            f"{rules.leave.annual_days} days/yr",
        )

    console.print(table)


def render_rule_set(console: Console, rules: EmploymentRuleSet) -> None:
    """Render every parameter of one rule set."""
    header = f"[bold]{rules.name}[/bold] ({rules.code})  {rules.currency_code} {rules.currency_symbol}"
    if rules.source:
        header += f"\n[dim]{rules.source}[/dim]"
    console.print(Panel(header, border_style="cyan"))

    for section in ("gratuity", "overtime", "leave"):
        table = Table(title=section.capitalize(), box=box.SIMPLE, show_header=False)
        table.add_column("key", style="dim")
        table.add_column("value", justify="right")
        for key, value in getattr(rules, section).model_dump().items():
            table.add_row(key, str(value))
        console.print(table)
