"""End-of-service gratuity.

Gratuity accrues in two tiers of "days of wage per year of service":
first_years_rate for the first first_years_period years, later_years_rate
after that. Service below min_years_for_gratuity earns nothing. Where the
jurisdiction applies a resignation penalty, an employee who resigns with
under five years keeps one third (1-3 years) or two thirds (3-5 years) of
the amount. The result is capped at max_gratuity_years monthly salaries.

Intermediate amounts are carried at full precision; only the final amount
is rounded to cents.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from ..schemas import (
    BenefitType,
    CalculationResult,
    EmploymentInputs,
    EmploymentRuleSet,
    Outcome,
    SeparationType,
)
from .money import (
    MAX_YEARS_OF_SERVICE,
    breakdown,
    check_salary,
    daily_rate,
    money_context,
    require_non_negative,
    round_cents,
)


# (from_years, to_years, numerator, denominator): fraction kept on resignation
RESIGNATION_TIERS: Tuple[Tuple[Decimal, Decimal, int, int], ...] = (
    (Decimal(1), Decimal(3), 1, 3),
    (Decimal(3), Decimal(5), 2, 3),
)


def resignation_fraction(total_years: Decimal) -> Optional[Tuple[int, int]]:
    """Fraction of the gratuity kept on resignation, or None if no reduction applies."""
    for lower, upper, numerator, denominator in RESIGNATION_TIERS:
        if lower <= total_years < upper:
            return numerator, denominator
    return None


def tiered_amounts(rules: EmploymentRuleSet, day_rate: Decimal, total_years: Decimal) -> Tuple[Decimal, Decimal]:
    """Split the unreduced gratuity into (first tier, later tier) amounts."""
    g = rules.gratuity
    if total_years < g.min_years_for_gratuity:
        return Decimal(0), Decimal(0)
    if total_years <= g.first_years_period:
        return day_rate * g.first_years_rate * total_years, Decimal(0)
    first = day_rate * g.first_years_rate * g.first_years_period
    later = day_rate * g.later_years_rate * (total_years - g.first_years_period)
    return first, later


def compute_gratuity(rules: EmploymentRuleSet, inputs: EmploymentInputs) -> Outcome:
    """Compute the end-of-service gratuity.

    Args:
        rules: Rule set of the jurisdiction
        inputs: monthly_salary, years_of_service and separation_type are used

    Returns:
        CalculationResult with breakdown lines daily_rate, first_years,
        later_years and, when applied, resignation_reduction and
        cap_reduction; or InvalidInput for non-positive salary or negative
        service.
    """
    invalid = check_salary(inputs.monthly_salary) or require_non_negative(
        "years_of_service", inputs.years_of_service, MAX_YEARS_OF_SERVICE
    )
    if invalid:
        return invalid

    with money_context():
        salary = inputs.monthly_salary
        total_years = inputs.years_of_service
        day_rate = daily_rate(salary)

        first, later = tiered_amounts(rules, day_rate, total_years)
        base = first + later
        lines: List[Tuple[str, Decimal]] = [
            ("daily_rate", day_rate),
            ("first_years", first),
            ("later_years", later),
        ]

        if rules.gratuity.resignation_penalty and inputs.separation_type == SeparationType.RESIGNATION:
            fraction = resignation_fraction(total_years)
            if fraction is not None:
                numerator, denominator = fraction
                reduced = base * numerator / denominator
                lines.append(("resignation_reduction", reduced - base))
                base = reduced

        cap = salary * rules.gratuity.max_gratuity_years
        if base > cap:
            lines.append(("cap_reduction", cap - base))
            base = cap

        amount = round_cents(base)

        return CalculationResult(
            benefit_type=BenefitType.GRATUITY,
            jurisdiction=rules.code,
            amount=amount,
            currency_code=rules.currency_code,
            breakdown=breakdown(*lines),
        )
