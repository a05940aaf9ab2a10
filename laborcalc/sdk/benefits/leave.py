"""Annual leave entitlement and encashment."""

from decimal import Decimal

from ..schemas import (
    BenefitType,
    CalculationResult,
    EmploymentInputs,
    EmploymentRuleSet,
    Outcome,
)
from .money import (
    MAX_UNUSED_LEAVE_DAYS,
    MAX_YEARS_OF_SERVICE,
    breakdown,
    check_salary,
    completed_months,
    daily_rate,
    money_context,
    require_non_negative,
    round_cents,
    round_days,
)


def leave_entitlement(rules: EmploymentRuleSet, years_of_service: Decimal) -> int:
    """Annual leave days the employee is entitled to.

    Before min_years_for_full_leave, leave accrues per completed month at
    days_per_month_first_year; from then on the full annual_days apply.
    """
    leave = rules.leave
    if years_of_service < leave.min_years_for_full_leave:
        months = completed_months(years_of_service)
        return round_days(months * leave.days_per_month_first_year)
    return leave.annual_days


def compute_leave(rules: EmploymentRuleSet, inputs: EmploymentInputs) -> Outcome:
    """Compute leave entitlement (days) and cash value of unused leave."""
    invalid = (
        check_salary(inputs.monthly_salary)
        or require_non_negative("unused_leave_days", inputs.unused_leave_days, MAX_UNUSED_LEAVE_DAYS)
        or require_non_negative("years_of_service", inputs.years_of_service, MAX_YEARS_OF_SERVICE)
    )
    if invalid:
        return invalid

    with money_context():
        entitlement = leave_entitlement(rules, inputs.years_of_service)
        day_rate = daily_rate(inputs.monthly_salary)
        encashment = day_rate * inputs.unused_leave_days
        amount = round_cents(encashment)

        return CalculationResult(
            benefit_type=BenefitType.LEAVE,
            jurisdiction=rules.code,
            amount=amount,
            currency_code=rules.currency_code,
            breakdown=breakdown(
                ("daily_rate", day_rate),
                ("encashment", encashment),
            ),
            entitlement_days=entitlement,
        )
