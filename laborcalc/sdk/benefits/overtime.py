"""Overtime premium pay.

hourly_rate = monthly_salary / work_hours_per_month, multiplied by the rate
for the day category (normal, weekend, holiday) and the hours worked.
"""

from ..schemas import (
    BenefitType,
    CalculationResult,
    EmploymentInputs,
    EmploymentRuleSet,
    Outcome,
)
from .money import MAX_OVERTIME_HOURS, breakdown, check_salary, money_context, require_positive, round_cents


def compute_overtime(rules: EmploymentRuleSet, inputs: EmploymentInputs) -> Outcome:
    """Compute overtime pay for the given hours and day category.

    Breakdown lines: hourly_rate, overtime_hourly_rate, base_pay (hours at
    the plain hourly rate) and premium (the uplift on top of base_pay).
    """
    invalid = check_salary(inputs.monthly_salary) or require_positive(
        "overtime_hours", inputs.overtime_hours, MAX_OVERTIME_HOURS
    )
    if invalid:
        return invalid

    with money_context():
        hourly_rate = inputs.monthly_salary / rules.overtime.work_hours_per_month
        multiplier = rules.overtime.multiplier_for(inputs.overtime_type)
        overtime_rate = hourly_rate * multiplier
        pay = overtime_rate * inputs.overtime_hours
        base_pay = hourly_rate * inputs.overtime_hours
        amount = round_cents(pay)

        return CalculationResult(
            benefit_type=BenefitType.OVERTIME,
            jurisdiction=rules.code,
            amount=amount,
            currency_code=rules.currency_code,
            breakdown=breakdown(
                ("hourly_rate", hourly_rate),
                ("overtime_hourly_rate", overtime_rate),
                ("base_pay", base_pay),
                ("premium", pay - base_pay),
            ),
        )
