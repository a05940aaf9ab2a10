"""benefits - Statutory benefit calculators.

Scope:
- End-of-service gratuity (tiers, resignation penalty, cap)
- Overtime premium pay
- Annual leave entitlement and encashment

Constraints:
- Pure calculation - each calculator receives a rule set and inputs,
  returns a CalculationResult or an InvalidInput value, never raises for
  bad input
- No registry access - the rule set is passed in (see calculate.py)
- Decimal arithmetic; only final amounts are rounded

Modules:
- money: 30-day convention, rounding, sanity limits, input guards
- gratuity: compute_gratuity
- overtime: compute_overtime
- leave: compute_leave, leave_entitlement

Usage:
    from laborcalc.sdk.benefits import compute_gratuity
    from laborcalc.sdk.rules import lookup

    result = compute_gratuity(lookup("uae"), inputs)
"""

from .gratuity import compute_gratuity, resignation_fraction
from .overtime import compute_overtime
from .leave import compute_leave, leave_entitlement
from .money import (
    DAYS_PER_MONTH,
    MAX_MONTHLY_SALARY,
    MAX_OVERTIME_HOURS,
    MAX_UNUSED_LEAVE_DAYS,
    MAX_YEARS_OF_SERVICE,
    round_cents,
)

__all__ = [
    # Calculators
    "compute_gratuity",
    "compute_overtime",
    "compute_leave",
    "leave_entitlement",
    "resignation_fraction",
    # Conventions and limits
    "DAYS_PER_MONTH",
    "MAX_MONTHLY_SALARY",
    "MAX_OVERTIME_HOURS",
    "MAX_UNUSED_LEAVE_DAYS",
    "MAX_YEARS_OF_SERVICE",
    "round_cents",
]
