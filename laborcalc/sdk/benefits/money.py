"""Decimal helpers and input guards shared by the benefit calculators."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Optional, Tuple

from ..schemas import BreakdownItem, InvalidInput


# Statutory convention: a month counts as 30 days regardless of the calendar.
DAYS_PER_MONTH = Decimal(30)

CENT = Decimal("0.01")
ONE = Decimal(1)
MONTH_QUANTUM = Decimal("1e-9")

# Sanity limits. Anything beyond these is treated as a data-entry error
# rather than computed into an unbounded result.
MAX_MONTHLY_SALARY = Decimal("1000000000")
MAX_YEARS_OF_SERVICE = Decimal("100")
MAX_OVERTIME_HOURS = Decimal("8784")  # hours in a leap year
MAX_UNUSED_LEAVE_DAYS = Decimal("3660")

_CONTEXT = Context(prec=34)


def money_context():
    """Local decimal context for calculations; never touches the caller's context."""
    return localcontext(_CONTEXT)


def round_cents(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero (0.005 -> 0.01)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP, context=_CONTEXT)


def round_days(days: Decimal) -> int:
    """Round to the nearest whole day, halves up."""
    return int(days.quantize(ONE, rounding=ROUND_HALF_UP, context=_CONTEXT))


def completed_months(years: Decimal) -> int:
    """Whole months in a fractional year count.

    years + months / 12 is inexact in decimal (7/12 * 12 = 6.999...), so the
    month count is snapped to 1e-9 before flooring.
    """
    with money_context():
        months = (years * 12).quantize(MONTH_QUANTUM, rounding=ROUND_HALF_UP)
    return math.floor(months)


def daily_rate(monthly_salary: Decimal) -> Decimal:
    """Daily wage under the 30-day month convention."""
    return monthly_salary / DAYS_PER_MONTH


def breakdown(*lines: Tuple[str, Decimal]) -> Tuple[BreakdownItem, ...]:
    """Build breakdown items, each rounded to cents for display."""
    return tuple(BreakdownItem(label=label, amount=round_cents(amount)) for label, amount in lines)


def require_positive(field: str, value: Decimal, limit: Decimal) -> Optional[InvalidInput]:
    """Return InvalidInput unless 0 < value <= limit."""
    if value <= 0:
        return InvalidInput(field=field, message=f"{field} must be greater than 0, got {value}")
    if value > limit:
        return InvalidInput(field=field, message=f"{field} exceeds the maximum of {limit}, got {value}")
    return None


def require_non_negative(field: str, value: Decimal, limit: Decimal) -> Optional[InvalidInput]:
    """Return InvalidInput unless 0 <= value <= limit."""
    if value < 0:
        return InvalidInput(field=field, message=f"{field} must not be negative, got {value}")
    if value > limit:
        return InvalidInput(field=field, message=f"{field} exceeds the maximum of {limit}, got {value}")
    return None


def check_salary(monthly_salary: Decimal) -> Optional[InvalidInput]:
    return require_positive("monthly_salary", monthly_salary, MAX_MONTHLY_SALARY)
