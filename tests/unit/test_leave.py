"""Tests for annual leave entitlement and encashment."""

from decimal import Decimal

import pytest

from laborcalc.sdk import calculate
from laborcalc.sdk.benefits import compute_leave, leave_entitlement
from laborcalc.sdk.rules import get_registry, lookup
from laborcalc.sdk.schemas import EmploymentInputs


def leave(code: str, salary, years, unused=0):
    inputs = EmploymentInputs(
        monthly_salary=salary, years_of_service=years, unused_leave_days=unused
    )
    return compute_leave(lookup(code), inputs)


class TestEntitlement:

    def test_full_entitlement_after_minimum(self):
        result = leave("uae", 3000, 2, unused=5)
        assert result.ok
        assert result.entitlement_days == 30
        assert result.amount == Decimal("500.00")

    def test_first_year_accrues_per_completed_month(self):
        # 6 completed months x 2 days
        assert leave_entitlement(lookup("uae"), Decimal("0.5")) == 12

    def test_partial_month_is_not_counted(self):
        # 0.49 years = 5.88 months -> 5 completed months
        assert leave_entitlement(lookup("uae"), Decimal("0.49")) == 10

    def test_fractional_days_round_half_up(self):
        # Kuwait: 3 months x 2.5 = 7.5 -> 8
        assert leave_entitlement(lookup("kwt"), Decimal("0.25")) == 8

    def test_zero_service(self):
        assert leave_entitlement(lookup("uae"), Decimal(0)) == 0

    def test_entitlement_equals_annual_days_once_eligible(self):
        for rules in get_registry().list_rule_sets():
            for extra in (0, 1, 7):
                years = rules.leave.min_years_for_full_leave + extra
                assert leave_entitlement(rules, years) == rules.leave.annual_days


class TestMonthsOfService:
    """Service given as years plus months counts every completed month."""

    @pytest.mark.parametrize("months", range(1, 12))
    def test_months_via_calculate(self, months):
        result = calculate("uae", "leave", {
            "monthly_salary": 3000, "years_of_service": 0, "months_of_service": months,
        })
        assert result.entitlement_days == 2 * months

    @pytest.mark.parametrize("months", range(1, 12))
    def test_months_via_from_service(self, months):
        inputs = EmploymentInputs.from_service(3000, years=0, months=months)
        assert compute_leave(lookup("uae"), inputs).entitlement_days == 2 * months

    def test_seven_months(self):
        inputs = EmploymentInputs.from_service(3000, years=0, months=7)
        assert compute_leave(lookup("uae"), inputs).entitlement_days == 14

    def test_years_and_months_saudi(self):
        # 3 years 5 months = 41 months x 2 days, still below the 5-year threshold
        result = calculate("sau", "leave", {
            "monthly_salary": 3000, "years_of_service": 3, "months_of_service": 5,
        })
        assert result.entitlement_days == 82

class TestEncashment:

    def test_no_unused_days(self):
        result = leave("qat", 3000, 3)
        assert result.amount == Decimal("0.00")
        assert result.entitlement_days == 21
        assert result.currency_code == "QAR"

    def test_breakdown(self):
        result = leave("uae", 3000, 2, unused=5)
        assert result.line("daily_rate") == Decimal("100.00")
        assert result.line("encashment") == Decimal("500.00")

    def test_rounding(self):
        # 1000 / 30 * 7 = 233.333...
        assert leave("uae", 1000, 2, unused=7).amount == Decimal("233.33")


class TestValidation:

    def test_negative_unused_days(self):
        result = leave("uae", 3000, 2, unused=-1)
        assert not result.ok
        assert result.field == "unused_leave_days"

    @pytest.mark.parametrize("salary", [0, -100])
    def test_non_positive_salary(self, salary):
        result = leave("uae", salary, 2, unused=5)
        assert not result.ok
        assert result.field == "monthly_salary"

    def test_negative_service(self):
        result = leave("uae", 3000, -1)
        assert not result.ok
        assert result.field == "years_of_service"
