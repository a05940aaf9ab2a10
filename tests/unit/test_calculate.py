"""Tests for the calculate() entry point and input parsing."""

from decimal import Decimal, getcontext, localcontext

import pytest

from laborcalc.sdk import (
    BenefitType,
    CalculationResult,
    EmploymentInputs,
    InvalidInput,
    RuleRegistry,
    SeparationType,
    calculate,
    parse_inputs,
)
from laborcalc.sdk.rules import DEFAULT_RULES


class TestDispatch:
    """calculate() resolves rules and picks the right calculator."""

    def test_gratuity(self):
        result = calculate("uae", BenefitType.GRATUITY, {"monthly_salary": 3000, "years_of_service": 3})
        assert isinstance(result, CalculationResult)
        assert result.benefit_type == BenefitType.GRATUITY
        assert result.jurisdiction == "uae"
        assert result.amount == Decimal("6300.00")

    def test_overtime_by_string(self):
        result = calculate("uae", "overtime", {"monthly_salary": "2400", "overtime_hours": "10"})
        assert result.amount == Decimal("125.00")

    def test_leave_with_inputs_model(self):
        inputs = EmploymentInputs(monthly_salary=3000, years_of_service=2, unused_leave_days=5)
        result = calculate("uae", "leave", inputs)
        assert result.entitlement_days == 30
        assert result.amount == Decimal("500.00")

    def test_benefit_type_case_insensitive(self):
        result = calculate("uae", " Gratuity ", {"monthly_salary": 3000, "years_of_service": 7})
        assert result.amount == Decimal("16500.00")

    def test_unknown_benefit_type(self):
        result = calculate("uae", "bonus", {"monthly_salary": 3000})
        assert isinstance(result, InvalidInput)
        assert result.field == "benefit_type"

    def test_unsupported_inputs_type(self):
        result = calculate("uae", "gratuity", 3000)
        assert not result.ok

    def test_injected_registry(self):
        registry = RuleRegistry([DEFAULT_RULES.model_copy(update={"code": "test", "currency_code": "EUR"})])
        result = calculate("TEST", "gratuity", {"monthly_salary": 3000, "years_of_service": 3}, registry=registry)
        assert result.currency_code == "EUR"
        assert result.jurisdiction == "test"

    def test_repeat_calls_are_identical(self):
        raw = {"monthly_salary": "3456.78", "years_of_service": "6.25", "separation_type": "resignation"}
        assert calculate("sau", "gratuity", raw) == calculate("sau", "gratuity", raw)


class TestCallerDecimalContext:
    """Results do not depend on the caller's decimal context."""

    @pytest.mark.parametrize("benefit,raw", [
        ("gratuity", {"monthly_salary": 3000, "years_of_service": 7}),
        ("overtime", {"monthly_salary": 2400, "overtime_hours": 10}),
        ("leave", {"monthly_salary": 3000, "years_of_service": 0, "months_of_service": 7, "unused_leave_days": 5}),
    ])
    def test_low_precision_context(self, benefit, raw):
        expected = calculate("uae", benefit, raw)
        with localcontext() as ctx:
            ctx.prec = 6
            result = calculate("uae", benefit, raw)
            assert getcontext().prec == 6
        assert result.ok
        assert result == expected

    def test_low_precision_gratuity_amount(self):
        with localcontext() as ctx:
            ctx.prec = 6
            result = calculate("uae", "gratuity", {"monthly_salary": 3000, "years_of_service": 7})
        assert result.amount == Decimal("16500.00")
        assert result.line("later_years") == Decimal("6000.00")

    def test_low_precision_months_fold(self):
        with localcontext() as ctx:
            ctx.prec = 6
            inputs = parse_inputs({"monthly_salary": 3000, "months_of_service": 7})
        assert calculate("uae", "leave", inputs).entitlement_days == 14


class TestUnknownJurisdiction:
    """Unknown codes silently use the default rule set."""

    def test_gratuity_uses_default_rules(self):
        result = calculate("atlantis", "gratuity", {
            "monthly_salary": 3000, "years_of_service": 3, "separation_type": "resignation",
        })
        assert result.ok
        assert result.jurisdiction == "default"
        assert result.currency_code == "USD"
        # default rules carry no resignation penalty
        assert result.amount == Decimal("6300.00")

    def test_leave_uses_default_annual_days(self):
        result = calculate(None, "leave", {"monthly_salary": 3000, "years_of_service": 2})
        assert result.entitlement_days == 21

    @pytest.mark.parametrize("code", ["uae", "sau", "kwt", "qat", "bhr", "omn", "nowhere"])
    def test_currency_follows_rule_set(self, code):
        from laborcalc.sdk import lookup
        result = calculate(code, "overtime", {"monthly_salary": 2400, "overtime_hours": 1})
        assert result.currency_code == lookup(code).currency_code


class TestParseInputs:
    """Raw values are parsed without raising."""

    def test_strings_become_decimals(self):
        inputs = parse_inputs({"monthly_salary": "3000.50", "years_of_service": "2"})
        assert inputs.monthly_salary == Decimal("3000.50")
        assert inputs.years_of_service == Decimal("2")

    def test_none_values_use_defaults(self):
        inputs = parse_inputs({"monthly_salary": 3000, "overtime_hours": None, "separation_type": None})
        assert inputs.overtime_hours == Decimal("0")
        assert inputs.separation_type == SeparationType.TERMINATION

    def test_months_fold_into_years(self):
        inputs = parse_inputs({"monthly_salary": 3000, "years_of_service": 4, "months_of_service": "6"})
        assert inputs.years_of_service == Decimal("4.5")

    @pytest.mark.parametrize("raw,field", [
        ({"monthly_salary": "abc"}, "monthly_salary"),
        ({"monthly_salary": "NaN"}, "monthly_salary"),
        ({"monthly_salary": "Infinity"}, "monthly_salary"),
        ({"monthly_salary": 3000, "overtime_type": "night"}, "overtime_type"),
        ({"monthly_salary": 3000, "separation_type": "fired"}, "separation_type"),
        ({"monthly_salary": 3000, "bonus": 1}, "bonus"),
        ({"monthly_salary": 3000, "months_of_service": "six"}, "months_of_service"),
        ({}, "monthly_salary"),
    ])
    def test_malformed_values(self, raw, field):
        result = parse_inputs(raw)
        assert isinstance(result, InvalidInput)
        assert result.field == field

    def test_malformed_input_through_calculate(self):
        result = calculate("uae", "gratuity", {"monthly_salary": "3,000", "years_of_service": 3})
        assert not result.ok
        assert result.field == "monthly_salary"
