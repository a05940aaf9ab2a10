"""Calculation entry point.

Resolves the jurisdiction's rule set and dispatches to the calculator for the
requested benefit. Every failure is returned as an InvalidInput value;
callers branch on result.ok.

Usage:
    from laborcalc.sdk import calculate

    result = calculate("uae", "gratuity", {"monthly_salary": 3000, "years_of_service": 3})
    if result.ok:
        print(result.amount, result.currency_code)
    else:
        print(f"Cannot calculate: {result.message}")
"""

import logging
from decimal import Decimal, InvalidOperation
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union

from pydantic import ValidationError

from .benefits import compute_gratuity, compute_leave, compute_overtime
from .rules import RuleRegistry, get_registry
from .schemas import (
    BenefitType,
    EmploymentInputs,
    EmploymentRuleSet,
    InvalidInput,
    Outcome,
    service_years,
)

logger = logging.getLogger(__name__)

Calculator = Callable[[EmploymentRuleSet, EmploymentInputs], Outcome]

CALCULATORS: Dict[BenefitType, Calculator] = {
    BenefitType.GRATUITY: compute_gratuity,
    BenefitType.OVERTIME: compute_overtime,
    BenefitType.LEAVE: compute_leave,
}


def _invalid_from_validation(e: ValidationError) -> InvalidInput:
    """Collapse a pydantic ValidationError into its first problem."""
    err = e.errors()[0]
    field = ".".join(str(part) for part in err.get("loc", ())) or None
    message = f"{field}: {err['msg']}" if field else err["msg"]
    return InvalidInput(field=field, message=message)


def parse_inputs(raw: Mapping[str, Any]) -> Union[EmploymentInputs, InvalidInput]:
    """Convert raw form or JSON values into EmploymentInputs.

    Keys with a None value are dropped so the field default applies. An
    optional months_of_service key is folded into years_of_service
    (years + months / 12).

    Returns:
        EmploymentInputs, or InvalidInput for malformed or unknown fields
    """
    data = {k: v for k, v in raw.items() if v is not None}
    months = data.pop("months_of_service", None)

    try:
        inputs = EmploymentInputs.model_validate(data)
    except ValidationError as e:
        return _invalid_from_validation(e)

    if months is not None:
        try:
            months_dec = Decimal(str(months).strip())
        except InvalidOperation:
            return InvalidInput(field="months_of_service", message=f"months_of_service is not a number: {months!r}")
        if not months_dec.is_finite():
            return InvalidInput(field="months_of_service", message="months_of_service must be a finite number")
        inputs = inputs.model_copy(
            update={"years_of_service": service_years(inputs.years_of_service, months_dec)}
        )

    return inputs


def _resolve_benefit(benefit_type: Union[BenefitType, str]) -> Optional[BenefitType]:
    if isinstance(benefit_type, BenefitType):
        return benefit_type
    try:
        return BenefitType(str(benefit_type).strip().lower())
    except ValueError:
        return None


def calculate(
    jurisdiction_code: Optional[str],
    benefit_type: Union[BenefitType, str],
    inputs: Union[EmploymentInputs, Mapping[str, Any]],
    registry: Optional[RuleRegistry] = None,
) -> Outcome:
    """Compute a benefit for a jurisdiction.

    Args:
        jurisdiction_code: Jurisdiction code or alias; unknown codes use the
            default rule set
        benefit_type: BenefitType or its value ('gratuity', 'overtime', 'leave')
        inputs: EmploymentInputs, or a mapping parsed with parse_inputs
        registry: Registry to resolve rules from (default: get_registry())

    Returns:
        CalculationResult or InvalidInput
    """
    benefit = _resolve_benefit(benefit_type)
    if benefit is None:
        choices = ", ".join(b.value for b in BenefitType)
        return InvalidInput(
            field="benefit_type",
            message=f"Unknown benefit type {benefit_type!r} (expected one of: {choices})",
        )

    if isinstance(inputs, Mapping):
        inputs = parse_inputs(inputs)
        if isinstance(inputs, InvalidInput):
            return inputs
    elif not isinstance(inputs, EmploymentInputs):
        return InvalidInput(message=f"Unsupported inputs type: {type(inputs).__name__}")

    rules = (registry or get_registry()).lookup(jurisdiction_code)
    result = CALCULATORS[benefit](rules, inputs)

    if result.ok:
        logger.debug(f"{benefit.value} for {rules.code}: {result.amount} {result.currency_code}")
    else:
        logger.debug(f"{benefit.value} for {rules.code}: invalid input ({result.message})")
    return result
