"""Pydantic schemas for labor-calc.

Rule sets, per-request inputs and calculation outcomes. All schemas use
extra='forbid' so a typo in a rule file or request is a clear error rather
than a silently ignored key. Rule sets, inputs and results are frozen: a
rule set is shared by every request for the life of the process, and a
result is never edited after the calculator hands it back.
"""

from datetime import date
from decimal import Decimal, localcontext
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enumerations
# =============================================================================


class BenefitType(str, Enum):
    """Benefit a caller can ask the engine to compute."""

    GRATUITY = "gratuity"
    OVERTIME = "overtime"
    LEAVE = "leave"


class SeparationType(str, Enum):
    """How the employment ended (gratuity only)."""

    TERMINATION = "termination"
    RESIGNATION = "resignation"


class OvertimeType(str, Enum):
    """Day category the overtime hours were worked on."""

    NORMAL = "normal"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


# =============================================================================
# Rule Set Schemas - one per jurisdiction, loaded from labor_rules/*.yaml
# =============================================================================


class GratuityRules(BaseModel):
    """End-of-service gratuity parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    first_years_rate: Decimal = Field(
        ..., ge=0, description="Days of wage per year of service during the first tier"
    )
    first_years_period: Decimal = Field(
        ..., ge=0, description="Length of the first tier in years"
    )
    later_years_rate: Decimal = Field(
        ..., ge=0, description="Days of wage per year of service after the first tier"
    )
    min_years_for_gratuity: Decimal = Field(
        ..., ge=0, description="Minimum service before any gratuity accrues"
    )
    resignation_penalty: bool = Field(
        ..., description="Whether resigning before five years reduces the gratuity"
    )
    max_gratuity_years: Decimal = Field(
        ..., ge=0, description="Cap on the gratuity, in multiples of the monthly salary"
    )


class OvertimeRules(BaseModel):
    """Overtime premium multipliers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    normal_rate: Decimal = Field(..., ge=1, description="Multiplier for ordinary working days")
    weekend_rate: Decimal = Field(..., ge=1, description="Multiplier for the weekly rest day")
    holiday_rate: Decimal = Field(..., ge=1, description="Multiplier for public holidays")
    work_hours_per_month: Decimal = Field(
        ..., gt=0, description="Divisor turning a monthly salary into an hourly rate"
    )

    def multiplier_for(self, overtime_type: "OvertimeType") -> Decimal:
        """Return the multiplier that applies to an overtime category."""
        if overtime_type == OvertimeType.WEEKEND:
            return self.weekend_rate
        if overtime_type == OvertimeType.HOLIDAY:
            return self.holiday_rate
        return self.normal_rate


class LeaveRules(BaseModel):
    """Annual leave entitlement parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    annual_days: int = Field(..., ge=0, description="Full annual leave entitlement in days")
    min_years_for_full_leave: Decimal = Field(
        ..., ge=0, description="Service after which the full entitlement applies"
    )
    days_per_month_first_year: Decimal = Field(
        ..., ge=0, description="Days accrued per completed month before full entitlement"
    )


class EmploymentRuleSet(BaseModel):
    """Complete labor-law parameters for one jurisdiction."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(..., min_length=1, description="Jurisdiction code (e.g., 'uae')")
    name: str = Field(..., description="Display name of the jurisdiction")
    region: Optional[str] = Field(default=None, description="Grouping such as 'gcc'")
    aliases: Tuple[str, ...] = Field(
        default=(), description="Alternate codes resolving to this rule set"
    )
    version: str = Field(default="1", description="Revision of the rule data")
    effective: Optional[date] = Field(default=None, description="Date the parameters took effect")
    source: Optional[str] = Field(default=None, description="Statute or regulation cited")

    gratuity: GratuityRules
    overtime: OvertimeRules
    leave: LeaveRules
    currency_code: str = Field(..., min_length=3, max_length=3)
    currency_symbol: str = Field(..., min_length=1)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("aliases")
    @classmethod
    def normalize_aliases(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(a.strip().lower() for a in v)

    @field_validator("currency_code")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


# =============================================================================
# Request / Result Schemas
# =============================================================================


def service_years(years, months) -> Decimal:
    """Fold whole years and extra months into fractional years of service.

    The division is carried at 34 digits regardless of the caller's decimal
    context; calculators snap the month count back before flooring it.
    """
    with localcontext() as ctx:
        ctx.prec = 34
        return Decimal(str(years)) + Decimal(str(months)) / 12


class EmploymentInputs(BaseModel):
    """Inputs for a single calculation.

    Only numeric well-formedness is enforced here. Range checks (salary must
    be positive, hours must be positive, ...) belong to each calculator so
    that they come back as an InvalidInput value instead of an exception.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    monthly_salary: Decimal = Field(..., allow_inf_nan=False, description="Final monthly salary")
    years_of_service: Decimal = Field(
        default=Decimal("0"), allow_inf_nan=False,
        description="Fractional years of service (years + months/12)",
    )
    separation_type: SeparationType = Field(default=SeparationType.TERMINATION)
    overtime_hours: Decimal = Field(default=Decimal("0"), allow_inf_nan=False)
    overtime_type: OvertimeType = Field(default=OvertimeType.NORMAL)
    unused_leave_days: Decimal = Field(default=Decimal("0"), allow_inf_nan=False)

    @classmethod
    def from_service(
        cls,
        monthly_salary: Union[Decimal, int, float, str],
        years: Union[Decimal, int, float, str] = 0,
        months: Union[Decimal, int, float, str] = 0,
        **kwargs,
    ) -> "EmploymentInputs":
        """Build inputs from service split into whole years and months.

        Args:
            monthly_salary: Final monthly salary
            years: Completed years of service
            months: Additional months of service
            **kwargs: Any other EmploymentInputs field

        Returns:
            EmploymentInputs with years_of_service = years + months / 12
        """
        return cls(monthly_salary=monthly_salary, years_of_service=service_years(years, months), **kwargs)


class BreakdownItem(BaseModel):
    """A named sub-amount shown alongside a result for audit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    amount: Decimal


class CalculationResult(BaseModel):
    """Successful calculation outcome."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    benefit_type: BenefitType
    jurisdiction: str = Field(..., description="Code of the rule set actually applied")
    amount: Decimal = Field(..., ge=0, description="Amount payable, rounded to cents")
    currency_code: str
    breakdown: Tuple[BreakdownItem, ...] = Field(default=())
    entitlement_days: Optional[int] = Field(
        default=None, ge=0, description="Annual leave entitlement (leave only)"
    )

    @property
    def ok(self) -> bool:
        return True

    def line(self, label: str) -> Optional[Decimal]:
        """Return the breakdown amount with the given label, if present."""
        for item in self.breakdown:
            if item.label == label:
                return item.amount
        return None


class InvalidInput(BaseModel):
    """Typed failure returned when inputs cannot produce a result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: Optional[str] = Field(default=None, description="Offending input, if known")
    message: str

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[CalculationResult, InvalidInput]
