"""Labor Calc SDK - Core functionality for statutory benefit calculations."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_rules_dir,
)

from .schemas import (
    BenefitType,
    SeparationType,
    OvertimeType,
    GratuityRules,
    OvertimeRules,
    LeaveRules,
    EmploymentRuleSet,
    EmploymentInputs,
    BreakdownItem,
    CalculationResult,
    InvalidInput,
    Outcome,
)

from .rules import (
    DEFAULT_CODE,
    DEFAULT_RULES,
    RuleDataError,
    RuleRegistry,
    load_rule_file,
    get_registry,
    reset_registry,
    lookup,
)

from .benefits import (
    compute_gratuity,
    compute_overtime,
    compute_leave,
    leave_entitlement,
)

from .calculate import calculate, parse_inputs

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_rules_dir",
    # Schemas
    "BenefitType",
    "SeparationType",
    "OvertimeType",
    "GratuityRules",
    "OvertimeRules",
    "LeaveRules",
    "EmploymentRuleSet",
    "EmploymentInputs",
    "BreakdownItem",
    "CalculationResult",
    "InvalidInput",
    "Outcome",
    # Rules
    "DEFAULT_CODE",
    "DEFAULT_RULES",
    "RuleDataError",
    "RuleRegistry",
    "load_rule_file",
    "get_registry",
    "reset_registry",
    "lookup",
    # Calculators
    "compute_gratuity",
    "compute_overtime",
    "compute_leave",
    "leave_entitlement",
    # Facade
    "calculate",
    "parse_inputs",
]
