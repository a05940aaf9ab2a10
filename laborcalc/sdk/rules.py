"""Jurisdiction rule registry.

Maps a jurisdiction code to its EmploymentRuleSet. Rule data is read from
one YAML file per jurisdiction (labor_rules/*.yaml by default, see
config.get_rules_dir). Lookup is total: an unknown or empty code resolves to
DEFAULT_RULES, which lives in code so the engine still answers when no rule
files are available.

Usage:
    from laborcalc.sdk.rules import get_registry

    rules = get_registry().lookup("UAE")
    rules.gratuity.first_years_rate  # Decimal('21')
"""

import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import yaml
from pydantic import ValidationError

from .config import get_rules_dir
from .schemas import EmploymentRuleSet, GratuityRules, LeaveRules, OvertimeRules

logger = logging.getLogger(__name__)


DEFAULT_CODE = "default"

# Fallback for jurisdictions without rule data. Mirrors the common GCC shape
# (21 days for the first five years, 30 after) without a resignation penalty.
DEFAULT_RULES = EmploymentRuleSet(
    code=DEFAULT_CODE,
    name="Default",
    version="1",
    gratuity=GratuityRules(
        first_years_rate=Decimal("21"),
        first_years_period=Decimal("5"),
        later_years_rate=Decimal("30"),
        min_years_for_gratuity=Decimal("1"),
        resignation_penalty=False,
        max_gratuity_years=Decimal("24"),
    ),
    overtime=OvertimeRules(
        normal_rate=Decimal("1.25"),
        weekend_rate=Decimal("1.5"),
        holiday_rate=Decimal("2.0"),
        work_hours_per_month=Decimal("240"),
    ),
    leave=LeaveRules(
        annual_days=21,
        min_years_for_full_leave=Decimal("1"),
        days_per_month_first_year=Decimal("2"),
    ),
    currency_code="USD",
    currency_symbol="$",
)


class RuleDataError(ValueError):
    """Raised when a rule file is unreadable, invalid, or conflicts with another."""
    pass


def load_rule_file(path: Path) -> EmploymentRuleSet:
    """Load and validate a single jurisdiction rule file.

    Raises:
        RuleDataError: If the file is not valid YAML or fails schema validation
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RuleDataError(f"{path.name}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise RuleDataError(f"{path.name}: expected a mapping at top level")

    try:
        return EmploymentRuleSet.model_validate(data)
    except ValidationError as e:
        raise RuleDataError(f"{path.name}: {e}") from e


class RuleRegistry:
    """Read-only table of jurisdiction rule sets."""

    def __init__(
        self,
        rule_sets: Iterable[EmploymentRuleSet] = (),
        default: EmploymentRuleSet = DEFAULT_RULES,
    ):
        self._default = default
        self._by_code: Dict[str, EmploymentRuleSet] = {}
        self._index: Dict[str, EmploymentRuleSet] = {}

        for rule_set in rule_sets:
            for key in (rule_set.code, *rule_set.aliases):
                if key in self._index:
                    raise RuleDataError(
                        f"Jurisdiction code '{key}' defined by both "
                        f"'{self._index[key].code}' and '{rule_set.code}'"
                    )
                self._index[key] = rule_set
            self._by_code[rule_set.code] = rule_set

    @classmethod
    def from_directory(cls, rules_dir: Union[str, Path]) -> "RuleRegistry":
        """Build a registry from every *.yaml file in a directory.

        A missing directory yields an empty registry (every lookup falls back
        to the default rule set).
        """
        rules_dir = Path(rules_dir)
        if not rules_dir.is_dir():
            logger.warning(f"Rules directory not found: {rules_dir}; using default rules only")
            return cls()

        rule_sets = [load_rule_file(p) for p in sorted(rules_dir.glob("*.yaml"))]
        logger.debug(f"Loaded {len(rule_sets)} rule set(s) from {rules_dir}")
        return cls(rule_sets)

    @property
    def default(self) -> EmploymentRuleSet:
        return self._default

    def lookup(self, code: Optional[str]) -> EmploymentRuleSet:
        """Resolve a jurisdiction code to its rule set.

        Matching is case-insensitive and also accepts aliases. Unknown, empty
        or None codes return the default rule set; this never raises.
        """
        key = (code or "").strip().lower()
        rule_set = self._index.get(key)
        if rule_set is None:
            logger.debug(f"No rules for jurisdiction '{code}', using {self._default.code}")
            return self._default
        return rule_set

    def __contains__(self, code: str) -> bool:
        return (code or "").strip().lower() in self._index

    def codes(self) -> List[str]:
        """Primary codes of all loaded rule sets, sorted."""
        return sorted(self._by_code)

    def list_rule_sets(self, region: Optional[str] = None) -> List[EmploymentRuleSet]:
        """Loaded rule sets sorted by code, optionally filtered by region."""
        rule_sets = [self._by_code[c] for c in self.codes()]
        if region:
            region = region.strip().lower()
            rule_sets = [r for r in rule_sets if (r.region or "").lower() == region]
        return rule_sets


_registry: Optional[RuleRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> RuleRegistry:
    """Process-wide registry, loaded on first use from config.get_rules_dir()."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = RuleRegistry.from_directory(get_rules_dir())
    return _registry


def reset_registry() -> None:
    """Drop the cached registry so the next get_registry() reloads rule data."""
    global _registry
    with _registry_lock:
        _registry = None


def lookup(code: Optional[str]) -> EmploymentRuleSet:
    """Shortcut for get_registry().lookup(code)."""
    return get_registry().lookup(code)
