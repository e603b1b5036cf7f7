"""
Plan Catalog
Static plan definitions for the three plans offered this plan year, plus
per-tier lookups for premiums, deductibles, out-of-pocket maximums and the
employer HSA match.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union

from constants import COVERAGE_TIER_LABELS, DISPLAY_MODE_LABELS


class CoverageTier(Enum):
    """
    Enrollment category. Drives which entry of every per-tier mapping is read.
    """
    EMPLOYEE_ONLY = "EE"
    EMPLOYEE_SPOUSE = "ES"
    EMPLOYEE_CHILDREN = "EC"
    EMPLOYEE_FAMILY = "F"

    @property
    def label(self) -> str:
        return COVERAGE_TIER_LABELS[self.value]

    @classmethod
    def from_value(cls, value: Union[str, "CoverageTier"]) -> "CoverageTier":
        """Parse a tier code ('EE', 'ES', 'EC', 'F') or pass a tier through."""
        if isinstance(value, cls):
            return value
        code = str(value).strip().upper()
        for tier in cls:
            if tier.value == code:
                return tier
        raise ValueError(f"Unknown coverage tier: {value}")


class DisplayMode(Enum):
    """How premiums are shown in the plan details table."""
    MONTHLY = "monthly"
    PER_PAY_PERIOD = "pay"

    @property
    def label(self) -> str:
        return DISPLAY_MODE_LABELS[self.value]


@dataclass(frozen=True)
class PremiumCost:
    """
    Employee premium for one coverage tier.

    Both figures are stored as published. The pay-period amount is not
    derived from the monthly one.
    """
    monthly: float
    per_pay_period: float


@dataclass(frozen=True)
class PersonFamilyDeductible:
    """Deductible quoted per person and per family (traditional plans)."""
    person: float
    family: float


@dataclass(frozen=True)
class EnrolleeCountDeductible:
    """Deductible quoted for employee-only vs two or more enrollees (HDHPs)."""
    employee_only: float
    two_plus_enrollees: float


Deductible = Union[PersonFamilyDeductible, EnrolleeCountDeductible]


@dataclass(frozen=True)
class OutOfPocketMax:
    person: float
    family: float


@dataclass(frozen=True)
class HealthPlan:
    """
    A named insurance plan.

    Plans are defined once in this module and only read afterwards.
    """
    key: str
    name: str
    costs: Dict[CoverageTier, PremiumCost]
    hsa_match_by_tier: Dict[CoverageTier, float]
    deductible: Deductible
    out_of_pocket_max: OutOfPocketMax
    pharmacy_benefit_text: str = ""

    def __post_init__(self):
        if not isinstance(self.deductible, (PersonFamilyDeductible, EnrolleeCountDeductible)):
            raise ValueError(f"Plan {self.key} has an unsupported deductible: {self.deductible!r}")

        missing = [tier.value for tier in CoverageTier if tier not in self.costs]
        if missing:
            raise ValueError(f"Plan {self.key} is missing premiums for tiers: {', '.join(missing)}")

        amounts = [self.out_of_pocket_max.person, self.out_of_pocket_max.family]
        amounts.extend(vars(self.deductible).values())
        for cost in self.costs.values():
            amounts.extend([cost.monthly, cost.per_pay_period])
        amounts.extend(self.hsa_match_by_tier.values())
        if any(amount < 0 for amount in amounts):
            raise ValueError(f"Plan {self.key} has a negative currency value")

    @property
    def hsa_eligible(self) -> bool:
        """True when the employer matches HSA contributions in any tier."""
        return any(match > 0 for match in self.hsa_match_by_tier.values())


def _tiered(employee: float, spouse: float, children: float, family: float) -> Dict[CoverageTier, float]:
    return {
        CoverageTier.EMPLOYEE_ONLY: employee,
        CoverageTier.EMPLOYEE_SPOUSE: spouse,
        CoverageTier.EMPLOYEE_CHILDREN: children,
        CoverageTier.EMPLOYEE_FAMILY: family,
    }


HDHP_PHARMACY_TEXT = """Tier 1: $10 AD
Tier 2: $25 AD
Tier 3: $45 AD
Tier 4: 30% AD
The deductible must be met first!"""

TRADITIONAL_PLAN = HealthPlan(
    key="traditional",
    name="SelectHealth Traditional",
    costs=_tiered(
        PremiumCost(monthly=176, per_pay_period=81.23),
        PremiumCost(monthly=401, per_pay_period=185.08),
        PremiumCost(monthly=330, per_pay_period=152.31),
        PremiumCost(monthly=599, per_pay_period=276.46),
    ),
    hsa_match_by_tier=_tiered(0, 0, 0, 0),
    deductible=PersonFamilyDeductible(person=750, family=2250),
    out_of_pocket_max=OutOfPocketMax(person=3500, family=7000),
    pharmacy_benefit_text="""Tier 1: $15
Tier 2: $30
Tier 3: $60
Tier 4: 30%
No deductible needs to be met for this benefit""",
)

HDHP_PLAN_A = HealthPlan(
    key="hdhp_a",
    name="SelectHealth HDHP Plan A",
    costs=_tiered(
        PremiumCost(monthly=88, per_pay_period=40.62),
        PremiumCost(monthly=198, per_pay_period=91.38),
        PremiumCost(monthly=148, per_pay_period=68.31),
        PremiumCost(monthly=297, per_pay_period=137.08),
    ),
    hsa_match_by_tier=_tiered(600, 1200, 1200, 1200),
    deductible=EnrolleeCountDeductible(employee_only=1700, two_plus_enrollees=3400),
    out_of_pocket_max=OutOfPocketMax(person=3500, family=7000),
    pharmacy_benefit_text=HDHP_PHARMACY_TEXT,
)

HDHP_PLAN_B = HealthPlan(
    key="hdhp_b",
    name="SelectHealth HDHP Plan B",
    costs=_tiered(
        PremiumCost(monthly=25, per_pay_period=11.54),
        PremiumCost(monthly=55, per_pay_period=25.38),
        PremiumCost(monthly=52, per_pay_period=23.85),
        PremiumCost(monthly=82, per_pay_period=37.85),
    ),
    hsa_match_by_tier=_tiered(600, 1200, 1200, 1200),
    deductible=EnrolleeCountDeductible(employee_only=5000, two_plus_enrollees=10000),
    out_of_pocket_max=OutOfPocketMax(person=6000, family=12000),
    pharmacy_benefit_text=HDHP_PHARMACY_TEXT,
)

# Display order: traditional first, then the HDHPs from richest to leanest
PLAN_CATALOG: Tuple[HealthPlan, ...] = (TRADITIONAL_PLAN, HDHP_PLAN_A, HDHP_PLAN_B)


def list_plans() -> Tuple[HealthPlan, ...]:
    """Return the plans in display order."""
    return PLAN_CATALOG


def get_plan(key: str) -> HealthPlan:
    """Look up a plan by its key (e.g. 'hdhp_a')."""
    for plan in PLAN_CATALOG:
        if plan.key == key:
            return plan
    raise ValueError(f"Unknown plan: {key}")


def effective_deductible(plan: HealthPlan, tier: CoverageTier) -> float:
    """
    Deductible that applies to the given coverage tier.

    Employee-only coverage reads the single-person figure; every other tier
    reads the family / two-plus-enrollees figure.
    """
    deductible = plan.deductible
    employee_only = tier == CoverageTier.EMPLOYEE_ONLY

    if isinstance(deductible, EnrolleeCountDeductible):
        return deductible.employee_only if employee_only else deductible.two_plus_enrollees
    return deductible.person if employee_only else deductible.family


def effective_out_of_pocket_max(plan: HealthPlan, tier: CoverageTier) -> float:
    """Out-of-pocket maximum for the tier (same person/family shape for all plans)."""
    oop_max = plan.out_of_pocket_max
    return oop_max.person if tier == CoverageTier.EMPLOYEE_ONLY else oop_max.family


def employer_match_for(plan: HealthPlan, tier: CoverageTier) -> float:
    """Employer HSA match cap for the tier, 0 if the plan has no match."""
    return plan.hsa_match_by_tier.get(tier, 0)


def premium_for(plan: HealthPlan, tier: CoverageTier, display_mode: DisplayMode) -> float:
    cost = plan.costs[tier]
    if display_mode == DisplayMode.MONTHLY:
        return cost.monthly
    return cost.per_pay_period


def max_employer_match(tier: CoverageTier, plans: Optional[Iterable[HealthPlan]] = None) -> float:
    """Highest employer match offered for the tier across the given plans."""
    if plans is None:
        plans = PLAN_CATALOG
    return max((employer_match_for(plan, tier) for plan in plans), default=0)
