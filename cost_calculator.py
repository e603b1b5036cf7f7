"""
Cost Calculator

Estimates what each plan costs the employee over a plan year for a given
coverage tier, expected medical spend and HSA contribution.

All figures are signed: premiums, deductible and coinsurance are negative
(money paid out), the HSA benefit is positive (employer money received).
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from constants import COINSURANCE_RATE, HSA_CONTRIBUTION_LIMITS, MONTHS_PER_YEAR
from plan_catalog import (
    CoverageTier,
    HealthPlan,
    effective_deductible,
    effective_out_of_pocket_max,
    employer_match_for,
    list_plans,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostBreakdown:
    """Annual cost estimate for one plan."""
    plan: HealthPlan
    tier: CoverageTier
    annual_premium_cost: float
    hsa_benefit: float
    pre_deductible_cost: float
    post_deductible_cost: float
    total_annual_cost: float

    # Thresholds the estimate was computed against
    deductible: float = 0.0
    out_of_pocket_max: float = 0.0

    @property
    def out_of_pocket_cost(self) -> float:
        """Deductible plus coinsurance paid, as a positive amount."""
        return abs(self.pre_deductible_cost) + abs(self.post_deductible_cost)


def compute_annual_cost(
    plan: HealthPlan,
    tier: CoverageTier,
    expected_annual_spend: float,
    employee_hsa_contribution: float,
) -> CostBreakdown:
    """
    Estimate the annual cost of a plan.

    Inputs are expected to be finite and non-negative, with the contribution
    already clamped to the tier limit (see clamp_hsa_contribution). Nothing
    is clamped here.

    Args:
        plan: Plan from the catalog
        tier: Coverage tier
        expected_annual_spend: Medical expenses before insurance ($/year)
        employee_hsa_contribution: Employee HSA contribution ($/year)

    Returns:
        CostBreakdown with the five signed cost figures
    """
    annual_premium_cost = -(plan.costs[tier].monthly * MONTHS_PER_YEAR)

    deductible = effective_deductible(plan, tier)
    oop_max = effective_out_of_pocket_max(plan, tier)

    # Employer only matches what the employee actually puts in
    match = employer_match_for(plan, tier)
    hsa_benefit = min(employee_hsa_contribution, match)

    pre_deductible_cost = -min(expected_annual_spend, deductible)

    post_deductible_raw = 0
    if expected_annual_spend > deductible:
        coinsurance_portion = (expected_annual_spend - deductible) * COINSURANCE_RATE
        cap_portion = max(oop_max - deductible, 0)
        post_deductible_raw = min(coinsurance_portion, cap_portion)
    post_deductible_cost = -post_deductible_raw

    total_annual_cost = (
        annual_premium_cost
        + hsa_benefit
        + pre_deductible_cost
        + post_deductible_cost
    )

    logger.debug(
        f"{plan.key} [{tier.value}] spend={expected_annual_spend} hsa={employee_hsa_contribution} "
        f"-> total={total_annual_cost}"
    )

    return CostBreakdown(
        plan=plan,
        tier=tier,
        annual_premium_cost=annual_premium_cost,
        hsa_benefit=hsa_benefit,
        pre_deductible_cost=pre_deductible_cost,
        post_deductible_cost=post_deductible_cost,
        total_annual_cost=total_annual_cost,
        deductible=deductible,
        out_of_pocket_max=oop_max,
    )


def compute_all_plans(
    tier: CoverageTier,
    expected_annual_spend: float,
    employee_hsa_contribution: float,
    plans: Optional[Iterable[HealthPlan]] = None,
) -> List[CostBreakdown]:
    """Run compute_annual_cost for every plan, preserving catalog order."""
    if plans is None:
        plans = list_plans()
    return [
        compute_annual_cost(plan, tier, expected_annual_spend, employee_hsa_contribution)
        for plan in plans
    ]


def total_contribution_including_match(match_cap: float, employee_contribution: float) -> float:
    """
    Total dollars going into the HSA once the employer match is added.

    The employer matches dollar for dollar up to match_cap.
    """
    if match_cap <= 0:
        return employee_contribution
    if employee_contribution >= match_cap:
        return employee_contribution + match_cap
    return employee_contribution * 2


# =============================================================================
# INPUT NORMALIZATION (caller side)
# =============================================================================

def max_contribution_for_tier(tier: CoverageTier) -> float:
    """Annual employee HSA contribution limit for the tier."""
    return HSA_CONTRIBUTION_LIMITS[tier.value]


def normalize_amount(value: Any) -> float:
    """
    Coerce a user-entered amount to a finite, non-negative float.

    Missing, non-numeric, NaN and infinite values become 0.
    """
    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.info(f"Discarding non-numeric amount: {value!r}")
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return max(amount, 0.0)


def clamp_hsa_contribution(value: Any, tier: CoverageTier) -> float:
    """Normalize an HSA contribution and clamp it to [0, tier limit]."""
    amount = normalize_amount(value)
    limit = max_contribution_for_tier(tier)
    if amount > limit:
        logger.info(f"HSA contribution {amount:,.2f} above {tier.label} limit, clamped to {limit:,.2f}")
        return float(limit)
    return amount
