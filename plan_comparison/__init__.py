"""
Plan Comparison Module

Components and helpers for the single-page plan comparison calculator.

The page has two parts:
- Plan details: premiums, HSA match, deductible, out-of-pocket max, pharmacy
- Calculated costs: estimated annual spend per plan for the user's inputs
"""

from dataclasses import dataclass

from plan_catalog import CoverageTier, DisplayMode


@dataclass
class ComparisonInputs:
    """
    User inputs collected by the options panel.

    Amounts are already normalized (finite, non-negative) and the HSA
    contribution is clamped to the tier limit.
    """
    coverage_tier: CoverageTier
    display_mode: DisplayMode
    expected_annual_spend: float = 0.0
    employee_hsa_contribution: float = 0.0
