"""
Table builders for the Plan Comparison page.

Each builder returns a DataFrame with one row per table line and one column
per plan (in catalog order), ready to hand to st.dataframe or an HTML
renderer.
"""

from typing import Iterable, List

import pandas as pd

from constants import CALCULATED_COST_ROWS, PLAN_DETAIL_ROWS
from cost_calculator import CostBreakdown
from plan_catalog import (
    CoverageTier,
    DisplayMode,
    HealthPlan,
    employer_match_for,
    premium_for,
)
from plan_comparison.utils.formatting import (
    format_currency,
    format_deductible,
    format_hsa_match,
    format_out_of_pocket_max,
)


def build_plan_details_table(
    plans: Iterable[HealthPlan],
    tier: CoverageTier,
    display_mode: DisplayMode,
) -> pd.DataFrame:
    """
    Build the side-by-side plan details table.

    Rows: premium (in the selected display mode), employer HSA match,
    deductible, out-of-pocket max and pharmacy benefit. All cells are
    display strings.
    """
    premium_label = PLAN_DETAIL_ROWS['premium'].format(display_label=display_mode.label)
    row_labels = [
        premium_label,
        PLAN_DETAIL_ROWS['hsa_match'],
        PLAN_DETAIL_ROWS['deductible'],
        PLAN_DETAIL_ROWS['oop_max'],
        PLAN_DETAIL_ROWS['pharmacy'],
    ]

    columns = {}
    for plan in plans:
        columns[plan.name] = [
            format_currency(premium_for(plan, tier, display_mode)),
            format_hsa_match(employer_match_for(plan, tier)),
            format_deductible(plan),
            format_out_of_pocket_max(plan),
            plan.pharmacy_benefit_text,
        ]

    return pd.DataFrame(columns, index=row_labels)


def build_calculated_costs_table(
    breakdowns: List[CostBreakdown],
    formatted: bool = True,
) -> pd.DataFrame:
    """
    Build the calculated costs table from per-plan cost breakdowns.

    Args:
        breakdowns: Results of compute_all_plans, in display order
        formatted: If True, cells are currency strings. If False, raw floats
            (useful for charts and exports)

    Returns:
        DataFrame indexed by cost line label with one column per plan
    """
    columns = {}
    for breakdown in breakdowns:
        values = [getattr(breakdown, field) for field in CALCULATED_COST_ROWS]
        if formatted:
            values = [format_currency(value) for value in values]
        columns[breakdown.plan.name] = values

    return pd.DataFrame(columns, index=list(CALCULATED_COST_ROWS.values()))


def find_lowest_cost_plan(breakdowns: List[CostBreakdown]) -> CostBreakdown:
    """
    Plan with the lowest estimated total spend.

    Totals are negative outflows, so the lowest cost is the largest total.
    Ties go to the plan listed first.
    """
    if not breakdowns:
        raise ValueError("No cost breakdowns to compare")
    return max(breakdowns, key=lambda breakdown: breakdown.total_annual_cost)
