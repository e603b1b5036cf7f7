"""
Comparison Table Component

Side-by-side plan details for the selected coverage tier:

| Row | Source |
|-----|--------|
| Premium / {mode} | stored monthly or per-pay-period premium |
| Annual Employer HSA Match | match cap for the tier, or "None" |
| Deductible | both deductible figures in the plan's own terms |
| Out of Pocket Max | person / family |
| Pharmacy Benefit | plan text, followed by the AD legend |
"""

from typing import Sequence

import streamlit as st

from constants import AFTER_DEDUCTIBLE_LEGEND, EMPLOYER_NAME, HELP_TEXT, PLAN_DETAIL_ROWS
from plan_catalog import HealthPlan
from plan_comparison import ComparisonInputs
from plan_comparison.utils.formatting import render_html_table
from plan_comparison.utils.tables import build_plan_details_table


def render_comparison_table(plans: Sequence[HealthPlan], inputs: ComparisonInputs) -> None:
    """
    Render the plan details table and the after-deductible legend.

    Args:
        plans: Plans in display order
        inputs: Current calculator inputs (tier and display mode are used)
    """
    st.subheader("Side-by-Side Comparison")

    table = build_plan_details_table(plans, inputs.coverage_tier, inputs.display_mode)

    premium_label = PLAN_DETAIL_ROWS['premium'].format(display_label=inputs.display_mode.label)
    row_classes = {
        premium_label: 'premium-row',
        PLAN_DETAIL_ROWS['hsa_match']: 'hsa-row',
    }
    st.markdown(render_html_table(table, row_classes=row_classes), unsafe_allow_html=True)

    st.markdown(
        f'<p class="legend-text">{AFTER_DEDUCTIBLE_LEGEND}</p>',
        unsafe_allow_html=True,
    )
    if any(plan.hsa_eligible for plan in plans):
        st.caption(HELP_TEXT['hsa_match'].format(employer=EMPLOYER_NAME))
