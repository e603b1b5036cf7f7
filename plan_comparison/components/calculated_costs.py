"""
Calculated Costs Component

Estimated annual spend per plan for the current inputs, as a table plus
charts. Negative amounts are money paid out, the HSA benefit is positive.
"""

from typing import List

import streamlit as st

from constants import CALCULATED_COST_ROWS, HELP_TEXT
from cost_calculator import CostBreakdown
from plan_comparison import ComparisonInputs
from plan_comparison.utils.formatting import (
    collapse_whitespace,
    escape_markdown_dollars,
    format_currency,
    render_cost_cell,
    render_html_table,
)
from plan_comparison.utils.tables import build_calculated_costs_table, find_lowest_cost_plan
from visualization_helpers import generate_cost_breakdown_chart, generate_spend_curve_chart


def render_calculated_costs(breakdowns: List[CostBreakdown], inputs: ComparisonInputs) -> None:
    """
    Render the calculated costs table, lowest-cost callout and charts.

    Args:
        breakdowns: Results of compute_all_plans, in display order
        inputs: Current calculator inputs
    """
    st.subheader("Calculated Costs")
    st.caption(collapse_whitespace(HELP_TEXT['calculated_costs']))

    table = build_calculated_costs_table(breakdowns, formatted=False)
    row_classes = {CALCULATED_COST_ROWS['total_annual_cost']: 'total-row'}
    st.markdown(
        render_html_table(table, cell_renderer=render_cost_cell, row_classes=row_classes),
        unsafe_allow_html=True,
    )

    if breakdowns:
        lowest = find_lowest_cost_plan(breakdowns)
        st.success(escape_markdown_dollars(
            f"Lowest estimated total spending: **{lowest.plan.name}** "
            f"({format_currency(lowest.total_annual_cost)})"
        ))

    tab_breakdown, tab_curve = st.tabs(["Cost Breakdown", "Cost vs. Expected Expenses"])

    with tab_breakdown:
        fig = generate_cost_breakdown_chart(breakdowns)
        st.plotly_chart(fig, width="stretch", config={'displayModeBar': False})

    with tab_curve:
        fig = generate_spend_curve_chart(
            inputs.coverage_tier,
            inputs.employee_hsa_contribution,
            max_spend=max(30000, inputs.expected_annual_spend),
            current_spend=inputs.expected_annual_spend,
        )
        st.plotly_chart(fig, width="stretch", config={'displayModeBar': False})
