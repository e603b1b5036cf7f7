"""
Visualization Helpers for the Health Plan Comparison calculator

Chart builders for the calculated costs section. Each returns a Plotly
figure for st.plotly_chart.
"""

from typing import List, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from constants import CALCULATED_COST_ROWS
from cost_calculator import CostBreakdown, compute_all_plans
from plan_catalog import CoverageTier, HealthPlan
from plan_comparison.utils.formatting import format_currency

# Cost components stacked in the breakdown chart (total is drawn as a marker)
COST_COMPONENTS = [
    ('annual_premium_cost', '#0047AB'),
    ('hsa_benefit', '#16a34a'),
    ('pre_deductible_cost', '#f59e0b'),
    ('post_deductible_cost', '#dc2626'),
]


def generate_cost_breakdown_chart(
    breakdowns: List[CostBreakdown],
    title: str = 'Estimated Annual Cost by Plan',
) -> go.Figure:
    """
    Generate a relative (signed) stacked bar chart of each plan's cost components.

    Outflows stack below zero and the HSA benefit stacks above it. A diamond
    marker shows the net total for each plan.

    Args:
        breakdowns: Results of compute_all_plans, in display order
        title: Chart title

    Returns:
        Plotly Figure object
    """
    plan_names = [breakdown.plan.name for breakdown in breakdowns]

    fig = go.Figure()
    for field, color in COST_COMPONENTS:
        fig.add_trace(go.Bar(
            name=CALCULATED_COST_ROWS[field],
            x=plan_names,
            y=[getattr(breakdown, field) for breakdown in breakdowns],
            marker_color=color,
        ))

    fig.add_trace(go.Scatter(
        name=CALCULATED_COST_ROWS['total_annual_cost'],
        x=plan_names,
        y=[breakdown.total_annual_cost for breakdown in breakdowns],
        mode='markers+text',
        marker=dict(symbol='diamond', size=14, color='#111827'),
        text=[format_currency(breakdown.total_annual_cost) for breakdown in breakdowns],
        textposition='bottom center',
    ))

    fig.update_layout(
        title=title,
        barmode='relative',
        height=450,
        legend=dict(orientation='h', yanchor='bottom', y=-0.3),
    )
    fig.update_yaxes(title='Annual Amount ($)', tickprefix='$', tickformat=',.0f')

    return fig


def build_spend_curve_data(
    tier: CoverageTier,
    employee_hsa_contribution: float,
    spend_points: Sequence[float],
    plans: Optional[Sequence[HealthPlan]] = None,
) -> pd.DataFrame:
    """
    Total annual cost of every plan across a range of expected spend amounts.

    Returns:
        Long-format DataFrame with columns 'Expected Spend', 'Plan', 'Total Cost'
    """
    rows = []
    for spend in spend_points:
        for breakdown in compute_all_plans(tier, spend, employee_hsa_contribution, plans):
            rows.append({
                'Expected Spend': spend,
                'Plan': breakdown.plan.name,
                'Total Cost': breakdown.total_annual_cost,
            })
    return pd.DataFrame(rows, columns=['Expected Spend', 'Plan', 'Total Cost'])


def generate_spend_curve_chart(
    tier: CoverageTier,
    employee_hsa_contribution: float,
    max_spend: float = 30000,
    points: int = 61,
    current_spend: Optional[float] = None,
    title: str = 'Total Annual Cost vs. Expected Medical Expenses',
) -> go.Figure:
    """
    Generate a line chart of total annual cost as expected spend grows.

    Shows where one plan overtakes another. Each line flattens once that
    plan's out-of-pocket maximum is reached.

    Args:
        tier: Coverage tier
        employee_hsa_contribution: Employee HSA contribution (already clamped)
        max_spend: Largest expected spend plotted
        points: Number of evenly spaced spend amounts plotted (including 0)
        current_spend: If given, a vertical line marks the user's expected spend
        title: Chart title

    Returns:
        Plotly Figure object
    """
    points = max(points, 2)
    spend_points = [max_spend * i / (points - 1) for i in range(points)]
    curve_df = build_spend_curve_data(tier, employee_hsa_contribution, spend_points)

    fig = px.line(
        curve_df,
        x='Expected Spend',
        y='Total Cost',
        color='Plan',
        title=title,
        labels={'Total Cost': 'Total Annual Cost ($)', 'Expected Spend': 'Expected Medical Expenses ($/year)'},
    )

    if current_spend is not None:
        fig.add_vline(x=current_spend, line_dash='dash', line_color='#6b7280')

    fig.update_layout(height=450)
    fig.update_xaxes(tickprefix='$', tickformat=',.0f')
    fig.update_yaxes(tickprefix='$', tickformat=',.0f')

    return fig
