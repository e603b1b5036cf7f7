"""
Options Panel Component

Collects the four calculator inputs:
- Coverage type (tier)
- Premium display mode (monthly / per pay period)
- Expected annual medical expenses
- Annual HSA contribution (clamped to the tier limit)
"""

import streamlit as st

from constants import (
    DEFAULT_COVERAGE_TIER,
    DEFAULT_DISPLAY_MODE,
    EMPLOYER_NAME,
    EXPECTED_SPEND_STEP,
    HELP_TEXT,
    HSA_CONTRIBUTION_STEP,
)
from cost_calculator import (
    clamp_hsa_contribution,
    max_contribution_for_tier,
    normalize_amount,
    total_contribution_including_match,
)
from plan_catalog import CoverageTier, DisplayMode, max_employer_match
from plan_comparison import ComparisonInputs
from plan_comparison.utils.formatting import (
    collapse_whitespace,
    escape_markdown_dollars,
    format_currency,
)


def render_options_panel() -> ComparisonInputs:
    """
    Render the "Select Options" section and return the normalized inputs.

    Streamlit keeps widget values between reruns, so no extra session state
    is needed.
    """
    st.subheader("Select Options")

    tiers = list(CoverageTier)
    modes = list(DisplayMode)

    col1, col2 = st.columns(2)
    with col1:
        coverage_tier = st.selectbox(
            "Coverage Type",
            options=tiers,
            format_func=lambda tier: tier.label,
            index=tiers.index(CoverageTier.from_value(DEFAULT_COVERAGE_TIER)),
            key="coverage_tier",
        )
    with col2:
        display_mode = st.selectbox(
            "Display Costs As",
            options=modes,
            format_func=lambda mode: mode.label,
            index=modes.index(DisplayMode(DEFAULT_DISPLAY_MODE)),
            key="display_mode",
        )

    hsa_limit = max_contribution_for_tier(coverage_tier)

    col1, col2 = st.columns(2)
    with col1:
        raw_spend = st.number_input(
            "Expected Medical Expenses ($/year)",
            min_value=0.0,
            value=0.0,
            step=float(EXPECTED_SPEND_STEP),
            key="expected_spend",
        )
        st.caption(f"_{collapse_whitespace(HELP_TEXT['expected_spend'])}_")

    with col2:
        # Tier limit is applied by clamp_hsa_contribution below
        raw_contribution = st.number_input(
            "Annual HSA Contribution ($)",
            min_value=0.0,
            value=0.0,
            step=float(HSA_CONTRIBUTION_STEP),
            placeholder=f"Enter 0 – {format_currency(hsa_limit)}",
            key="hsa_contribution",
        )
        contribution = clamp_hsa_contribution(raw_contribution, coverage_tier)
        if contribution < normalize_amount(raw_contribution):
            st.warning(escape_markdown_dollars(
                f"{coverage_tier.label} contributions are limited to "
                f"{format_currency(hsa_limit)}. Using {format_currency(contribution)}."
            ))

        total_with_match = total_contribution_including_match(
            max_employer_match(coverage_tier), contribution
        )
        st.caption(escape_markdown_dollars(
            f"Total Contribution Including {EMPLOYER_NAME} Match: "
            f"**{format_currency(total_with_match)}**"
        ))
        st.caption(escape_markdown_dollars(f"({collapse_whitespace(HELP_TEXT['hsa_contribution'])})"))

    return ComparisonInputs(
        coverage_tier=coverage_tier,
        display_mode=display_mode,
        expected_annual_spend=normalize_amount(raw_spend),
        employee_hsa_contribution=contribution,
    )
