"""
Health Plan Comparison - Main Application
Streamlit app for employees to compare the traditional plan against the two
HDHP options for their coverage tier and expected medical spend
"""

import sys
import logging
from pathlib import Path

# Configure logging BEFORE importing streamlit
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%H:%M:%S',
    force=True  # Override any existing config
)

import streamlit as st

# Add current directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from constants import APP_CONFIG, APP_SUBTITLE
from cost_calculator import compute_all_plans
from plan_catalog import list_plans
from plan_comparison.components import (
    render_calculated_costs,
    render_comparison_table,
    render_options_panel,
)
from plan_comparison.utils.formatting import PLAN_COMPARISON_CSS

logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title=APP_CONFIG['title'],
    page_icon=APP_CONFIG['icon'],
    layout=APP_CONFIG['layout'],
    initial_sidebar_state=APP_CONFIG['initial_sidebar_state']
)


def main():
    """Main application entry point"""
    st.markdown(PLAN_COMPARISON_CSS, unsafe_allow_html=True)

    st.title(APP_CONFIG['title'])
    st.markdown(f'<p class="hero-subtitle">{APP_SUBTITLE}</p>', unsafe_allow_html=True)

    with st.container(border=True):
        inputs = render_options_panel()

    plans = list_plans()
    breakdowns = compute_all_plans(
        inputs.coverage_tier,
        inputs.expected_annual_spend,
        inputs.employee_hsa_contribution,
        plans,
    )
    logger.debug(
        f"Rerun: tier={inputs.coverage_tier.value} mode={inputs.display_mode.value} "
        f"spend={inputs.expected_annual_spend} hsa={inputs.employee_hsa_contribution}"
    )

    with st.container(border=True):
        render_comparison_table(plans, inputs)
        st.markdown("---")
        render_calculated_costs(breakdowns, inputs)


if __name__ == "__main__":
    main()
