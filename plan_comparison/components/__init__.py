"""
UI Components for the Plan Comparison page.

Each component is a Streamlit-based function that renders a portion
of the page. Components are composed together in app.py.
"""

from .options_panel import render_options_panel
from .comparison_table import render_comparison_table
from .calculated_costs import render_calculated_costs

__all__ = [
    'render_options_panel',
    'render_comparison_table',
    'render_calculated_costs',
]
