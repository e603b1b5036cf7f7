"""
Utility functions for the Plan Comparison module.
"""

from .formatting import (
    PLAN_COMPARISON_CSS,
    format_currency,
    format_deductible,
    format_out_of_pocket_max,
    format_hsa_match,
    render_cost_cell,
    render_html_table,
    escape_markdown_dollars,
    collapse_whitespace,
)

from .tables import (
    build_plan_details_table,
    build_calculated_costs_table,
    find_lowest_cost_plan,
)

__all__ = [
    'PLAN_COMPARISON_CSS',
    'format_currency',
    'format_deductible',
    'format_out_of_pocket_max',
    'format_hsa_match',
    'render_cost_cell',
    'render_html_table',
    'escape_markdown_dollars',
    'collapse_whitespace',
    'build_plan_details_table',
    'build_calculated_costs_table',
    'find_lowest_cost_plan',
]
