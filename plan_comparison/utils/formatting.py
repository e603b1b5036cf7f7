"""
Formatting utilities and CSS for Plan Comparison components.
"""

import html
from typing import Any, Callable, Dict, Optional

import pandas as pd

from constants import NO_HSA_MATCH_TEXT
from plan_catalog import EnrolleeCountDeductible, HealthPlan


def format_currency(value: Optional[float], include_sign: bool = False) -> str:
    """
    Format a number as USD currency with cents.

    Args:
        value: The numeric value to format
        include_sign: If True, prefix positive values with +

    Returns:
        Formatted string like "$1,234.56", "-$1,234.56" or "+$1,234.56"
    """
    if value is None:
        return "—"

    # Avoid rendering "-$0.00" for negated zero amounts
    if value == 0:
        value = 0.0

    if value < 0:
        return f"-${abs(value):,.2f}"
    if include_sign:
        return f"+${value:,.2f}"
    return f"${value:,.2f}"


def format_deductible(plan: HealthPlan) -> str:
    """Two-line deductible summary in the plan's own terms."""
    deductible = plan.deductible
    if isinstance(deductible, EnrolleeCountDeductible):
        return (
            f"Employee Only {format_currency(deductible.employee_only)}\n"
            f"2+ Enrollees {format_currency(deductible.two_plus_enrollees)}"
        )
    return (
        f"Person {format_currency(deductible.person)}\n"
        f"Family {format_currency(deductible.family)}"
    )


def format_out_of_pocket_max(plan: HealthPlan) -> str:
    oop_max = plan.out_of_pocket_max
    return (
        f"Person {format_currency(oop_max.person)}\n"
        f"Family {format_currency(oop_max.family)}"
    )


def format_hsa_match(amount: float) -> str:
    """'+ $1,200.00' for a match, 'None' when the plan has no HSA match."""
    if amount > 0:
        return f"+ {format_currency(amount)}"
    return NO_HSA_MATCH_TEXT


def escape_markdown_dollars(text: str) -> str:
    """Escape $ so Streamlit markdown doesn't read "$x ... $y" as LaTeX."""
    return text.replace("$", "\\$")


def collapse_whitespace(text: str) -> str:
    """Join a triple-quoted help text block into a single line."""
    return " ".join(text.split())


def render_cost_cell(value: float) -> str:
    """Render a signed cost as colored HTML (green inflow, red outflow)."""
    if value > 0:
        css_class = "cost-inflow"
    elif value < 0:
        css_class = "cost-outflow"
    else:
        css_class = "cost-zero"
    return f'<span class="{css_class}">{format_currency(value)}</span>'


def render_html_table(
    table: pd.DataFrame,
    cell_renderer: Optional[Callable[[Any], str]] = None,
    row_classes: Optional[Dict[str, str]] = None,
) -> str:
    """
    Render a comparison DataFrame (rows = labels, columns = plans) as HTML.

    Args:
        table: DataFrame from one of the table builders
        cell_renderer: Converts a cell to HTML. Defaults to escaped text
        row_classes: Optional {row label: css class} for individual rows

    Returns:
        HTML string using the compare-table styles
    """
    if cell_renderer is None:
        cell_renderer = lambda value: html.escape(str(value)).replace("\n", "<br>")
    row_classes = row_classes or {}

    header = ''.join(f'<th>{html.escape(str(column))}</th>' for column in table.columns)
    rows = []
    for label, row in table.iterrows():
        css_class = row_classes.get(label, '')
        class_attr = f' class="{css_class}"' if css_class else ''
        cells = ''.join(f'<td>{cell_renderer(value)}</td>' for value in row)
        rows.append(
            f'<tr{class_attr}><td class="row-label">{html.escape(str(label))}</td>{cells}</tr>'
        )

    # No indentation, Streamlit markdown treats indented HTML as code.
    # $ is written as an entity so currency pairs are not parsed as LaTeX.
    table_html = (
        f'<table class="compare-table">'
        f'<thead><tr><th></th>{header}</tr></thead>'
        f'<tbody>{"".join(rows)}</tbody>'
        f'</table>'
    )
    return table_html.replace("$", "&#36;")


# =============================================================================
# CSS STYLES
# =============================================================================

PLAN_COMPARISON_CSS = """
<style>
:root {
    --gray-50: #f9fafb;
    --gray-200: #e5e7eb;
    --gray-500: #6b7280;
    --gray-600: #4b5563;
    --gray-700: #374151;
    --gray-900: #111827;

    --green-700: #15803d;
    --red-600: #dc2626;

    /* Brand colors */
    --brand-primary: #0047AB;
    --brand-light: #E8F1FD;
}

.hero-subtitle {
    font-size: 1rem;
    color: var(--gray-600);
    margin-top: -0.5rem;
    margin-bottom: 1.5rem;
}

.compare-table {
    width: 100%;
    border-collapse: collapse;
    font-size: 0.9375rem;
}

.compare-table th {
    text-align: left;
    padding: 0.75rem 1rem;
    border-bottom: 2px solid var(--gray-200);
    font-weight: 700;
    color: var(--gray-900);
}

.compare-table td {
    padding: 0.75rem 1rem;
    border-bottom: 1px solid var(--gray-200);
    color: var(--gray-700);
    vertical-align: top;
}

.compare-table td.row-label {
    font-weight: 500;
    width: 14rem;
}

.compare-table tr.total-row td {
    font-weight: 600;
    border-top: 2px solid var(--gray-200);
    border-bottom: none;
}

.compare-table tr.premium-row td {
    font-size: 1.5rem;
    font-weight: 600;
    color: var(--gray-900);
}

.compare-table tr.premium-row td.row-label {
    font-size: 0.9375rem;
    font-weight: 500;
    color: var(--gray-700);
}

.compare-table tr.hsa-row td {
    color: var(--green-700);
    font-weight: 600;
}

.compare-table tr.hsa-row td.row-label {
    color: var(--gray-700);
    font-weight: 500;
}

.legend-text {
    font-size: 0.75rem;
    color: var(--gray-600);
    font-style: italic;
}

.cost-inflow { color: var(--green-700); }
.cost-outflow { color: var(--red-600); }
.cost-zero { color: var(--gray-500); }
</style>
"""
