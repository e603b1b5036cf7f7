"""
Constants and reference data for the Health Plan Comparison calculator
Includes coverage tiers, HSA limits and display configuration
"""

# Coverage tier codes (same codes used for family status on benefit census files)
COVERAGE_TIER_LABELS = {
    'EE': 'Employee Only',
    'ES': 'Employee + Spouse',
    'EC': 'Employee + Child(ren)',
    'F': 'Employee + Family',
}

DEFAULT_COVERAGE_TIER = 'F'

# Premium display modes
DISPLAY_MODE_LABELS = {
    'monthly': 'Monthly',
    'pay': 'Per Pay Period',
}

DEFAULT_DISPLAY_MODE = 'pay'

# ==============================================================================
# COST ASSUMPTIONS
# ==============================================================================

# Employee share of costs after the deductible is met (all three plans)
COINSURANCE_RATE = 0.20

MONTHS_PER_YEAR = 12

# Annual HSA contribution limits by coverage tier (employee dollars)
# Employee Only is the self-only limit, every other tier uses the family limit
HSA_CONTRIBUTION_LIMITS = {
    'EE': 4400,
    'ES': 8750,
    'EC': 8750,
    'F': 8750,
}

# Input widget steps
EXPECTED_SPEND_STEP = 100
HSA_CONTRIBUTION_STEP = 50

# Employer that funds the HSA match
EMPLOYER_NAME = "Nu Skin"

# ==============================================================================
# DISPLAY TEXT
# ==============================================================================

# Application configuration
APP_CONFIG = {
    'title': 'Health Plan Comparison',
    'icon': '🩺',
    'layout': 'wide',
    'initial_sidebar_state': 'collapsed'
}

APP_SUBTITLE = "Compare your estimated payroll costs and key plan details."

# Row labels for the side-by-side plan details table
PLAN_DETAIL_ROWS = {
    'premium': 'Premium / {display_label}',
    'hsa_match': 'Annual Employer HSA Match',
    'deductible': 'Deductible',
    'oop_max': 'Out of Pocket Max',
    'pharmacy': 'Pharmacy Benefit',
}

# Row labels for the calculated costs table
CALCULATED_COST_ROWS = {
    'annual_premium_cost': 'Annual Employee Premium Cost',
    'hsa_benefit': 'HSA Benefit',
    'pre_deductible_cost': 'Pre-Deductible Cost',
    'post_deductible_cost': 'Post-Deductible Cost',
    'total_annual_cost': 'Total Spending',
}

AFTER_DEDUCTIBLE_LEGEND = "AD = After Deductible (costs that apply once the deductible is met)"

NO_HSA_MATCH_TEXT = "None"

# Help text
HELP_TEXT = {
    'expected_spend': """
        Note that this is expenses before insurance coverage, not what you
        expect to pay after insurance coverage. The calculator will help to
        calculate what your expenses will be based on deductible amounts,
        coverage type, and out of pocket maximums.
    """,
    'hsa_contribution': """
        You can enter $0. Maximums by coverage - Employee Only: $4,400;
        Employee + Spouse/Child(ren)/Family: $8,750
    """,
    'hsa_match': "{employer} will match contributions up to this amount.",
    'calculated_costs': """
        Negative amounts are money you pay (premiums, deductible and
        coinsurance). The HSA benefit is the employer match you receive.
    """,
}
