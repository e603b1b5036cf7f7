"""
Test Suite for the Cost Calculator - Health Plan Comparison

Run with: python tests/test_cost_calculator.py
"""

import math
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cost_calculator import (
    CostBreakdown,
    clamp_hsa_contribution,
    compute_all_plans,
    compute_annual_cost,
    max_contribution_for_tier,
    normalize_amount,
    total_contribution_including_match,
)
from plan_catalog import (
    CoverageTier,
    HDHP_PLAN_A,
    HDHP_PLAN_B,
    TRADITIONAL_PLAN,
    effective_deductible,
    effective_out_of_pocket_max,
    employer_match_for,
    list_plans,
)

SPEND_AMOUNTS = [0, 100, 750, 1699, 1700, 1701, 2250, 5000, 9999, 10000, 12500, 20000, 50000, 250000]


# =============================================================================
# Worked scenarios
# =============================================================================

class TestComputeAnnualCostScenarios(unittest.TestCase):

    def test_traditional_family_no_spend(self):
        result = compute_annual_cost(TRADITIONAL_PLAN, CoverageTier.EMPLOYEE_FAMILY, 0, 0)
        self.assertAlmostEqual(result.annual_premium_cost, -7188)
        self.assertAlmostEqual(result.hsa_benefit, 0)
        self.assertAlmostEqual(result.pre_deductible_cost, 0)
        self.assertAlmostEqual(result.post_deductible_cost, 0)
        self.assertAlmostEqual(result.total_annual_cost, -7188)

    def test_hdhp_a_employee_only_moderate_spend(self):
        result = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_ONLY, 5000, 600)
        self.assertEqual(result.deductible, 1700)
        self.assertEqual(result.out_of_pocket_max, 3500)
        self.assertAlmostEqual(result.pre_deductible_cost, -1700)
        self.assertAlmostEqual(result.post_deductible_cost, -660)
        self.assertAlmostEqual(result.hsa_benefit, 600)
        self.assertAlmostEqual(result.annual_premium_cost, -1056)
        self.assertAlmostEqual(result.total_annual_cost, -2816)

    def test_hdhp_b_family_hits_out_of_pocket_max(self):
        result = compute_annual_cost(HDHP_PLAN_B, CoverageTier.EMPLOYEE_FAMILY, 20000, 1200)
        self.assertEqual(result.deductible, 10000)
        self.assertEqual(result.out_of_pocket_max, 12000)
        self.assertAlmostEqual(result.pre_deductible_cost, -10000)
        self.assertAlmostEqual(result.post_deductible_cost, -2000)
        self.assertAlmostEqual(result.hsa_benefit, 1200)
        self.assertAlmostEqual(result.annual_premium_cost, -984)
        self.assertAlmostEqual(result.total_annual_cost, -984 + 1200 - 10000 - 2000)
        self.assertAlmostEqual(result.out_of_pocket_cost, 12000)

    def test_coinsurance_capped_above_out_of_pocket_max(self):
        result = compute_annual_cost(HDHP_PLAN_B, CoverageTier.EMPLOYEE_FAMILY, 100000, 0)
        self.assertAlmostEqual(result.post_deductible_cost, -2000)

    def test_spend_below_deductible(self):
        result = compute_annual_cost(TRADITIONAL_PLAN, CoverageTier.EMPLOYEE_ONLY, 500, 0)
        self.assertAlmostEqual(result.pre_deductible_cost, -500)
        self.assertAlmostEqual(result.post_deductible_cost, 0)

    def test_spend_exactly_at_deductible(self):
        result = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_SPOUSE, 3400, 0)
        self.assertAlmostEqual(result.pre_deductible_cost, -3400)
        self.assertAlmostEqual(result.post_deductible_cost, 0)

    def test_hsa_benefit_limited_by_contribution(self):
        result = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_FAMILY, 0, 300)
        self.assertAlmostEqual(result.hsa_benefit, 300)

    def test_hsa_benefit_limited_by_match(self):
        result = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_FAMILY, 0, 8750)
        self.assertAlmostEqual(result.hsa_benefit, 1200)

    def test_traditional_plan_never_gets_hsa_benefit(self):
        result = compute_annual_cost(TRADITIONAL_PLAN, CoverageTier.EMPLOYEE_SPOUSE, 0, 4000)
        self.assertAlmostEqual(result.hsa_benefit, 0)

    def test_result_records_plan_and_tier(self):
        result = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_CHILDREN, 0, 0)
        self.assertIsInstance(result, CostBreakdown)
        self.assertIs(result.plan, HDHP_PLAN_A)
        self.assertEqual(result.tier, CoverageTier.EMPLOYEE_CHILDREN)


# =============================================================================
# Invariants across every plan, tier and a range of inputs
# =============================================================================

class TestCostInvariants(unittest.TestCase):

    def test_signs_and_caps(self):
        for plan in list_plans():
            for tier in CoverageTier:
                deductible = effective_deductible(plan, tier)
                oop_max = effective_out_of_pocket_max(plan, tier)
                for spend in SPEND_AMOUNTS:
                    with self.subTest(plan=plan.key, tier=tier.value, spend=spend):
                        result = compute_annual_cost(plan, tier, spend, 0)
                        self.assertLessEqual(result.annual_premium_cost, 0)
                        self.assertLessEqual(result.pre_deductible_cost, 0)
                        self.assertLessEqual(result.post_deductible_cost, 0)
                        self.assertLessEqual(abs(result.pre_deductible_cost), deductible)
                        self.assertLessEqual(result.out_of_pocket_cost, oop_max + 1e-9)

    def test_total_is_sum_of_components(self):
        for plan in list_plans():
            for tier in CoverageTier:
                with self.subTest(plan=plan.key, tier=tier.value):
                    result = compute_annual_cost(plan, tier, 7300, 450)
                    expected = (
                        result.annual_premium_cost
                        + result.hsa_benefit
                        + result.pre_deductible_cost
                        + result.post_deductible_cost
                    )
                    self.assertAlmostEqual(result.total_annual_cost, expected)

    def test_hsa_benefit_bounded_by_contribution_and_match(self):
        for plan in list_plans():
            for tier in CoverageTier:
                match = employer_match_for(plan, tier)
                limit = max_contribution_for_tier(tier)
                for contribution in range(0, int(limit) + 1, 250):
                    with self.subTest(plan=plan.key, tier=tier.value, contribution=contribution):
                        result = compute_annual_cost(plan, tier, 0, contribution)
                        self.assertAlmostEqual(result.hsa_benefit, min(contribution, match))
                        self.assertLessEqual(result.hsa_benefit, match)
                        self.assertLessEqual(result.hsa_benefit, contribution)

    def test_out_of_pocket_monotonic_in_spend(self):
        for plan in list_plans():
            for tier in CoverageTier:
                previous = 0.0
                for spend in range(0, 40001, 250):
                    result = compute_annual_cost(plan, tier, spend, 0)
                    with self.subTest(plan=plan.key, tier=tier.value, spend=spend):
                        self.assertGreaterEqual(result.out_of_pocket_cost, previous)
                    previous = result.out_of_pocket_cost

    def test_premium_does_not_depend_on_spend_or_contribution(self):
        low = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_SPOUSE, 0, 0)
        high = compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_SPOUSE, 90000, 8750)
        self.assertEqual(low.annual_premium_cost, high.annual_premium_cost)
        self.assertAlmostEqual(low.annual_premium_cost, -198 * 12)


class TestComputeAllPlans(unittest.TestCase):

    def test_one_result_per_plan_in_order(self):
        results = compute_all_plans(CoverageTier.EMPLOYEE_ONLY, 5000, 600)
        self.assertEqual([r.plan.key for r in results], ['traditional', 'hdhp_a', 'hdhp_b'])

    def test_matches_single_plan_computation(self):
        results = compute_all_plans(CoverageTier.EMPLOYEE_ONLY, 5000, 600)
        self.assertEqual(results[1], compute_annual_cost(HDHP_PLAN_A, CoverageTier.EMPLOYEE_ONLY, 5000, 600))

    def test_custom_plan_subset(self):
        results = compute_all_plans(CoverageTier.EMPLOYEE_FAMILY, 0, 0, plans=[HDHP_PLAN_B])
        self.assertEqual(len(results), 1)
        self.assertIs(results[0].plan, HDHP_PLAN_B)

    def test_repeated_calls_are_identical(self):
        first = compute_all_plans(CoverageTier.EMPLOYEE_CHILDREN, 12345, 700)
        second = compute_all_plans(CoverageTier.EMPLOYEE_CHILDREN, 12345, 700)
        self.assertEqual(first, second)


# =============================================================================
# HSA contribution summary
# =============================================================================

class TestTotalContributionIncludingMatch(unittest.TestCase):

    def test_no_match(self):
        self.assertEqual(total_contribution_including_match(0, 500), 500)

    def test_contribution_reaches_match(self):
        self.assertEqual(total_contribution_including_match(600, 600), 1200)

    def test_contribution_above_match(self):
        self.assertEqual(total_contribution_including_match(1200, 5000), 6200)

    def test_contribution_below_match(self):
        self.assertEqual(total_contribution_including_match(600, 300), 600)

    def test_zero_contribution(self):
        self.assertEqual(total_contribution_including_match(1200, 0), 0)


# =============================================================================
# Caller-side input normalization
# =============================================================================

class TestInputNormalization(unittest.TestCase):

    def test_max_contribution_for_tier(self):
        self.assertEqual(max_contribution_for_tier(CoverageTier.EMPLOYEE_ONLY), 4400)
        self.assertEqual(max_contribution_for_tier(CoverageTier.EMPLOYEE_SPOUSE), 8750)
        self.assertEqual(max_contribution_for_tier(CoverageTier.EMPLOYEE_CHILDREN), 8750)
        self.assertEqual(max_contribution_for_tier(CoverageTier.EMPLOYEE_FAMILY), 8750)

    def test_normalize_amount(self):
        self.assertEqual(normalize_amount(1500), 1500.0)
        self.assertEqual(normalize_amount("250.5"), 250.5)
        self.assertEqual(normalize_amount(None), 0.0)
        self.assertEqual(normalize_amount("abc"), 0.0)
        self.assertEqual(normalize_amount(math.nan), 0.0)
        self.assertEqual(normalize_amount(math.inf), 0.0)
        self.assertEqual(normalize_amount(-math.inf), 0.0)
        self.assertEqual(normalize_amount(-20), 0.0)

    def test_clamp_hsa_contribution(self):
        self.assertEqual(clamp_hsa_contribution(5000, CoverageTier.EMPLOYEE_ONLY), 4400)
        self.assertEqual(clamp_hsa_contribution(5000, CoverageTier.EMPLOYEE_FAMILY), 5000)
        self.assertEqual(clamp_hsa_contribution(10000, CoverageTier.EMPLOYEE_SPOUSE), 8750)
        self.assertEqual(clamp_hsa_contribution(-10, CoverageTier.EMPLOYEE_ONLY), 0)
        self.assertEqual(clamp_hsa_contribution(math.nan, CoverageTier.EMPLOYEE_ONLY), 0)
        self.assertEqual(clamp_hsa_contribution(None, CoverageTier.EMPLOYEE_CHILDREN), 0)

    def test_clamp_logs_when_limited(self):
        with self.assertLogs('cost_calculator', level='INFO') as logs:
            clamp_hsa_contribution(9000, CoverageTier.EMPLOYEE_ONLY)
        self.assertTrue(any('clamped' in line for line in logs.output))


if __name__ == "__main__":
    unittest.main(verbosity=2)
