"""
Property-based tests using Hypothesis.

Invariants that must hold for every input, not just the worked examples:
idempotence, monotonicity, non-negativity, ownership conservation, the
zero-usage boundary, and the single-crossing assumption behind the
two-segment break-even solver.
"""

import math

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from swap_economics.config import CommuteProfile, OwnershipConfig, PlanConfig
from swap_economics.engine.break_even import find_break_even
from swap_economics.engine.curves import plan_cost_curve, sign_changes
from swap_economics.engine.ownership import amortize_ownership
from swap_economics.engine.plan_cost import evaluate_plan
from swap_economics.engine.usage import estimate_usage
from swap_economics.models.results import UsageEstimate

kwh = st.floats(min_value=0, max_value=1_000, allow_nan=False, allow_infinity=False)
# Whole paise and hundredths of a kWh, as a tariff table would quote them.
money = st.integers(min_value=0, max_value=1_000_000).map(lambda x: x / 100)
hundredths = st.integers(min_value=0, max_value=20_000).map(lambda x: x / 100)

plans = st.builds(
    PlanConfig,
    name=st.just("P"),
    fixed_fee_per_month=money,
    included_energy_cap_kwh=hundredths,
    overage_rate_per_kwh=hundredths,
)

form_values = st.one_of(
    st.floats(min_value=-1e6, max_value=1e6),
    st.sampled_from([float("nan"), float("inf"), None, "", "abc", "42"]),
)

ownerships = st.builds(
    OwnershipConfig,
    pack_price=st.floats(min_value=1, max_value=100_000, allow_nan=False),
    pack_energy_kwh=st.floats(min_value=0.1, max_value=10, allow_nan=False),
    pack_cycle_life=st.integers(min_value=1, max_value=5_000),
)


def _usage(monthly_kwh: float, monthly_km: int = 450) -> UsageEstimate:
    return UsageEstimate(
        monthly_km=monthly_km,
        monthly_kwh=monthly_kwh,
        km_per_swap=78.125,
        swaps_needed_exact=monthly_km / 78.125,
        swaps_needed_ceil=math.ceil(monthly_km / 78.125),
        consumption_wh_per_km=32.0,
        days_per_month=26,
    )


# ============================================================================
# Usage
# ============================================================================

class TestUsageProperties:
    @given(
        form_values,
        form_values,
        st.floats(min_value=-1_000, max_value=1_000),
        st.floats(min_value=-100, max_value=200),
    )
    def test_usage_never_negative(self, daily, days, longest, wh):
        """Property: any form input yields a non-negative, finite estimate."""
        profile = CommuteProfile(daily_km=daily, days_per_month=days,
                                 longest_trip_km=longest, consumption_wh_per_km=wh)
        u = estimate_usage(profile, 2.5)
        assert u.monthly_km >= 0
        assert u.monthly_kwh >= 0
        assert u.km_per_swap >= 0
        assert u.swaps_needed_ceil >= 0
        assert math.isfinite(u.swaps_needed_exact)


# ============================================================================
# Plan costs
# ============================================================================

class TestPlanProperties:
    @given(plans, kwh)
    def test_idempotent(self, plan, monthly_kwh):
        u = _usage(monthly_kwh)
        assert evaluate_plan(u, plan) == evaluate_plan(u, plan)

    @given(plans, kwh, kwh)
    def test_monotonic_in_energy(self, plan, a, b):
        """Property: more energy never costs less on the same plan."""
        lo, hi = sorted((a, b))
        assert evaluate_plan(_usage(lo), plan).monthly_cost <= evaluate_plan(_usage(hi), plan).monthly_cost

    @given(plans, kwh)
    def test_non_negative(self, plan, monthly_kwh):
        r = evaluate_plan(_usage(monthly_kwh), plan)
        assert r.overage_kwh >= 0
        assert r.overage_cost >= 0
        assert r.monthly_cost >= 0
        assert r.within_cap == (r.overage_kwh == 0)

    @given(plans)
    def test_zero_usage_boundary(self, plan):
        r = evaluate_plan(_usage(0.0, monthly_km=0), plan)
        assert r.cost_per_km == 0.0
        assert r.overage_kwh == 0.0


# ============================================================================
# Ownership
# ============================================================================

class TestOwnershipProperties:
    @given(ownerships, kwh, st.integers(min_value=1, max_value=10))
    def test_conservation(self, config, monthly_kwh, years):
        """Property: used + wasted == invested, wasted never negative."""
        r = amortize_ownership(_usage(monthly_kwh), config, years)
        assert r.used_cost + r.wasted_cost == r.invested_cost
        assert r.wasted_cost >= 0
        assert r.invested_cost >= 0
        assert 0.0 <= r.final_pack_fraction <= 1.0

    @given(ownerships, kwh, st.integers(min_value=1, max_value=10))
    def test_whole_packs_cover_demand(self, config, monthly_kwh, years):
        r = amortize_ownership(_usage(monthly_kwh), config, years)
        assert r.packs_purchased * r.lifetime_kwh_per_pack >= r.total_energy_kwh * (1 - 1e-12)


# ============================================================================
# Break-even
# ============================================================================

class TestBreakEvenProperties:
    """Configured tiers have: cheaper fee, smaller cap and steeper overage
    on the low plan.  Under that shape the cost difference is
    non-decreasing in energy, so at most one crossing exists."""

    @given(
        st.integers(min_value=0, max_value=5_000),
        st.integers(min_value=0, max_value=5_000),
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=150),
        st.integers(min_value=0, max_value=150),
    )
    @settings(max_examples=300)
    def test_single_crossing_matches_solver(self, fee_a, fee_b, cap_a, cap_b, rate_a, rate_b):
        low_fee, fixed_fee = sorted((fee_a, fee_b))
        low_cap, fixed_cap = sorted((cap_a, cap_b))
        fixed_rate, low_rate = sorted((rate_a, rate_b))
        low = PlanConfig(name="Low", fixed_fee_per_month=low_fee,
                         included_energy_cap_kwh=low_cap, overage_rate_per_kwh=low_rate)
        fixed = PlanConfig(name="Fixed", fixed_fee_per_month=fixed_fee,
                           included_energy_cap_kwh=fixed_cap, overage_rate_per_kwh=fixed_rate)

        be = find_break_even(low, fixed, _usage(10.0), 2.5)

        grid = np.linspace(0.0, 500.0, 2_001)
        diff = plan_cost_curve(low, grid) - plan_cost_curve(fixed, grid)
        assert sign_changes(diff) <= 1

        if be.threshold_kwh is not None:
            at = np.array([be.threshold_kwh])
            assert plan_cost_curve(low, at)[0] == pytest.approx(plan_cost_curve(fixed, at)[0], rel=1e-9, abs=1e-6)
            assert be.threshold_kwh > low_cap

        if low_fee < fixed_fee and diff[-1] > 1e-6:
            # The low plan ends up dearer inside the grid: a crossing must be reported.
            assert be.threshold_kwh is not None
            assert be.threshold_kwh <= grid[-1]

    @given(plans, plans)
    def test_threshold_is_finite_or_none(self, low, fixed):
        be = find_break_even(low, fixed, _usage(14.4), 2.5)
        if be.threshold_kwh is None:
            assert be.segment is None
            assert be.delta_from_current_kwh == 0.0
        else:
            assert math.isfinite(be.threshold_kwh)
            assert math.isfinite(be.equivalent_km)
