"""Break-even solver — where a capped-fee tier overtakes the lowest-cap tier.

Both cost curves are piecewise affine in monthly energy U:

  low(U)   = fee_L + max(0, U − cap_L) · rate_L
  fixed(U) = fee_F + max(0, U − cap_F) · rate_F

The solver tries two segments in order and solves each linear equation
directly:

  1. cap_L < U ≤ cap_F   fee_L + (U − cap_L)·rate_L = fee_F
  2. U > cap_F           fee_L + (U − cap_L)·rate_L = fee_F + (U − cap_F)·rate_F

Equal slopes within a segment, a non-finite root, or a root outside the
segment means no crossing there.  If neither segment yields one the
result carries ``threshold_kwh=None``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from swap_economics.config.plans import PlanConfig
from swap_economics.models.results import BreakEvenResult, UsageEstimate

logger = logging.getLogger(__name__)


def _solve_within_cap(low: PlanConfig, fixed: PlanConfig) -> float | None:
    """Root of segment 1, or ``None``."""
    if low.overage_rate_per_kwh == 0:
        return None
    u = low.included_energy_cap_kwh + (
        (fixed.fixed_fee_per_month - low.fixed_fee_per_month) / low.overage_rate_per_kwh
    )
    if not math.isfinite(u):
        return None
    if low.included_energy_cap_kwh < u <= fixed.included_energy_cap_kwh:
        return u
    return None


def _solve_beyond_cap(low: PlanConfig, fixed: PlanConfig) -> float | None:
    """Root of segment 2, or ``None``."""
    slope = low.overage_rate_per_kwh - fixed.overage_rate_per_kwh
    if slope == 0:
        return None
    u = (
        fixed.fixed_fee_per_month
        - low.fixed_fee_per_month
        + low.included_energy_cap_kwh * low.overage_rate_per_kwh
        - fixed.included_energy_cap_kwh * fixed.overage_rate_per_kwh
    ) / slope
    if not math.isfinite(u):
        return None
    floor = max(low.included_energy_cap_kwh, fixed.included_energy_cap_kwh)
    if u > floor:
        return u
    return None


def find_break_even(
    low_plan: PlanConfig,
    fixed_plan: PlanConfig,
    usage: UsageEstimate,
    kwh_per_swap: float,
) -> BreakEvenResult:
    """Monthly energy at which ``low_plan`` and ``fixed_plan`` cost the same."""
    segment = "within_cap"
    threshold = _solve_within_cap(low_plan, fixed_plan)
    if threshold is None:
        segment = "beyond_cap"
        threshold = _solve_beyond_cap(low_plan, fixed_plan)

    if threshold is None:
        logger.debug("No break-even between %s and %s", low_plan.name, fixed_plan.name)
        return BreakEvenResult(low_plan_name=low_plan.name, fixed_plan_name=fixed_plan.name)

    wh_per_km = usage.consumption_wh_per_km
    return BreakEvenResult(
        low_plan_name=low_plan.name,
        fixed_plan_name=fixed_plan.name,
        threshold_kwh=threshold,
        delta_from_current_kwh=threshold - usage.monthly_kwh,
        equivalent_km=threshold * 1_000 / wh_per_km if wh_per_km > 0 else 0.0,
        equivalent_swaps=threshold / kwh_per_swap if kwh_per_swap > 0 else 0.0,
        segment=segment,
    )


def lowest_cap_plan(plans: Sequence[PlanConfig]) -> PlanConfig:
    """Tier with the smallest included energy; first declared on ties."""
    if not plans:
        raise ValueError("No plans to choose from")
    # min() keeps the first of equal keys, which is declaration order.
    return min(plans, key=lambda p: p.included_energy_cap_kwh)


def break_even_against_lowest_cap(
    plans: Sequence[PlanConfig],
    usage: UsageEstimate,
    kwh_per_swap: float,
) -> list[BreakEvenResult]:
    """Break-even of the lowest-cap tier against every other tier."""
    low = lowest_cap_plan(plans)
    return [
        find_break_even(low, p, usage, kwh_per_swap)
        for p in plans
        if p is not low
    ]
