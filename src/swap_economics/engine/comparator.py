"""Comparator — one calculation pass over every cost model.

Data flows one way:

  CommuteProfile → UsageEstimate → per-tier costs → ownership
                 → break-even points → home charging → horizon bars

Each stage is a pure function; nothing here reads ambient state.
"""

from __future__ import annotations

import logging

from swap_economics.config.commute import CommuteProfile
from swap_economics.config.economics import EconomicsConfig
from swap_economics.config.home import HomeChargingConfig
from swap_economics.engine.break_even import break_even_against_lowest_cap
from swap_economics.engine.home import estimate_home_charging
from swap_economics.engine.ownership import amortize_ownership
from swap_economics.engine.plan_cost import evaluate_plans, recommend_plan
from swap_economics.engine.usage import estimate_usage, round_half_up
from swap_economics.models.results import (
    ComparisonBar,
    ComparisonResult,
    OwnershipResult,
    PlanCostResult,
)

logger = logging.getLogger(__name__)


def build_horizon_bars(
    plans: list[PlanCostResult],
    ownership: OwnershipResult,
    horizon_years: int,
) -> list[ComparisonBar]:
    """Horizon totals per tier plus ownership split into used and leftover."""
    months = 12 * horizon_years
    bars = [
        ComparisonBar(
            label=f"{p.plan_name} ({horizon_years}y)",
            value=round_half_up(p.monthly_cost * months),
        )
        for p in plans
    ]
    bars.append(ComparisonBar(
        label=f"Ownership used ({horizon_years}y)",
        value=round_half_up(ownership.used_cost),
    ))
    bars.append(ComparisonBar(
        label=f"Ownership leftover ({horizon_years}y)",
        value=round_half_up(ownership.wasted_cost),
    ))
    return bars


def compare_options(
    profile: CommuteProfile,
    economics: EconomicsConfig | None = None,
    horizon_years: int | None = None,
    home: HomeChargingConfig | None = None,
) -> ComparisonResult:
    """Run every stage once for ``profile`` against ``economics``.

    ``horizon_years`` and ``home`` override the table's defaults, matching
    the horizon slider and home-tariff inputs.
    """
    economics = economics or EconomicsConfig()
    years = horizon_years if horizon_years is not None else economics.horizon_years
    home = home or economics.home
    plans = economics.effective_plans()

    usage = estimate_usage(profile, economics.kwh_per_swap)
    plan_results = evaluate_plans(usage, plans, economics.kwh_per_swap)
    recommended = recommend_plan(plan_results)
    ownership = amortize_ownership(usage, economics.ownership, years)
    break_even = break_even_against_lowest_cap(plans, usage, economics.kwh_per_swap)
    home_result = estimate_home_charging(usage, home)

    logger.debug(
        "Compared %d plans at %.2f kWh/month over %d years; recommended %s",
        len(plan_results), usage.monthly_kwh, years, recommended.plan_name,
    )

    return ComparisonResult(
        horizon_years=years,
        usage=usage,
        plans=plan_results,
        recommended_plan=recommended.plan_name,
        ownership=ownership,
        break_even=break_even,
        home=home_result,
        bars=build_horizon_bars(plan_results, ownership, years),
    )
