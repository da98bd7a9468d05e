"""Plan cost evaluator — price one subscription tier against one month.

  overage_kWh = max(0, monthly_kWh − cap)
  monthly     = fee + overage_kWh × rate

Each tier is evaluated on its own; results never depend on another tier.
"""

from __future__ import annotations

from collections.abc import Sequence

from swap_economics.config.plans import PlanConfig
from swap_economics.models.results import PlanCostResult, UsageEstimate


def evaluate_plan(
    usage: UsageEstimate,
    plan: PlanConfig,
    kwh_per_swap: float | None = None,
) -> PlanCostResult:
    """Price ``plan`` for the month described by ``usage``.

    ``kwh_per_swap`` is only used to express the cap in swaps.
    """
    overage_kwh = max(0.0, usage.monthly_kwh - plan.included_energy_cap_kwh)
    overage_cost = overage_kwh * plan.overage_rate_per_kwh
    monthly_cost = plan.fixed_fee_per_month + overage_cost
    cost_per_km = monthly_cost / usage.monthly_km if usage.monthly_km > 0 else 0.0

    virtual_swaps = (
        plan.included_energy_cap_kwh / kwh_per_swap
        if kwh_per_swap is not None and kwh_per_swap > 0 else 0.0
    )

    return PlanCostResult(
        plan_name=plan.name,
        fixed_fee_per_month=plan.fixed_fee_per_month,
        included_energy_cap_kwh=plan.included_energy_cap_kwh,
        overage_rate_per_kwh=plan.overage_rate_per_kwh,
        within_cap=overage_kwh == 0,
        overage_kwh=overage_kwh,
        overage_cost=overage_cost,
        monthly_cost=monthly_cost,
        cost_per_km=cost_per_km,
        virtual_included_swaps=virtual_swaps,
    )


def evaluate_plans(
    usage: UsageEstimate,
    plans: Sequence[PlanConfig],
    kwh_per_swap: float | None = None,
) -> list[PlanCostResult]:
    """Evaluate every tier, keeping declaration order."""
    return [evaluate_plan(usage, p, kwh_per_swap) for p in plans]


def recommend_plan(results: Sequence[PlanCostResult]) -> PlanCostResult:
    """Cheapest tier this month; ties go to the earlier-declared tier."""
    if not results:
        raise ValueError("No plan results to choose from")
    # min() keeps the first of equal keys, which is declaration order.
    return min(results, key=lambda r: r.monthly_cost)


def recommendation_label(result: PlanCostResult, recommended: PlanCostResult) -> str:
    """Card status line for ``result``."""
    if result.plan_name == recommended.plan_name:
        return "Best for current usage"
    return f"{recommended.plan_name} likely cheaper"
