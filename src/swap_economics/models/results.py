"""Result types — the contract between engine, API, narrative and dashboard.

Every result is a value object recomputed on demand from the current
answers and the economics table.  Nothing here is persisted.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Usage
# ═══════════════════════════════════════════════════════════════════════════

class UsageEstimate(BaseModel):
    """Monthly distance and energy derived from a CommuteProfile."""

    monthly_km: int
    """round(daily_km × days_per_month + longest_trip_km), half-up."""

    monthly_kwh: float
    """monthly_km × Wh/km / 1000. Full precision; round at display time."""

    km_per_swap: float
    """Range delivered by one swap = kWh_per_swap × 1000 / Wh/km (0 if Wh/km ≤ 0)."""

    swaps_needed_exact: float
    swaps_needed_ceil: int

    consumption_wh_per_km: float
    days_per_month: float


# ═══════════════════════════════════════════════════════════════════════════
# Subscription tiers
# ═══════════════════════════════════════════════════════════════════════════

class PlanCostResult(BaseModel):
    """One tier priced against one UsageEstimate."""

    plan_name: str
    fixed_fee_per_month: float
    included_energy_cap_kwh: float
    overage_rate_per_kwh: float

    within_cap: bool
    overage_kwh: float
    """max(0, monthly_kwh − cap)."""

    overage_cost: float
    monthly_cost: float
    """fee + overage_cost."""

    cost_per_km: float
    """monthly_cost / monthly_km, or 0 when monthly_km is 0."""

    virtual_included_swaps: float = 0.0
    """Cap expressed in swaps, for riders who think in swaps rather than kWh."""


# ═══════════════════════════════════════════════════════════════════════════
# Ownership
# ═══════════════════════════════════════════════════════════════════════════

class OwnershipResult(BaseModel):
    """Whole-pack purchases needed to cover the horizon's energy.

    Conservation: used_cost + wasted_cost == invested_cost.
    """

    horizon_years: int
    lifetime_kwh_per_pack: float
    total_energy_kwh: float
    packs_purchased: int
    invested_cost: float
    used_cost: float
    wasted_cost: float
    """Capacity bought but still unused in the final pack at horizon end."""

    final_pack_fraction: float
    rate_per_kwh: float
    """pack_price / lifetime kWh — amortisation per kWh, no packs rounding."""

    monthly_cost: float
    cost_per_km: float


# ═══════════════════════════════════════════════════════════════════════════
# Break-even & comparators
# ═══════════════════════════════════════════════════════════════════════════

class BreakEvenResult(BaseModel):
    """Monthly energy at which a capped-fee tier matches the lowest-cap tier.

    ``threshold_kwh`` is ``None`` when no finite crossing exists in range;
    the numeric fields are then 0.
    """

    low_plan_name: str
    fixed_plan_name: str
    threshold_kwh: float | None = None
    delta_from_current_kwh: float = 0.0
    """Positive = usage would need to increase to reach break-even."""

    equivalent_km: float = 0.0
    equivalent_swaps: float = 0.0
    segment: Literal["within_cap", "beyond_cap"] | None = None


class HomeChargingResult(BaseModel):
    """Flat per-kWh home charging, losses included. Informational only."""

    tariff_per_kwh: float
    loss_pct: float
    billed_kwh: float
    monthly_cost: float
    cost_per_km: float


class ComparisonBar(BaseModel):
    """One bar of the horizon-total chart."""

    label: str
    value: int


class ComparisonResult(BaseModel):
    """Everything one calculation pass produces."""

    horizon_years: int
    usage: UsageEstimate
    plans: list[PlanCostResult]
    recommended_plan: str
    ownership: OwnershipResult
    break_even: list[BreakEvenResult]
    home: HomeChargingResult
    bars: list[ComparisonBar]

    def plan(self, name: str) -> PlanCostResult:
        for p in self.plans:
            if p.plan_name == name:
                return p
        raise KeyError(name)
