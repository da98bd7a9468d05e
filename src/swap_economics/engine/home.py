"""Home-charging comparator — flat tariff on energy plus charging losses."""

from __future__ import annotations

from swap_economics.config.home import HomeChargingConfig
from swap_economics.models.results import HomeChargingResult, UsageEstimate


def estimate_home_charging(usage: UsageEstimate, home: HomeChargingConfig) -> HomeChargingResult:
    """Monthly cost of charging at home, for side-by-side display only."""
    billed_kwh = usage.monthly_kwh * (1 + home.loss_pct / 100)
    monthly_cost = billed_kwh * home.tariff_per_kwh
    return HomeChargingResult(
        tariff_per_kwh=home.tariff_per_kwh,
        loss_pct=home.loss_pct,
        billed_kwh=billed_kwh,
        monthly_cost=monthly_cost,
        cost_per_km=monthly_cost / usage.monthly_km if usage.monthly_km > 0 else 0.0,
    )
