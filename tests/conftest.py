"""Shared test fixtures — sample configs matching default_economics.yaml."""

from __future__ import annotations

import math

import pytest

from swap_economics.config import (
    CommuteProfile,
    EconomicsConfig,
    HomeChargingConfig,
    OwnershipConfig,
    PlanConfig,
)
from swap_economics.engine.usage import estimate_usage
from swap_economics.models.results import UsageEstimate


@pytest.fixture
def commuter() -> CommuteProfile:
    return CommuteProfile(
        daily_km=15,
        days_per_month=26,
        longest_trip_km=60,
        consumption_wh_per_km=32,
    )


@pytest.fixture
def lite() -> PlanConfig:
    return PlanConfig(
        name="Lite",
        fixed_fee_per_month=678,
        included_energy_cap_kwh=20,
        overage_rate_per_kwh=70,
    )


@pytest.fixture
def basic() -> PlanConfig:
    return PlanConfig(
        name="Basic",
        fixed_fee_per_month=1_999,
        included_energy_cap_kwh=35,
        overage_rate_per_kwh=35,
    )


@pytest.fixture
def advanced() -> PlanConfig:
    return PlanConfig(
        name="Advanced",
        fixed_fee_per_month=3_599,
        included_energy_cap_kwh=87,
        overage_rate_per_kwh=35,
    )


@pytest.fixture
def ownership() -> OwnershipConfig:
    return OwnershipConfig(pack_price=35_000, pack_energy_kwh=1.8, pack_cycle_life=600)


@pytest.fixture
def home() -> HomeChargingConfig:
    return HomeChargingConfig(tariff_per_kwh=8, loss_pct=12)


@pytest.fixture
def economics(lite: PlanConfig, basic: PlanConfig, advanced: PlanConfig,
              ownership: OwnershipConfig, home: HomeChargingConfig) -> EconomicsConfig:
    return EconomicsConfig(
        kwh_per_swap=2.5,
        default_wh_per_km=35,
        gst_rate=0.0,
        horizon_years=3,
        plans=[lite, basic, advanced],
        ownership=ownership,
        home=home,
    )


def _make_usage(monthly_kwh: float, monthly_km: int = 450, wh_per_km: float = 32.0) -> UsageEstimate:
    """UsageEstimate with a chosen energy figure, bypassing the commute model."""
    km_per_swap = 2.5 * 1_000 / wh_per_km if wh_per_km > 0 else 0.0
    swaps = monthly_km / km_per_swap if km_per_swap > 0 else 0.0
    return UsageEstimate(
        monthly_km=monthly_km,
        monthly_kwh=monthly_kwh,
        km_per_swap=km_per_swap,
        swaps_needed_exact=swaps,
        swaps_needed_ceil=math.ceil(swaps),
        consumption_wh_per_km=wh_per_km,
        days_per_month=26,
    )


@pytest.fixture
def usage_at():
    """Factory: ``usage_at(monthly_kwh, monthly_km=450, wh_per_km=32.0)``."""
    return _make_usage


@pytest.fixture
def commuter_usage(commuter: CommuteProfile) -> UsageEstimate:
    return estimate_usage(commuter, 2.5)
