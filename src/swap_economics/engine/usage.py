"""Usage estimator — commute answers → monthly distance and energy.

  monthly_km  = round(daily_km × days + longest_trip_km)
  monthly_kWh = monthly_km × Wh/km / 1000
  km_per_swap = kWh_per_swap × 1000 / Wh/km
"""

from __future__ import annotations

import math

from swap_economics.config.commute import CommuteProfile
from swap_economics.models.results import UsageEstimate


def round_half_up(value: float) -> int:
    """Nearest integer, halves away from zero for non-negative input.

    Python's ``round`` is banker's rounding; survey figures round .5 up.
    """
    return int(math.floor(value + 0.5))


def estimate_usage(profile: CommuteProfile, kwh_per_swap: float) -> UsageEstimate:
    """Project one month of riding from a commute profile."""
    daily_km = max(0.0, profile.daily_km)
    days = max(0.0, profile.days_per_month)
    longest = max(0.0, profile.longest_trip_km)
    wh_per_km = max(0.0, profile.consumption_wh_per_km)

    monthly_km = max(0, round_half_up(daily_km * days + longest))
    monthly_kwh = monthly_km * wh_per_km / 1_000

    # Zero consumption or a zero swap size means no meaningful swap range.
    km_per_swap = (
        (kwh_per_swap * 1_000) / wh_per_km
        if wh_per_km > 0 and kwh_per_swap > 0 else 0.0
    )
    swaps_needed_exact = monthly_km / km_per_swap if km_per_swap > 0 else 0.0

    return UsageEstimate(
        monthly_km=monthly_km,
        monthly_kwh=monthly_kwh,
        km_per_swap=km_per_swap,
        swaps_needed_exact=swaps_needed_exact,
        swaps_needed_ceil=math.ceil(swaps_needed_exact),
        consumption_wh_per_km=wh_per_km,
        days_per_month=days,
    )
