"""Ownership amortizer — whole-pack purchases over a multi-year horizon.

  lifetime_kWh   = pack_kWh × cycle_life
  total_kWh      = monthly_kWh × 12 × years
  packs          = ceil(total_kWh / lifetime_kWh)
  invested       = packs × price
  final_fraction = min(1, (total − (packs−1)·lifetime) / lifetime)
  used           = (packs − 1 + final_fraction) × price
  wasted         = invested − used

Packs are bought whole but may be used partially; the unused remainder of
the final pack at horizon end is ``wasted_cost``.
"""

from __future__ import annotations

import math

from swap_economics.config.ownership import OwnershipConfig
from swap_economics.models.results import OwnershipResult, UsageEstimate


def amortize_ownership(
    usage: UsageEstimate,
    config: OwnershipConfig,
    horizon_years: int,
) -> OwnershipResult:
    """Price ``usage`` under outright pack ownership for ``horizon_years``.

    ``horizon_years`` is taken as given (integer ≥ 1 is the caller's
    contract). A zero lifetime energy yields an all-zero result.
    """
    lifetime_kwh = config.lifetime_kwh_per_pack
    total_kwh = max(0.0, usage.monthly_kwh) * 12 * horizon_years
    rate_per_kwh = config.rate_per_kwh

    # ── Whole packs bought ─────────────────────────────────────────────
    packs = int(math.ceil(total_kwh / lifetime_kwh)) if lifetime_kwh > 0 else 0
    invested = packs * config.pack_price

    # ── Final pack utilisation ─────────────────────────────────────────
    if packs > 0:
        last_pack_kwh = max(0.0, total_kwh - (packs - 1) * lifetime_kwh)
        final_fraction = min(1.0, last_pack_kwh / lifetime_kwh)
        used = (packs - 1 + final_fraction) * config.pack_price
    else:
        final_fraction = 0.0
        used = 0.0
    # used is re-derived from wasted so that used + wasted == invested exactly.
    wasted = invested - min(used, invested)
    used = invested - wasted

    # ── Smooth per-month view (no whole-pack rounding) ─────────────────
    monthly_cost = usage.monthly_kwh * rate_per_kwh if lifetime_kwh > 0 else 0.0
    cost_per_km = monthly_cost / usage.monthly_km if usage.monthly_km > 0 else 0.0

    return OwnershipResult(
        horizon_years=horizon_years,
        lifetime_kwh_per_pack=lifetime_kwh,
        total_energy_kwh=total_kwh,
        packs_purchased=packs,
        invested_cost=invested,
        used_cost=used,
        wasted_cost=wasted,
        final_pack_fraction=final_fraction,
        rate_per_kwh=rate_per_kwh,
        monthly_cost=monthly_cost,
        cost_per_km=cost_per_km,
    )
