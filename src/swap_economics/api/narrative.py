"""Narrative generator — plain-English reading of a comparison.

Turns a ``ComparisonResult`` into the same statements the plan cards make:
usage, each tier's status and total, the recommendation, ownership
used/leftover, break-even points and home charging.
"""

from __future__ import annotations

from swap_economics.config.economics import EconomicsConfig
from swap_economics.engine.plan_cost import recommendation_label
from swap_economics.models.results import BreakEvenResult, ComparisonResult


def _rupees(amount: float) -> str:
    return f"₹{amount:,.0f}"


def describe_break_even(be: BreakEvenResult) -> str:
    """One line per break-even point; '—' when there is no crossing."""
    if be.threshold_kwh is None:
        return f"{be.low_plan_name} vs {be.fixed_plan_name}: —"
    sign = "+" if be.delta_from_current_kwh >= 0 else ""
    return (
        f"{be.low_plan_name} vs {be.fixed_plan_name}: "
        f"{be.threshold_kwh:.1f} kWh/mo (~{be.equivalent_km:,.0f} km, "
        f"{be.equivalent_swaps:.1f} swaps) · "
        f"{sign}{be.delta_from_current_kwh:.1f} kWh from now"
    )


def amortization_note(economics: EconomicsConfig, horizon_years: int) -> str:
    """The footnote explaining how ownership is priced."""
    own = economics.ownership
    return (
        f"Ownership amortization uses {_rupees(own.pack_price)} per "
        f"{own.pack_energy_kwh:g} kWh pack over {own.pack_cycle_life} cycles "
        f"(~{_rupees(own.rate_per_kwh)}/kWh). Bars reflect monthly totals × "
        f"{horizon_years} years at your current usage."
    )


def generate_narrative(result: ComparisonResult, economics: EconomicsConfig | None = None) -> str:
    """Sectioned text summary of one comparison."""
    economics = economics or EconomicsConfig()
    u = result.usage
    recommended = result.plan(result.recommended_plan)

    sections: list[str] = []

    # ── 1. Usage ──
    sections.append("=" * 60)
    sections.append("YOUR MONTHLY USAGE")
    sections.append("=" * 60)
    sections.append(
        f"Monthly km: {u.monthly_km:,}\n"
        f"~ km per swap: {u.km_per_swap:.1f}\n"
        f"Swaps needed: {u.swaps_needed_ceil}/mo\n"
        f"Energy use: {u.monthly_kwh:.1f} kWh/mo\n"
        f"Horizon: {result.horizon_years} yrs"
    )

    # ── 2. Plans ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("SUBSCRIPTION PLANS")
    sections.append("=" * 60)
    for p in result.plans:
        status = "Within cap" if p.within_cap else f"Exceeds by {p.overage_kwh:.1f} kWh"
        extra = _rupees(p.overage_cost) if p.overage_kwh > 0 else "—"
        sections.append(
            f"{p.plan_name} (cap {p.included_energy_cap_kwh:g} kWh, fee {_rupees(p.fixed_fee_per_month)}/mo)\n"
            f"  Status: {status}\n"
            f"  Over-cap rate: {_rupees(p.overage_rate_per_kwh)} /kWh\n"
            f"  Est. extra this month: {extra}\n"
            f"  Total per month: {_rupees(p.monthly_cost)}\n"
            f"  Est. ₹/km: {p.cost_per_km:.2f}"
        )
    first = result.plans[0]
    sections.append(f"Recommendation ({first.plan_name}): {recommendation_label(first, recommended)}")

    # ── 3. Ownership ──
    o = result.ownership
    sections.append("")
    sections.append("=" * 60)
    sections.append("BATTERY OWNERSHIP")
    sections.append("=" * 60)
    sections.append(
        f"Packs bought over {o.horizon_years} years: {o.packs_purchased}\n"
        f"Invested: {_rupees(o.invested_cost)}\n"
        f"Used: {_rupees(o.used_cost)}\n"
        f"Leftover in last pack: {_rupees(o.wasted_cost)} "
        f"({(1 - o.final_pack_fraction) * 100 if o.packs_purchased else 0:.0f}% unused)"
    )

    # ── 4. Break-even ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("BREAK-EVEN")
    sections.append("=" * 60)
    if result.break_even:
        for be in result.break_even:
            sections.append(describe_break_even(be))
    else:
        sections.append("Only one plan configured — nothing to compare.")

    # ── 5. Home charging ──
    h = result.home
    sections.append("")
    sections.append("=" * 60)
    sections.append("HOME CHARGING")
    sections.append("=" * 60)
    sections.append(
        f"Tariff {h.tariff_per_kwh:g} ₹/kWh, {h.loss_pct:g}% charging loss\n"
        f"Energy billed: {h.billed_kwh:.1f} kWh/mo\n"
        f"Monthly cost: {_rupees(h.monthly_cost)}\n"
        f"₹/km: {h.cost_per_km:.2f}"
    )

    sections.append("")
    sections.append(amortization_note(economics, result.horizon_years))

    return "\n".join(sections)
