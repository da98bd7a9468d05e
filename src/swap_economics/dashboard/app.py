"""Swap Economics — Streamlit dashboard.

Layout: sidebar inputs (commute, horizon, home charging) → main area with
usage metrics, one card per plan, horizon bar chart, cost curves with
break-even markers, and a JSON export download.

Run with:
    streamlit run src/swap_economics/dashboard/app.py
"""

from __future__ import annotations

import json

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from swap_economics.api.export import build_export_payload
from swap_economics.api.narrative import amortization_note, describe_break_even
from swap_economics.config import CommuteProfile, EconomicsConfig, HomeChargingConfig
from swap_economics.engine.comparator import compare_options
from swap_economics.engine.curves import cost_curves
from swap_economics.engine.plan_cost import recommendation_label

# ---------------------------------------------------------------------------
# Default instances — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF_E = EconomicsConfig()
_DEF_P = CommuteProfile(consumption_wh_per_km=_DEF_E.default_wh_per_km)
_DEF_H = _DEF_E.home

_PLOT_LAYOUT = dict(
    margin=dict(l=20, r=20, t=30, b=20),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11, color="rgba(255,255,255,0.7)"),
)
_BAR_COLORS = ["#6c5ce7", "#0984e3", "#00b894", "#fdcb6e", "#636e72"]

st.set_page_config(page_title="Swap Economics", page_icon="⚡", layout="wide")
st.title("Battery swap plans vs. ownership")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fmt_inr(val: float) -> str:
    """Format INR with lakhs for large values."""
    if abs(val) >= 1e5:
        return f"₹{val / 1e5:,.2f} L"
    return f"₹{val:,.0f}"


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Your commute")

with st.sidebar.expander("Riding", expanded=True):
    c1, c2 = st.columns(2)
    daily_km = c1.number_input("Daily km", 0.0, 500.0, 15.0, 1.0)
    days = c2.number_input("Days / month", 0, 31, int(_DEF_P.days_per_month), 1)
    c1, c2 = st.columns(2)
    longest_km = c1.number_input("Longest trip km", 0.0, 1000.0, 60.0, 5.0)
    wh_per_km = c2.number_input("Wh / km", 1.0, 200.0, _DEF_P.consumption_wh_per_km, 1.0)

with st.sidebar.expander("Comparison", expanded=True):
    horizon = st.slider("Horizon (years)", 1, 10, _DEF_E.horizon_years)
    c1, c2 = st.columns(2)
    tariff = c1.number_input("Home tariff ₹/kWh", 3.0, 20.0, _DEF_H.tariff_per_kwh, 0.1)
    loss = c2.number_input("Charging loss %", 0.0, 30.0, _DEF_H.loss_pct, 1.0)

profile = CommuteProfile(
    daily_km=daily_km,
    days_per_month=days,
    longest_trip_km=longest_km,
    consumption_wh_per_km=wh_per_km,
)
home = HomeChargingConfig(tariff_per_kwh=tariff, loss_pct=loss)
result = compare_options(profile, _DEF_E, horizon, home)
u = result.usage

# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------
st.header("Your monthly usage")
cols = st.columns(4)
cols[0].metric("Monthly km", f"{u.monthly_km:,}")
cols[1].metric("~ km per swap", f"{u.km_per_swap:.1f}",
               help=f"Billed at {_DEF_E.kwh_per_swap:g} kWh usable per swap.")
cols[2].metric("Swaps needed", f"{u.swaps_needed_ceil}/mo")
cols[3].metric("Energy use", f"{u.monthly_kwh:.1f} kWh/mo")

# ---------------------------------------------------------------------------
# Plan cards
# ---------------------------------------------------------------------------
st.header("Subscription plans")
recommended = result.plan(result.recommended_plan)
plan_cols = st.columns(len(result.plans))
for col, p in zip(plan_cols, result.plans):
    with col:
        st.subheader(p.plan_name)
        st.caption(f"Cap: {p.included_energy_cap_kwh:g} kWh · Fee: {_fmt_inr(p.fixed_fee_per_month)}/mo")
        if p.within_cap:
            st.success("Within cap")
        else:
            st.warning(f"Exceeds by {p.overage_kwh:.1f} kWh")
        st.metric("Total per month", _fmt_inr(p.monthly_cost),
                  delta=_fmt_inr(p.overage_cost) + " extra" if p.overage_kwh > 0 else None,
                  delta_color="inverse")
        st.caption(f"Over-cap rate {_fmt_inr(p.overage_rate_per_kwh)}/kWh · {p.cost_per_km:.2f} ₹/km")
        st.info(recommendation_label(p, recommended))

# ---------------------------------------------------------------------------
# Horizon bars
# ---------------------------------------------------------------------------
st.header(f"Total over {horizon} years")
fig_bars = go.Figure()
fig_bars.add_trace(go.Bar(
    x=[b.label for b in result.bars],
    y=[b.value for b in result.bars],
    marker_color=[_BAR_COLORS[i % len(_BAR_COLORS)] for i in range(len(result.bars))],
    text=[_fmt_inr(b.value) for b in result.bars],
    textposition="outside",
))
fig_bars.update_layout(height=360, showlegend=False, yaxis_title="₹", **_PLOT_LAYOUT)
st.plotly_chart(fig_bars, use_container_width=True)
st.caption(amortization_note(_DEF_E, horizon))

# ---------------------------------------------------------------------------
# Cost curves + break-even
# ---------------------------------------------------------------------------
st.header("Break-even")
plans = _DEF_E.effective_plans()
thresholds = [be.threshold_kwh for be in result.break_even if be.threshold_kwh is not None]
max_kwh = max([u.monthly_kwh, *thresholds, *(p.included_energy_cap_kwh for p in plans)]) * 1.2
grid, curves = cost_curves(plans, max_kwh)

fig_curves = go.Figure()
for name, costs in curves.items():
    fig_curves.add_trace(go.Scatter(x=grid, y=costs, mode="lines", name=name))
for be in result.break_even:
    if be.threshold_kwh is not None:
        fig_curves.add_vline(x=be.threshold_kwh, line_dash="dot", line_color="#fdcb6e",
                             annotation_text=f"{be.low_plan_name}/{be.fixed_plan_name}",
                             annotation_position="top left")
fig_curves.add_vline(x=u.monthly_kwh, line_dash="dash", line_color="#00b894",
                     annotation_text="You", annotation_position="top right")
fig_curves.update_layout(height=320, xaxis_title="kWh / month", yaxis_title="₹ / month", **_PLOT_LAYOUT)
st.plotly_chart(fig_curves, use_container_width=True)
for be in result.break_even:
    st.markdown(f"- {describe_break_even(be)}")

# ---------------------------------------------------------------------------
# Side-by-side table
# ---------------------------------------------------------------------------
st.header("Side by side")
rows = [
    {"Option": p.plan_name, "₹/month": round(p.monthly_cost), "₹/km": round(p.cost_per_km, 2)}
    for p in result.plans
]
rows.append({
    "Option": "Ownership (amortized)",
    "₹/month": round(result.ownership.monthly_cost),
    "₹/km": round(result.ownership.cost_per_km, 2),
})
rows.append({
    "Option": "Home charging",
    "₹/month": round(result.home.monthly_cost),
    "₹/km": round(result.home.cost_per_km, 2),
})
st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
payload = build_export_payload(profile, result)
st.download_button(
    "📥  Download results JSON",
    data=json.dumps(payload, indent=2, ensure_ascii=False),
    file_name="swap_economics.json",
    mime="application/json",
    key="dl_export",
)
