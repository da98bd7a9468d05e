"""Engine — pure calculation stages."""

from swap_economics.engine.usage import estimate_usage, round_half_up
from swap_economics.engine.plan_cost import (
    evaluate_plan,
    evaluate_plans,
    recommend_plan,
    recommendation_label,
)
from swap_economics.engine.ownership import amortize_ownership
from swap_economics.engine.break_even import (
    break_even_against_lowest_cap,
    find_break_even,
    lowest_cap_plan,
)
from swap_economics.engine.home import estimate_home_charging
from swap_economics.engine.curves import cost_curves, plan_cost_curve
from swap_economics.engine.comparator import build_horizon_bars, compare_options

__all__ = [
    "estimate_usage",
    "round_half_up",
    "evaluate_plan",
    "evaluate_plans",
    "recommend_plan",
    "recommendation_label",
    "amortize_ownership",
    "find_break_even",
    "lowest_cap_plan",
    "break_even_against_lowest_cap",
    "estimate_home_charging",
    "plan_cost_curve",
    "cost_curves",
    "build_horizon_bars",
    "compare_options",
]
