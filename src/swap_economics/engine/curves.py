"""Vectorised cost-versus-energy curves for charting and solver checks."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from swap_economics.config.plans import PlanConfig


def plan_cost_curve(plan: PlanConfig, kwh_grid: np.ndarray) -> np.ndarray:
    """Monthly cost of ``plan`` at every energy level in ``kwh_grid``."""
    grid = np.asarray(kwh_grid, dtype=float)
    overage = np.maximum(0.0, grid - plan.included_energy_cap_kwh)
    return plan.fixed_fee_per_month + overage * plan.overage_rate_per_kwh


def cost_curves(
    plans: Sequence[PlanConfig],
    max_kwh: float,
    points: int = 201,
) -> tuple[np.ndarray, dict[str, np.ndarray]]:
    """Evenly spaced grid on ``[0, max_kwh]`` and each plan's cost along it."""
    grid = np.linspace(0.0, max(0.0, max_kwh), max(2, points))
    return grid, {p.name: plan_cost_curve(p, grid) for p in plans}


def sign_changes(diff: np.ndarray) -> int:
    """Number of strict sign changes in ``diff``, ignoring exact zeros."""
    signs = np.sign(diff)
    signs = signs[signs != 0]
    if signs.size < 2:
        return 0
    return int(np.count_nonzero(signs[1:] != signs[:-1]))
