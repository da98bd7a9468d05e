"""Result models — calculator output contracts."""

from swap_economics.models.results import (
    BreakEvenResult,
    ComparisonBar,
    ComparisonResult,
    HomeChargingResult,
    OwnershipResult,
    PlanCostResult,
    UsageEstimate,
)

__all__ = [
    "BreakEvenResult",
    "ComparisonBar",
    "ComparisonResult",
    "HomeChargingResult",
    "OwnershipResult",
    "PlanCostResult",
    "UsageEstimate",
]
