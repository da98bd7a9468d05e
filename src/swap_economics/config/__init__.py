"""Configuration models — rider inputs and the economics table."""

from swap_economics.config.commute import CommuteProfile
from swap_economics.config.plans import PlanConfig, default_plans
from swap_economics.config.ownership import OwnershipConfig
from swap_economics.config.home import HomeChargingConfig
from swap_economics.config.economics import EconomicsConfig
from swap_economics.config.loader import load_economics

__all__ = [
    "CommuteProfile",
    "PlanConfig",
    "default_plans",
    "OwnershipConfig",
    "HomeChargingConfig",
    "EconomicsConfig",
    "load_economics",
]
