"""Economics table — every constant the calculator reads, injected once."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from swap_economics.config.home import HomeChargingConfig
from swap_economics.config.ownership import OwnershipConfig
from swap_economics.config.plans import PlanConfig, default_plans


class EconomicsConfig(BaseModel):
    """Static pricing and energy constants.

    Every field carries an explicit default so a partial table (YAML file,
    API override) is always complete after validation.
    """

    model_config = ConfigDict(frozen=True)

    # --- Energy model ---
    kwh_per_swap: float = Field(
        default=2.5, gt=0,
        description="Usable energy billed per swap (kWh). The pack has ~3.0 kWh "
                    "installed; 2.5 kWh is what a swap delivers.",
    )
    default_wh_per_km: float = Field(
        default=35.0, gt=0,
        description="Consumption used when the rider does not supply one (Wh/km)",
    )

    # --- Tax & horizon ---
    gst_rate: float = Field(default=0.0, ge=0, le=1.0, description="GST applied to ex-GST plan figures")
    horizon_years: int = Field(default=3, ge=1, description="Default comparison horizon (years)")

    # --- Cost models ---
    plans: list[PlanConfig] = Field(
        default_factory=default_plans, min_length=1,
        description="Subscription tiers in preference order",
    )
    ownership: OwnershipConfig = Field(default_factory=OwnershipConfig)
    home: HomeChargingConfig = Field(default_factory=HomeChargingConfig)

    @model_validator(mode="after")
    def _unique_plan_names(self) -> EconomicsConfig:
        names = [p.name for p in self.plans]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate plan names: {', '.join(duplicates)}")
        return self

    def effective_plans(self) -> list[PlanConfig]:
        """Plans with GST folded into every ex-GST figure."""
        return [p.with_gst(self.gst_rate) for p in self.plans]

    def plan(self, name: str) -> PlanConfig:
        """GST-inclusive plan by name."""
        for p in self.effective_plans():
            if p.name == name:
                return p
        raise KeyError(name)
