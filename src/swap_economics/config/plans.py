"""Subscription tiers — fee, included energy and overage rate."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PlanConfig(BaseModel):
    """One subscription tier, constant for the life of the process."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Tier label shown to the rider")
    fixed_fee_per_month: float = Field(ge=0, description="Monthly subscription fee (₹)")
    included_energy_cap_kwh: float = Field(ge=0, description="Energy included in the fee (kWh/month)")
    overage_rate_per_kwh: float = Field(ge=0, description="Charge per kWh beyond the cap (₹/kWh)")

    # --- Tax treatment of the listed figures ---
    fee_ex_gst: bool = Field(
        default=False,
        description="True if the fee is quoted before GST; False if it is an MRP.",
    )
    overage_ex_gst: bool = Field(
        default=False,
        description="True if the overage rate is quoted before GST.",
    )

    def with_gst(self, gst_rate: float) -> PlanConfig:
        """Tax-inclusive copy: every ex-GST figure is scaled by ``1 + gst_rate``."""
        factor = 1.0 + gst_rate
        return self.model_copy(update={
            "fixed_fee_per_month": self.fixed_fee_per_month * factor if self.fee_ex_gst else self.fixed_fee_per_month,
            "overage_rate_per_kwh": self.overage_rate_per_kwh * factor if self.overage_ex_gst else self.overage_rate_per_kwh,
            "fee_ex_gst": False,
            "overage_ex_gst": False,
        })

    @classmethod
    def from_swap_allowance(
        cls,
        name: str,
        fixed_fee_per_month: float,
        included_swaps: int,
        kwh_per_swap: float,
        overage_rate_per_kwh: float,
        **kwargs,
    ) -> PlanConfig:
        """Tier whose allowance is advertised in swaps rather than kWh."""
        return cls(
            name=name,
            fixed_fee_per_month=fixed_fee_per_month,
            included_energy_cap_kwh=included_swaps * kwh_per_swap,
            overage_rate_per_kwh=overage_rate_per_kwh,
            **kwargs,
        )


def default_plans() -> list[PlanConfig]:
    """Lite, Basic and Advanced in preference order (lowest cap first)."""
    return [
        PlanConfig(
            name="Lite",
            fixed_fee_per_month=678.0,
            included_energy_cap_kwh=20.0,
            overage_rate_per_kwh=70.0,
            fee_ex_gst=True,
            overage_ex_gst=True,
        ),
        PlanConfig(
            name="Basic",
            fixed_fee_per_month=1_999.0,
            included_energy_cap_kwh=35.0,
            overage_rate_per_kwh=35.0,
            overage_ex_gst=True,
        ),
        PlanConfig(
            name="Advanced",
            fixed_fee_per_month=3_599.0,
            included_energy_cap_kwh=87.0,
            overage_rate_per_kwh=35.0,
            overage_ex_gst=True,
        ),
    ]
