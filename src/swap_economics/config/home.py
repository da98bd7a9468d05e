"""Home-charging comparator settings."""

from pydantic import BaseModel, ConfigDict, Field


class HomeChargingConfig(BaseModel):
    """Residential tariff and charger losses for the side-by-side estimate."""

    model_config = ConfigDict(frozen=True)

    tariff_per_kwh: float = Field(default=8.0, ge=0, description="Grid tariff at home (₹/kWh)")
    loss_pct: float = Field(
        default=12.0, ge=0, le=100,
        description="Transmission + charging loss on top of energy used (%)",
    )
