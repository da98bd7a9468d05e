"""Outright battery-pack ownership constants."""

from pydantic import BaseModel, ConfigDict, Field


class OwnershipConfig(BaseModel):
    """Price and throughput of one owned pack."""

    model_config = ConfigDict(frozen=True)

    pack_price: float = Field(default=35_000.0, gt=0, description="Purchase price per pack (₹)")
    pack_energy_kwh: float = Field(default=1.8, gt=0, description="Usable energy per full cycle (kWh)")
    pack_cycle_life: int = Field(default=600, gt=0, description="Rated cycles before replacement")

    @property
    def lifetime_kwh_per_pack(self) -> float:
        """Energy one pack delivers over its rated cycle life."""
        return self.pack_energy_kwh * self.pack_cycle_life

    @property
    def rate_per_kwh(self) -> float:
        """Battery amortisation only (₹/kWh)."""
        lifetime = self.lifetime_kwh_per_pack
        return self.pack_price / lifetime if lifetime > 0 else 0.0
