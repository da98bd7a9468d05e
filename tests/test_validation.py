"""Pydantic validation tests — the economics table is validated once."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from swap_economics.config import (
    EconomicsConfig,
    HomeChargingConfig,
    OwnershipConfig,
    PlanConfig,
    default_plans,
)


class TestPlanValidation:
    def test_negative_fee_rejected(self):
        with pytest.raises(ValidationError):
            PlanConfig(name="X", fixed_fee_per_month=-1, included_energy_cap_kwh=10, overage_rate_per_kwh=1)

    def test_negative_cap_rejected(self):
        with pytest.raises(ValidationError):
            PlanConfig(name="X", fixed_fee_per_month=1, included_energy_cap_kwh=-10, overage_rate_per_kwh=1)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            PlanConfig(name="X", fixed_fee_per_month=1, included_energy_cap_kwh=10, overage_rate_per_kwh=-1)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            PlanConfig(name="", fixed_fee_per_month=1, included_energy_cap_kwh=10, overage_rate_per_kwh=1)

    def test_default_plans_shape(self):
        plans = default_plans()
        assert [p.name for p in plans] == ["Lite", "Basic", "Advanced"]
        caps = [p.included_energy_cap_kwh for p in plans]
        assert caps == sorted(caps)


class TestOwnershipValidation:
    def test_defaults(self):
        o = OwnershipConfig()
        assert o.lifetime_kwh_per_pack == pytest.approx(1_080.0)

    @pytest.mark.parametrize("field", ["pack_price", "pack_energy_kwh", "pack_cycle_life"])
    def test_zero_rejected(self, field):
        with pytest.raises(ValidationError):
            OwnershipConfig(**{field: 0})


class TestHomeValidation:
    def test_loss_above_100_rejected(self):
        with pytest.raises(ValidationError):
            HomeChargingConfig(loss_pct=101)

    def test_negative_tariff_rejected(self):
        with pytest.raises(ValidationError):
            HomeChargingConfig(tariff_per_kwh=-1)


class TestEconomicsValidation:
    def test_defaults_are_valid(self):
        e = EconomicsConfig()
        assert e.kwh_per_swap == 2.5
        assert e.horizon_years == 3
        assert len(e.plans) == 3

    def test_duplicate_plan_names_rejected(self, lite):
        with pytest.raises(ValidationError, match="Duplicate plan names"):
            EconomicsConfig(plans=[lite, lite])

    def test_empty_plans_rejected(self):
        with pytest.raises(ValidationError):
            EconomicsConfig(plans=[])

    def test_gst_above_one_rejected(self):
        with pytest.raises(ValidationError):
            EconomicsConfig(gst_rate=1.5)

    def test_zero_horizon_rejected(self):
        with pytest.raises(ValidationError):
            EconomicsConfig(horizon_years=0)

    def test_zero_swap_energy_rejected(self):
        with pytest.raises(ValidationError):
            EconomicsConfig(kwh_per_swap=0)

    def test_table_is_frozen(self):
        e = EconomicsConfig()
        with pytest.raises(ValidationError):
            e.gst_rate = 0.18

    def test_plan_lookup_is_gst_inclusive(self):
        e = EconomicsConfig(gst_rate=0.18)
        assert e.plan("Lite").fixed_fee_per_month == pytest.approx(800.04)
        assert e.plans[0].fixed_fee_per_month == 678

    def test_unknown_plan_lookup(self):
        with pytest.raises(KeyError):
            EconomicsConfig().plan("Premium")
