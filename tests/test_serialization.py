"""Serialization tests — result models survive JSON encode/decode.

The export document and the API both ship these shapes, so they must stay
stable for downstream consumers.
"""

from __future__ import annotations

import json

from swap_economics.config import CommuteProfile, EconomicsConfig
from swap_economics.engine.comparator import compare_options
from swap_economics.models.results import BreakEvenResult, ComparisonResult


def test_comparison_result_round_trip(commuter: CommuteProfile):
    original = compare_options(commuter)
    restored = ComparisonResult.model_validate_json(original.model_dump_json())
    assert restored == original


def test_null_break_even_serialises_as_null():
    be = BreakEvenResult(low_plan_name="Lite", fixed_plan_name="Basic")
    data = json.loads(be.model_dump_json())
    assert data["threshold_kwh"] is None
    assert data["segment"] is None


def test_economics_table_round_trip():
    original = EconomicsConfig(gst_rate=0.18, horizon_years=5)
    assert EconomicsConfig.model_validate_json(original.model_dump_json()) == original
