"""Commute answers — the rider's side of every calculation."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

MAX_DAYS_PER_MONTH = 31


def _to_number(value: Any) -> float | None:
    """Best-effort numeric coercion for form answers; ``None`` if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class CommuteProfile(BaseModel):
    """One respondent's commute answers, immutable within a calculation.

    Answers arrive straight from a form, so construction is forgiving:
    missing or non-numeric values fall back to the field default,
    negatives clamp to 0 and ``days_per_month`` clamps to 31.
    """

    model_config = ConfigDict(frozen=True)

    daily_km: float = Field(default=0.0, ge=0, description="Typical daily commute distance (km)")
    days_per_month: float = Field(
        default=26.0, ge=0, le=MAX_DAYS_PER_MONTH,
        description="Riding days per month",
    )
    longest_trip_km: float = Field(
        default=0.0, ge=0,
        description="One long ride per month added on top of the commute (km)",
    )
    consumption_wh_per_km: float = Field(
        default=35.0, ge=0,
        description="Vehicle energy consumption (Wh/km). 0 means unknown; "
                    "swap-range figures then degrade to 0.",
    )

    @field_validator("daily_km", "longest_trip_km", "consumption_wh_per_km", mode="before")
    @classmethod
    def _clamp_non_negative(cls, value: Any, info: ValidationInfo) -> Any:
        number = _to_number(value)
        if number is None:
            return cls.model_fields[info.field_name].default
        return max(0.0, number)

    @field_validator("days_per_month", mode="before")
    @classmethod
    def _clamp_days(cls, value: Any, info: ValidationInfo) -> Any:
        number = _to_number(value)
        if number is None:
            return cls.model_fields[info.field_name].default
        return min(float(MAX_DAYS_PER_MONTH), max(0.0, number))

    @classmethod
    def from_answers(cls, answers: dict[str, Any] | None, default_wh_per_km: float | None = None) -> CommuteProfile:
        """Build a profile from the survey's ``commute`` answer block.

        Keys follow the survey form: ``daily_km``, ``days_used``,
        ``longest_km`` and ``wh_per_km``.
        """
        answers = answers or {}
        data: dict[str, Any] = {
            "daily_km": answers.get("daily_km"),
            "days_per_month": answers.get("days_used"),
            "longest_trip_km": answers.get("longest_km"),
            "consumption_wh_per_km": answers.get("wh_per_km"),
        }
        return cls.from_fields(data, default_wh_per_km)

    @classmethod
    def from_fields(cls, data: dict[str, Any] | None, default_wh_per_km: float | None = None) -> CommuteProfile:
        """Build a profile from field values, taking consumption from
        ``default_wh_per_km`` whenever the given value is unusable.
        """
        data = dict(data or {})
        if default_wh_per_km is not None and _to_number(data.get("consumption_wh_per_km")) is None:
            data["consumption_wh_per_km"] = default_wh_per_km
        return cls(**data)
