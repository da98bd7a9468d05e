"""FastAPI server — JSON access to the swap economics calculator.

Run with:
    uvicorn swap_economics.api.server:app --reload --port 8000

Or:
    python -m swap_economics.api.server

Endpoints:
    GET  /                    — pointer document
    GET  /health              — liveness
    GET  /economics/defaults  — default economics table as JSON
    GET  /schema              — JSON Schemas for CommuteProfile and EconomicsConfig
    POST /usage               — monthly usage for a commute profile
    POST /compare             — full comparison + narrative
    POST /break-even          — break-even between two named plans
    POST /export              — answers + results as one JSON document
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from swap_economics import __version__
from swap_economics.api.export import build_export_payload
from swap_economics.api.narrative import generate_narrative
from swap_economics.config.commute import CommuteProfile
from swap_economics.config.economics import EconomicsConfig
from swap_economics.config.home import HomeChargingConfig
from swap_economics.engine.break_even import find_break_even
from swap_economics.engine.comparator import compare_options
from swap_economics.engine.usage import estimate_usage
from swap_economics.models.results import BreakEvenResult, UsageEstimate

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Swap Economics API",
    version=__version__,
    description=(
        "Prices a rider's commute under battery-swap subscription tiers and "
        "under outright pack ownership, finds break-even usage between tiers "
        "and compares with home charging."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class UsageRequest(BaseModel):
    """Commute answers plus optional economics overrides."""
    profile: dict[str, Any] = Field(
        default_factory=dict,
        description="CommuteProfile fields. Missing or non-numeric values use defaults. "
                    "Example: {'daily_km': 15, 'days_per_month': 26, 'longest_trip_km': 60}",
    )
    economics: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial EconomicsConfig merged onto defaults. "
                    "Example: {'gst_rate': 0.18, 'ownership': {'pack_price': 40000}}",
    )


class CompareRequest(UsageRequest):
    """Request body for /compare and /export."""
    horizon_years: int | None = Field(default=None, ge=1, description="Overrides economics.horizon_years")
    home: dict[str, Any] | None = Field(
        default=None,
        description="Home tariff and loss. Example: {'tariff_per_kwh': 9, 'loss_pct': 10}",
    )
    answers: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw survey answers echoed into the export document",
    )


class BreakEvenRequest(UsageRequest):
    """Request body for /break-even."""
    low_plan: str = Field(default="Lite", description="Lowest-cap tier")
    fixed_plan: str = Field(default="Basic", description="Capped-fee tier to compare against")


class CompareResponse(BaseModel):
    """Response from /compare."""
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _validation_error(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=exc.errors(include_url=False, include_context=False, include_input=False),
    )


def _build_economics(overrides: dict[str, Any]) -> EconomicsConfig:
    """EconomicsConfig from partial overrides merged onto defaults."""
    defaults = EconomicsConfig().model_dump()
    _deep_merge(defaults, overrides)
    try:
        return EconomicsConfig(**defaults)
    except ValidationError as exc:
        raise _validation_error(exc) from exc


def _build_profile(data: dict[str, Any], economics: EconomicsConfig) -> CommuteProfile:
    """CommuteProfile with the table's default consumption when none is given."""
    return CommuteProfile.from_fields(data, economics.default_wh_per_km)


def _build_home(data: dict[str, Any] | None, economics: EconomicsConfig) -> HomeChargingConfig:
    if not data:
        return economics.home
    merged = _deep_merge(economics.home.model_dump(), data)
    try:
        return HomeChargingConfig(**merged)
    except ValidationError as exc:
        raise _validation_error(exc) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to start."""
    return {
        "name": "Swap Economics API",
        "version": __version__,
        "start_here": "POST /compare",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/economics/defaults")
def get_defaults():
    """Complete default economics table. Use as a starting point for overrides."""
    return EconomicsConfig().model_dump()


@app.get("/schema")
def get_schema():
    """JSON Schemas for the two input models."""
    return {
        "commute_profile": CommuteProfile.model_json_schema(),
        "economics": EconomicsConfig.model_json_schema(),
    }


@app.post("/usage", response_model=UsageEstimate)
def usage(req: UsageRequest):
    """Monthly distance, energy and swaps for a commute profile."""
    economics = _build_economics(req.economics)
    profile = _build_profile(req.profile, economics)
    return estimate_usage(profile, economics.kwh_per_swap)


@app.post("/compare", response_model=CompareResponse)
def compare(req: CompareRequest):
    """Price every plan, ownership and home charging for one profile.

    Example minimal request:
    ```json
    {"profile": {"daily_km": 15, "longest_trip_km": 60}, "horizon_years": 5}
    ```
    """
    economics = _build_economics(req.economics)
    profile = _build_profile(req.profile, economics)
    home = _build_home(req.home, economics)
    result = compare_options(profile, economics, req.horizon_years, home)
    return CompareResponse(
        result=result.model_dump(),
        narrative=generate_narrative(result, economics),
    )


@app.post("/break-even", response_model=BreakEvenResult)
def break_even(req: BreakEvenRequest):
    """Energy at which ``fixed_plan`` becomes cheaper than ``low_plan``."""
    economics = _build_economics(req.economics)
    profile = _build_profile(req.profile, economics)
    try:
        low = economics.plan(req.low_plan)
        fixed = economics.plan(req.fixed_plan)
    except KeyError as exc:
        logger.warning("Break-even requested for unknown plan %s", exc)
        raise HTTPException(status_code=404, detail=f"Unknown plan: {exc.args[0]}") from exc
    usage_estimate = estimate_usage(profile, economics.kwh_per_swap)
    return find_break_even(low, fixed, usage_estimate, economics.kwh_per_swap)


@app.post("/export")
def export(req: CompareRequest):
    """Answers, normalised profile and full results in one document."""
    economics = _build_economics(req.economics)
    profile = _build_profile(req.profile, economics)
    home = _build_home(req.home, economics)
    result = compare_options(profile, economics, req.horizon_years, home)
    return build_export_payload(profile, result, req.answers)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "swap_economics.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
