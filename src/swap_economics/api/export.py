"""Export payload — raw answers and derived results in one JSON document."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from swap_economics.config.commute import CommuteProfile
from swap_economics.models.results import ComparisonResult


def build_export_payload(
    profile: CommuteProfile,
    result: ComparisonResult,
    answers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """JSON-ready document with an ISO-8601 UTC ``exported_at`` stamp."""
    return {
        "answers": answers or {},
        "profile": profile.model_dump(),
        "results": result.model_dump(),
        "exported_at": datetime.now(timezone.utc).isoformat(),
    }
