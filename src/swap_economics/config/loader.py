"""YAML loader for economics tables."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from swap_economics.config.economics import EconomicsConfig
from swap_economics.exceptions import EconomicsConfigError

logger = logging.getLogger(__name__)


def load_economics(path: str | Path) -> EconomicsConfig:
    """Read and validate an economics table.

    An empty file yields the built-in defaults. Raises
    ``EconomicsConfigError`` for a missing file, malformed YAML, a
    non-mapping document, or values that fail validation.
    """
    path = Path(path)
    logger.info("Loading economics table from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise EconomicsConfigError("Economics file not found", path=str(path)) from exc
    except yaml.YAMLError as exc:
        raise EconomicsConfigError(f"Malformed YAML: {exc}", path=str(path)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise EconomicsConfigError("Economics file must contain a mapping", path=str(path))

    try:
        return EconomicsConfig(**data)
    except ValidationError as exc:
        raise EconomicsConfigError(
            f"Invalid economics table ({exc.error_count()} errors)", path=str(path),
        ) from exc
