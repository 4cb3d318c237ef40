"""Validate and repair a candidate response against the fixed schema."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from app.models.responses import ComposedFlightResponse

logger = logging.getLogger("aerodex.response_shaper")

# Fields that always come from the deterministic composition.
PROTECTED_FIELDS = frozenset({"dataSources", "flightNumber", "callsign"})


def has_required_fields(candidate: Mapping[str, Any]) -> bool:
    return bool(candidate.get("status")) and isinstance(candidate.get("currentLocation"), Mapping)


def shape_response(
    candidate: Optional[Mapping[str, Any]], fallback: ComposedFlightResponse
) -> ComposedFlightResponse:
    """Overlay ``candidate`` onto ``fallback``, or return ``fallback`` unchanged.

    A candidate missing ``status`` or ``currentLocation``, or one whose values
    do not fit the schema, is discarded entirely rather than partially applied.
    """

    if candidate is None or not has_required_fields(candidate):
        return fallback

    merged = fallback.to_json_dict()
    for key, value in candidate.items():
        if key not in merged or key in PROTECTED_FIELDS or value is None:
            continue
        current = merged[key]
        if isinstance(current, dict):
            if not isinstance(value, Mapping):
                logger.warning("Discarding generated response: %s is not an object", key)
                return fallback
            merged[key] = {
                **current,
                **{k: v for k, v in value.items() if k in current and v is not None},
            }
        else:
            merged[key] = value

    try:
        return ComposedFlightResponse.model_validate(merged)
    except ValidationError as exc:
        logger.warning("Discarding generated response that failed validation: %s", exc)
        return fallback


__all__ = ["PROTECTED_FIELDS", "has_required_fields", "shape_response"]
