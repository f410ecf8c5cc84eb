"""Parse and validate the stylist reply before it reaches the view."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from pydantic import ValidationError

from couture_app.errors import RecommendationFormatError
from models.recommendation import OutfitRecommendation


def _summarize_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """Keep only locations and messages; raw input values stay out of logs."""

    return [
        {"loc": ".".join(str(part) for part in error.get("loc", ())), "msg": error.get("msg")}
        for error in exc.errors()
    ]


def parse_recommendation(text: str | None) -> OutfitRecommendation:
    """Parse the raw reply once and validate it against the recommendation schema.

    Anything short of a complete recommendation raises
    :class:`RecommendationFormatError`; optional ``layeringAdvice`` is the only
    field allowed to be missing.
    """

    if text is None or not text.strip():
        raise RecommendationFormatError("empty response text")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecommendationFormatError(f"response is not valid JSON: {exc.msg}") from exc

    if not isinstance(payload, dict):
        raise RecommendationFormatError(f"expected a JSON object, got {type(payload).__name__}")

    try:
        return OutfitRecommendation.model_validate(payload)
    except ValidationError as exc:
        raise RecommendationFormatError(
            "response failed schema checks", details=_summarize_errors(exc)
        ) from exc


__all__ = ["parse_recommendation"]
