"""Prompt text and response schema for the stylist request."""

from __future__ import annotations

from google import generativeai as genai

from models.catalog import display_or_placeholder
from models.recommendation import StylingCriteria

RESPONSE_MIME_TYPE = "application/json"
CATEGORY_VALUES = ["top", "bottom", "outerwear", "footwear", "accessory"]
REQUIRED_FIELDS = ["title", "colorPalette", "components", "stylePsychology"]

_Schema = genai.protos.Schema
_Type = genai.protos.Type


def _string(description: str | None = None) -> genai.protos.Schema:
    if description:
        return _Schema(type_=_Type.STRING, description=description)
    return _Schema(type_=_Type.STRING)


RESPONSE_SCHEMA = _Schema(
    type_=_Type.OBJECT,
    properties={
        "title": _string("A catchy title for the look"),
        "colorPalette": _Schema(
            type_=_Type.OBJECT,
            properties={
                "name": _string(),
                "colors": _Schema(
                    type_=_Type.ARRAY,
                    items=_string(),
                    description="Hex codes or color names",
                ),
            },
            required=["name", "colors"],
        ),
        "components": _Schema(
            type_=_Type.ARRAY,
            items=_Schema(
                type_=_Type.OBJECT,
                properties={
                    "item": _string(),
                    "description": _string(),
                    "category": _Schema(type_=_Type.STRING, format_="enum", enum=CATEGORY_VALUES),
                },
                required=["item", "description", "category"],
            ),
        ),
        "layeringAdvice": _string(),
        "stylePsychology": _string(),
    },
    required=REQUIRED_FIELDS,
)


def build_prompt(criteria: StylingCriteria) -> str:
    """Compose the stylist instruction for one set of criteria.

    Blank weather or mood are rendered as ``Not specified`` so the model sees
    every slot filled.
    """

    return (
        'You are "CoutureMind," an elite AI fashion stylist.\n'
        "Curate a personalized outfit for the following:\n"
        f"Occasion: {criteria.occasion.strip()}\n"
        f"Weather: {display_or_placeholder(criteria.weather)}\n"
        f"Mood/Vibe: {display_or_placeholder(criteria.mood)}\n"
        "\n"
        "Provide a complete, head-to-toe outfit recommendation.\n"
        "The response must be in JSON format."
    )


__all__ = [
    "RESPONSE_MIME_TYPE",
    "RESPONSE_SCHEMA",
    "REQUIRED_FIELDS",
    "CATEGORY_VALUES",
    "build_prompt",
]
