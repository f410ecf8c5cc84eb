"""Canonical option sets offered by the styling form.

Occasions and moods are presented as quick picks; the occasion field still
accepts free text. Weather presets only pre-fill the free-text weather field.
"""

from typing import Dict, List

NOT_SPECIFIED = "Not specified"

OCCASIONS: List[str] = [
    "Casual",
    "Office",
    "Party",
    "Wedding",
    "Travel",
    "Date Night",
    "Formal Event",
    "Gym/Athletic",
    "Brunch",
]

MOODS: List[str] = [
    "Confident",
    "Relaxed",
    "Bold",
    "Elegant",
    "Playful",
    "Powerful",
    "Minimalist",
    "Bohemian",
]

WEATHER_PRESETS: List[str] = [
    "Sunny & Warm",
    "Rainy & Cool",
    "Chilly & Windy",
    "Snowy",
]

COMPONENT_CATEGORIES: Dict[str, str] = {
    "top": "Top",
    "bottom": "Bottom",
    "outerwear": "Outerwear",
    "footwear": "Footwear",
    "accessory": "Accessory",
}


def category_label(category: str) -> str:
    """Display label for a component category, falling back to ``Top``."""

    return COMPONENT_CATEGORIES.get((category or "").strip().lower(), COMPONENT_CATEGORIES["top"])


def display_or_placeholder(value: str | None) -> str:
    """Return the stripped value or the ``Not specified`` placeholder."""

    stripped = (value or "").strip()
    return stripped or NOT_SPECIFIED


__all__ = [
    "NOT_SPECIFIED",
    "OCCASIONS",
    "MOODS",
    "WEATHER_PRESETS",
    "COMPONENT_CATEGORIES",
    "category_label",
    "display_or_placeholder",
]
