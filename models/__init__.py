"""Model package exports."""

from models.catalog import *  # noqa: F401,F403
from models.recommendation import (
    ColorPalette,
    Failed,
    Idle,
    Loading,
    OutfitComponent,
    OutfitRecommendation,
    RequestLifecycleState,
    StylingCriteria,
    Success,
)

__all__ = [
    "ColorPalette",
    "Failed",
    "Idle",
    "Loading",
    "OutfitComponent",
    "OutfitRecommendation",
    "RequestLifecycleState",
    "StylingCriteria",
    "Success",
]
