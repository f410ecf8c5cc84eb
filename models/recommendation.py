"""Styling criteria, outfit recommendation schemas and lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ComponentCategory = Literal["top", "bottom", "outerwear", "footwear", "accessory"]


@dataclass
class StylingCriteria:
    """The user's occasion, weather and mood selections for one session."""

    occasion: str = ""
    weather: str = ""
    mood: str = ""

    def is_ready(self) -> bool:
        return bool(self.occasion.strip())

    def snapshot(self) -> "StylingCriteria":
        return replace(self)


class _WireModel(BaseModel):
    """Immutable model accepting camelCase keys from the model reply."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class OutfitComponent(_WireModel):
    item: str
    description: str
    category: ComponentCategory


class ColorPalette(_WireModel):
    name: str
    colors: List[str] = Field(min_length=1, description="Hex codes or color names")


class OutfitRecommendation(_WireModel):
    """A complete head-to-toe look as returned by the stylist."""

    title: str = Field(description="A catchy title for the look")
    color_palette: ColorPalette = Field(alias="colorPalette")
    components: List[OutfitComponent] = Field(min_length=1)
    layering_advice: Optional[str] = Field(default=None, alias="layeringAdvice")
    style_psychology: str = Field(alias="stylePsychology")

    def to_wire(self) -> dict:
        """Dump using the camelCase names of the response schema."""

        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class Idle:
    kind: Literal["idle"] = "idle"


@dataclass(frozen=True)
class Loading:
    generation: int
    kind: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Success:
    recommendation: OutfitRecommendation
    criteria: Optional[StylingCriteria] = None
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class Failed:
    message: str
    kind: Literal["failed"] = "failed"


RequestLifecycleState = Union[Idle, Loading, Success, Failed]


__all__ = [
    "ComponentCategory",
    "StylingCriteria",
    "OutfitComponent",
    "ColorPalette",
    "OutfitRecommendation",
    "Idle",
    "Loading",
    "Success",
    "Failed",
    "RequestLifecycleState",
]
