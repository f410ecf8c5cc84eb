"""Shared fixtures: canned stylist replies and offline model clients."""
from __future__ import annotations

import json

import pytest

from agents.recommendation_requester import RecommendationRequester
from logic.lifecycle import StylistSession
from tests.clients import GatedClient, StaticStylistClient


def office_reply(title: str = "Quiet Authority") -> dict:
    return {
        "title": title,
        "colorPalette": {"name": "City Neutrals", "colors": ["#1F2A44", "#D9D4CC", "camel"]},
        "components": [
            {"item": "Silk Shell Blouse", "description": "Ivory, tucked in.", "category": "top"},
            {"item": "Wide-Leg Trousers", "description": "High-rise navy wool.", "category": "bottom"},
            {"item": "Unstructured Blazer", "description": "Camel, sleeves pushed.", "category": "outerwear"},
            {"item": "Pointed Loafers", "description": "Polished black leather.", "category": "footwear"},
        ],
        "layeringAdvice": "Drape the blazer over the shoulders between meetings.",
        "stylePsychology": "Tonal dressing reads composed and deliberate.",
    }


@pytest.fixture()
def office_payload() -> dict:
    return office_reply()


@pytest.fixture()
def office_reply_text(office_payload: dict) -> str:
    return json.dumps(office_payload)


@pytest.fixture()
def static_client(office_reply_text: str) -> StaticStylistClient:
    return StaticStylistClient([office_reply_text])


@pytest.fixture()
def session(static_client: StaticStylistClient) -> StylistSession:
    return StylistSession(requester=RecommendationRequester(client=static_client, timeout_seconds=5))


@pytest.fixture()
def gated_client() -> GatedClient:
    return GatedClient([json.dumps(office_reply("First Look")), json.dumps(office_reply("Second Look"))])
