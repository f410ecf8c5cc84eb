"""Lifecycle transitions, re-entrancy guard and stale-result handling."""
from __future__ import annotations

import asyncio

import pytest
from google.api_core import exceptions as google_exceptions

from agents.recommendation_requester import RecommendationRequester
from couture_app.errors import USER_FACING_ERROR
from logic.lifecycle import StylistSession
from models.recommendation import Failed, Idle, Loading, Success
from tests.clients import FailingClient, StaticStylistClient


def _session_for(client) -> StylistSession:
    return StylistSession(requester=RecommendationRequester(client=client, timeout_seconds=5))


async def _until_called(client, calls: int = 1) -> None:
    while client.calls < calls:
        await asyncio.sleep(0)


def test_initial_state_is_idle_and_generation_needs_occasion(session: StylistSession) -> None:
    assert isinstance(session.state, Idle)
    assert not session.can_generate

    session.set_weather("Sunny & Warm")
    session.set_mood("Bold")
    assert not session.can_generate

    session.set_occasion("Office")
    assert session.can_generate


@pytest.mark.asyncio
async def test_generate_without_occasion_is_a_no_op(session: StylistSession, static_client) -> None:
    state = await session.generate()

    assert isinstance(state, Idle)
    assert static_client.prompts == []


@pytest.mark.asyncio
async def test_office_scenario_reaches_success_with_components_in_order(
    session: StylistSession, static_client: StaticStylistClient
) -> None:
    session.update_criteria(occasion="Office", weather="", mood="")

    state = await session.generate()

    assert isinstance(state, Success)
    assert [c.category for c in state.recommendation.components] == [
        "top",
        "bottom",
        "outerwear",
        "footwear",
    ]
    assert len(state.recommendation.color_palette.colors) == 3
    assert "Weather: Not specified" in static_client.prompts[0]
    assert "Mood/Vibe: Not specified" in static_client.prompts[0]


@pytest.mark.asyncio
async def test_service_failure_sets_failed_and_keeps_criteria() -> None:
    session = _session_for(FailingClient(google_exceptions.InternalServerError("boom")))
    session.update_criteria(occasion="Office", weather="Rainy & Cool", mood="Relaxed")

    state = await session.generate()

    assert state == Failed(message=USER_FACING_ERROR)
    assert (session.criteria.occasion, session.criteria.weather, session.criteria.mood) == (
        "Office",
        "Rainy & Cool",
        "Relaxed",
    )
    session.set_mood("Bold")
    assert session.criteria.mood == "Bold"
    assert session.can_generate


@pytest.mark.asyncio
async def test_parse_failure_matches_service_failure_message() -> None:
    session = _session_for(StaticStylistClient(["<html>oops</html>"]))
    session.set_occasion("Office")

    state = await session.generate()

    assert isinstance(state, Failed)
    assert state.message == USER_FACING_ERROR


@pytest.mark.asyncio
async def test_retry_from_failed_reenters_loading(office_reply_text: str) -> None:
    session = _session_for(StaticStylistClient(["nope", office_reply_text]))
    session.set_occasion("Party")

    assert isinstance(await session.generate(), Failed)
    assert isinstance(await session.generate(), Success)


@pytest.mark.asyncio
async def test_second_generate_while_loading_issues_no_call(gated_client) -> None:
    session = _session_for(gated_client)
    session.set_occasion("Wedding")

    first = asyncio.create_task(session.generate())
    await _until_called(gated_client)
    assert isinstance(session.state, Loading)
    assert not session.can_generate

    second = await session.generate()
    assert isinstance(second, Loading)
    assert session.submit() is None

    gated_client.release_all()
    final = await first

    assert isinstance(final, Success)
    assert gated_client.calls == 1


@pytest.mark.asyncio
async def test_submit_enters_loading_before_returning(gated_client) -> None:
    session = _session_for(gated_client)
    session.set_occasion("Wedding")

    task = session.submit()

    assert task is not None
    assert isinstance(session.state, Loading)
    assert session.submit() is None

    gated_client.release_all()
    await task
    assert isinstance(session.state, Success)
    assert gated_client.calls == 1


@pytest.mark.asyncio
async def test_criteria_edits_during_loading_do_not_change_request(gated_client) -> None:
    session = _session_for(gated_client)
    session.set_occasion("Wedding")
    task = session.submit()

    session.set_occasion("Gym/Athletic")
    gated_client.release_all()
    await task

    assert isinstance(session.state, Success)
    assert session.criteria.occasion == "Gym/Athletic"


@pytest.mark.asyncio
async def test_reset_discards_in_flight_result(gated_client) -> None:
    session = _session_for(gated_client)
    session.set_occasion("Office")
    task = session.submit()
    await _until_called(gated_client)

    session.reset()
    gated_client.release_all()
    await task

    assert isinstance(session.state, Idle)


@pytest.mark.asyncio
async def test_stale_result_does_not_overwrite_newer_loading(gated_client) -> None:
    session = _session_for(gated_client)
    session.set_occasion("Office")
    first = session.submit()
    await _until_called(gated_client)

    session.reset()
    second = session.submit()
    await _until_called(gated_client, calls=2)
    newer = session.state

    gated_client.release(0)
    await first
    assert session.state is newer

    gated_client.release(1)
    await second
    assert isinstance(session.state, Success)
    assert session.state.recommendation.title == "Second Look"


@pytest.mark.asyncio
async def test_generate_from_success_is_a_no_op(session: StylistSession, static_client) -> None:
    session.set_occasion("Office")
    shown = await session.generate()
    assert isinstance(shown, Success)
    assert shown.criteria.occasion == "Office"
    assert not session.can_generate

    static_client.replies.append("{}")
    assert await session.generate() is shown
    assert session.submit() is None
    assert len(static_client.prompts) == 1


@pytest.mark.asyncio
async def test_new_curation_discards_recommendation_and_keeps_criteria(session: StylistSession) -> None:
    session.update_criteria(occasion="Office", mood="Powerful")
    await session.generate()
    assert isinstance(session.state, Success)

    state = session.start_new_curation()

    assert state == Idle()
    assert session.criteria.occasion == "Office"
    assert session.criteria.mood == "Powerful"


def test_new_curation_outside_success_is_a_no_op(session: StylistSession) -> None:
    session.state = Failed(message=USER_FACING_ERROR)

    assert isinstance(session.start_new_curation(), Failed)
