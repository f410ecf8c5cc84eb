"""Stylist requester turning criteria into one validated recommendation."""
from __future__ import annotations

import asyncio
import logging

from couture_app.config import DEFAULT_TIMEOUT_SECONDS
from couture_app.errors import (
    CriteriaIncompleteError,
    RecommendationFormatError,
    StylistUnavailableError,
)
from couture_app.logging_config import get_logger, log_event, operation_context
from logic.prompting import RESPONSE_SCHEMA, build_prompt
from logic.validation import parse_recommendation
from models.catalog import OCCASIONS
from models.recommendation import OutfitRecommendation, StylingCriteria
from tools.gemini_client import StylistModelClient

logger = get_logger(__name__)


class RecommendationRequester:
    """Issues exactly one model call per :meth:`generate` and validates the reply.

    There is no retry and no cache. Every failure kind is logged with its cause
    and collapsed into :class:`StylistUnavailableError`, whose message is the
    only thing the user sees.
    """

    def __init__(
        self,
        client: StylistModelClient,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.client = client
        self.timeout_seconds = timeout_seconds

    async def generate(self, criteria: StylingCriteria) -> OutfitRecommendation:
        if not criteria.is_ready():
            raise CriteriaIncompleteError("an occasion is required before generating")

        with operation_context("requester.generate") as correlation_id:
            log_event(
                logger,
                level=logging.INFO,
                event="recommendation_requested",
                agent="stylist",
                occasion=criteria.occasion,
                occasion_in_catalog=criteria.occasion.strip() in OCCASIONS,
                mood=criteria.mood or None,
                weather=criteria.weather or None,
                model=self.client.model,
                correlation_id=correlation_id,
            )
            prompt = build_prompt(criteria)

            try:
                text = await asyncio.wait_for(
                    self.client.generate_json(prompt, RESPONSE_SCHEMA),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError as exc:
                self._log_failure("stylist_timeout", exc, correlation_id)
                raise StylistUnavailableError() from exc
            except Exception as exc:  # transport, auth, quota, blocked replies
                self._log_failure("stylist_transport_failed", exc, correlation_id)
                raise StylistUnavailableError() from exc

            try:
                recommendation = parse_recommendation(text)
            except RecommendationFormatError as exc:
                self._log_failure(
                    "stylist_response_invalid",
                    exc,
                    correlation_id,
                    details=exc.details,
                    raw_response=text,
                )
                raise StylistUnavailableError() from exc

            log_event(
                logger,
                level=logging.INFO,
                event="recommendation_received",
                agent="stylist",
                correlation_id=correlation_id,
                component_count=len(recommendation.components),
                color_count=len(recommendation.color_palette.colors),
            )
            return recommendation

    @staticmethod
    def _log_failure(event: str, exc: BaseException, correlation_id: str, **fields: object) -> None:
        log_event(
            logger,
            level=logging.ERROR,
            event=event,
            agent="stylist",
            correlation_id=correlation_id,
            cause=f"{type(exc).__name__}: {exc}",
            exc_info=exc,
            **fields,
        )


__all__ = ["RecommendationRequester"]
