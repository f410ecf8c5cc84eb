"""CoutureMind app bootstrap."""

import logging

from agents.recommendation_requester import RecommendationRequester
from couture_app.config import StylistConfig
from couture_app.logging_config import configure_logging, get_logger, log_event
from logic.lifecycle import StylistSession
from tools.gemini_client import GeminiStylistClient, StylistModelClient


LOGGER = get_logger(__name__)


class CoutureMindApp:
    """Wires together config, the model client, the requester and the session."""

    def __init__(self, config: StylistConfig | None = None, client: StylistModelClient | None = None) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging()

        self.client = client or GeminiStylistClient(api_key=self.config.api_key, model=self.config.model)
        self.requester = RecommendationRequester(
            client=self.client,
            timeout_seconds=self.config.request_timeout_seconds,
        )
        self.session = StylistSession(requester=self.requester)

        if client is None and not self.config.has_api_key:
            log_event(
                LOGGER,
                level=logging.WARNING,
                event="api_key_missing",
                detail="Generation requests will fail until GEMINI_API_KEY is set",
            )
        log_event(
            LOGGER,
            level=logging.INFO,
            event="app_ready",
            model=self.client.model,
            environment=self.config.environment or "local",
        )


__all__ = ["CoutureMindApp"]
