"""Criteria holder and request lifecycle state machine for one page session.

The session owns a single :class:`StylingCriteria` record and exactly one
lifecycle state. Valid transitions::

    Idle    --generate-->      Loading
    Failed  --generate-->      Loading
    Loading --reply ok-->      Success
    Loading --reply failed-->  Failed
    Success --new curation-->  Idle
    any     --reset-->         Idle

Every other request is a no-op. Each generation carries a token; a reply whose
token no longer matches the current ``Loading`` state is discarded.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

from agents.recommendation_requester import RecommendationRequester
from couture_app.errors import StylistUnavailableError
from couture_app.logging_config import get_logger, log_event
from models.recommendation import (
    Failed,
    Idle,
    Loading,
    RequestLifecycleState,
    StylingCriteria,
    Success,
)

logger = get_logger(__name__)


class StylistSession:
    """Single-writer holder of criteria and the current lifecycle state."""

    def __init__(self, requester: RecommendationRequester, criteria: StylingCriteria | None = None) -> None:
        self.requester = requester
        self.criteria = criteria or StylingCriteria()
        self.state: RequestLifecycleState = Idle()
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()

    def set_occasion(self, occasion: str) -> None:
        self.criteria.occasion = occasion

    def set_weather(self, weather: str) -> None:
        self.criteria.weather = weather

    def set_mood(self, mood: str) -> None:
        self.criteria.mood = mood

    def update_criteria(
        self,
        occasion: Optional[str] = None,
        weather: Optional[str] = None,
        mood: Optional[str] = None,
    ) -> None:
        """Assign any provided fields; ``None`` leaves a field untouched."""

        if occasion is not None:
            self.set_occasion(occasion)
        if weather is not None:
            self.set_weather(weather)
        if mood is not None:
            self.set_mood(mood)

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def accepts_generate(self) -> bool:
        """Only ``Idle`` and ``Failed`` lead to ``Loading``."""

        return isinstance(self.state, (Idle, Failed))

    @property
    def can_generate(self) -> bool:
        return self.accepts_generate and self.criteria.is_ready()

    async def generate(self) -> RequestLifecycleState:
        """Run one generation and return the state it leaves behind.

        Returns the current state unchanged when generation is not allowed.
        """

        if not self.can_generate:
            log_event(
                logger,
                level=logging.INFO,
                event="generate_ignored",
                state=self.state.kind,
                has_occasion=self.criteria.is_ready(),
            )
            return self.state

        loading = self._enter_loading()
        await self._run(loading, self.criteria.snapshot())
        return self.state

    async def _run(self, loading: Loading, criteria: StylingCriteria) -> None:
        try:
            recommendation = await self.requester.generate(criteria)
        except StylistUnavailableError as exc:
            self._commit(loading, Failed(message=exc.user_message))
        else:
            self._commit(loading, Success(recommendation=recommendation, criteria=criteria))

    def submit(self) -> Optional[asyncio.Task]:
        """Schedule :meth:`generate` on the running loop.

        The session enters ``Loading`` before this returns, so a second submit
        is rejected immediately. Returns ``None`` when nothing was scheduled.
        """

        if not self.can_generate:
            log_event(logger, level=logging.INFO, event="submit_ignored", state=self.state.kind)
            return None
        loading = self._enter_loading()
        task = asyncio.get_running_loop().create_task(self._run(loading, self.criteria.snapshot()))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def start_new_curation(self) -> RequestLifecycleState:
        """Discard a displayed recommendation and return to ``Idle``."""

        if isinstance(self.state, Success):
            self.state = Idle()
            log_event(logger, level=logging.INFO, event="curation_restarted")
        return self.state

    def reset(self) -> RequestLifecycleState:
        """Return to ``Idle`` from any state; an in-flight reply will be ignored."""

        self._generation += 1
        self.state = Idle()
        log_event(logger, level=logging.INFO, event="session_reset", generation=self._generation)
        return self.state

    def _enter_loading(self) -> Loading:
        self._generation += 1
        # Entered synchronously so a concurrent caller sees Loading at once.
        loading = Loading(generation=self._generation)
        self.state = loading
        return loading

    def _commit(self, loading: Loading, outcome: RequestLifecycleState) -> None:
        if self.state is not loading:
            log_event(
                logger,
                level=logging.INFO,
                event="stale_result_discarded",
                generation=loading.generation,
                current_state=self.state.kind,
                outcome=outcome.kind,
            )
            return
        self.state = outcome
        log_event(logger, level=logging.INFO, event="generation_finished", outcome=outcome.kind)


__all__ = ["StylistSession"]
