"""Recommendation service: the boundary between callers and the engine."""

from __future__ import annotations

import logging
import time
from collections import Counter

import config
from moodrec.behavior_store import BehaviorStore
from moodrec.engine import RecommendationEngine
from moodrec.models import BehaviorSample, MoodPrediction, Recommendation, UserInput

logger = logging.getLogger(__name__)

SERVICE_NAME = "Mood-Driven Music Recommendation Engine"


class RecommendationService:
    """Entry point for already-validated requests.

    Runs the engine, then, when a user id is supplied, records what was
    observed so later requests from that user can learn from it.

    Args:
        engine: The :class:`~moodrec.engine.RecommendationEngine`.
        behavior_store: The :class:`~moodrec.behavior_store.BehaviorStore`.
    """

    def __init__(self, engine: RecommendationEngine, behavior_store: BehaviorStore) -> None:
        self._engine = engine
        self._store = behavior_store

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def get_recommendations(
        self,
        user_input: UserInput,
        user_id: str | None = None,
        minutes: int | None = None,
    ) -> Recommendation:
        """Return a recommendation and record the observation for *user_id*.

        Args:
            user_input: Validated request input.
            user_id: Optional user identity.
            minutes: Target sequence length; defaults to
                :data:`config.DEFAULT_SEQUENCE_MINUTES`.

        Returns:
            The :class:`~moodrec.models.Recommendation`.
        """
        if minutes is None:
            minutes = config.DEFAULT_SEQUENCE_MINUTES

        start_ms = time.monotonic() * 1000
        try:
            recommendation = self._engine.recommend(user_input, user_id, minutes)
            if user_id:
                self._record_behavior(user_id, user_input, recommendation.prediction)
        finally:
            elapsed_ms = time.monotonic() * 1000 - start_ms
            if elapsed_ms > config.SLOW_REQUEST_WARN_MS:
                logger.warning(
                    "get_recommendations for user=%r took %.1fms", user_id, elapsed_ms
                )
            else:
                logger.debug(
                    "get_recommendations for user=%r took %.1fms", user_id, elapsed_ms
                )
        return recommendation

    def predict_mood(self, user_input: UserInput, user_id: str | None = None) -> MoodPrediction:
        """Return only the mood prediction; nothing is recorded."""
        return self._engine.predict_mood(user_input, user_id)

    def user_insights(self, user_id: str) -> dict[str, object]:
        """Summarise what has been learned about *user_id*."""
        return {
            "user_id": user_id,
            "samples": len(self._store.history(user_id)),
            "average_typing_speed": self._store.average_typing_speed(user_id),
            "popular_tags": self._store.popular_tags(user_id),
        }

    @staticmethod
    def health() -> dict[str, str]:
        return {"status": "UP", "service": SERVICE_NAME}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _record_behavior(
        self, user_id: str, user_input: UserInput, prediction: MoodPrediction
    ) -> None:
        sample = BehaviorSample(
            user_id=user_id,
            timestamp=user_input.timestamp,
            mood_counts={prediction.primary_mood: 1},
            tag_counts=dict(Counter(user_input.tags or [])),
            typing_speed=user_input.typing_speed,
        )
        try:
            self._store.record(user_id, sample)
        except Exception:
            logger.exception("Error recording behaviour for user=%r", user_id)
