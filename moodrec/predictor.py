"""Mood predictor: combines lexicon, rules and learned history."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np

from moodrec.behavior_store import BehaviorStore
from moodrec.lexicon import SIGNAL_NAMES, LexiconScorer
from moodrec.models import Mood, MoodDistribution, MoodPrediction, UserInput
from moodrec.rules import ADJUSTED_MOODS, ContextRulesEngine

logger = logging.getLogger(__name__)

DEFAULT_MOOD = Mood.RELAXED.value

_PRIORITY = {mood.value: rank for rank, mood in enumerate(Mood)}

# Contribution of each lexicon signal (columns, SIGNAL_NAMES order) to each
# mood (rows, ADJUSTED_MOODS order).
#                       positive negative stress focus energy
_LEXICON_WEIGHTS = np.array(
    [
        [0.0, 0.3, 0.0, 0.0, 0.0],  # tired
        [0.0, 0.3, 0.7, 0.0, 0.0],  # stressed
        [0.3, 0.0, 0.0, 0.0, 0.7],  # energetic
        [0.5, 0.0, 0.0, 0.0, 0.0],  # relaxed
        [0.0, 0.0, 0.0, 0.7, 0.0],  # focused
        [0.0, 0.0, 0.5, 0.0, 0.0],  # anxious
    ],
    dtype=np.float64,
)


class MoodPredictor:
    """Produces a :class:`~moodrec.models.MoodPrediction` for one request.

    Pipeline:

    1. Score the text with the :class:`~moodrec.lexicon.LexiconScorer`.
    2. Derive rule adjustments with the
       :class:`~moodrec.rules.ContextRulesEngine`.
    3. Add the weighted lexicon signals to the rule adjustments and clip
       every mood to [0, 1].
    4. If a user id is given, blend with that user's learned pattern from
       the :class:`~moodrec.behavior_store.BehaviorStore`.
    5. Pick the highest mood, breaking ties by :class:`~moodrec.models.Mood`
       declaration order.

    The predictor only reads the behaviour store, so repeated calls with the
    same input and no intervening writes return equal predictions.

    Args:
        lexicon_scorer: Text scorer.
        rules_engine: Context rules.
        behavior_store: Source of learned per-user patterns.
    """

    def __init__(
        self,
        lexicon_scorer: LexiconScorer,
        rules_engine: ContextRulesEngine,
        behavior_store: BehaviorStore,
    ) -> None:
        self._lexicon = lexicon_scorer
        self._rules = rules_engine
        self._store = behavior_store

    def predict(self, user_input: UserInput, user_id: str | None = None) -> MoodPrediction:
        """Infer the user's current mood.

        Args:
            user_input: Validated request input.
            user_id: Optional user identity; enables history blending.

        Returns:
            A fresh :class:`~moodrec.models.MoodPrediction`.
        """
        lexicon = self._lexicon.score(user_input.text)
        rules = self._rules.apply(user_input, lexicon)
        distribution = combine_scores(lexicon, rules)

        if user_id:
            distribution = self._store.adjust_with_learning(
                user_id, user_input.hour_of_day, distribution
            )

        primary = primary_mood(distribution)
        confidence = distribution.get(primary, 0.0)
        logger.debug(
            "Predicted %s (confidence %.2f) for user=%r", primary, confidence, user_id
        )
        return MoodPrediction(
            primary_mood=primary, confidence=confidence, distribution=distribution
        )


def combine_scores(
    lexicon: Mapping[str, float], rules: Mapping[str, float]
) -> MoodDistribution:
    """Add weighted lexicon signals to rule adjustments, clipped to [0, 1]."""
    signal_vec = np.array([lexicon.get(name, 0.0) for name in SIGNAL_NAMES], dtype=np.float64)
    rule_vec = np.array([rules.get(mood, 0.0) for mood in ADJUSTED_MOODS], dtype=np.float64)
    combined = np.clip(rule_vec + _LEXICON_WEIGHTS @ signal_vec, 0.0, 1.0)
    return {mood: float(value) for mood, value in zip(ADJUSTED_MOODS, combined)}


def primary_mood(distribution: Mapping[str, float]) -> str:
    """Return the highest-scoring mood in *distribution*.

    Ties go to the mood declared first in :class:`~moodrec.models.Mood`;
    names outside the enum rank after every known mood, alphabetically.
    An empty distribution yields :data:`DEFAULT_MOOD`.
    """
    if not distribution:
        return DEFAULT_MOOD

    def rank(mood: str) -> tuple[float, int, str]:
        return (-distribution[mood], _PRIORITY.get(mood, len(_PRIORITY)), mood)

    return min(distribution, key=rank)
