"""Recommendation engine: runs predictor, ranker and assembler end to end."""

from __future__ import annotations

import logging

import config
from moodrec.models import Category, MoodPrediction, Recommendation, UserInput
from moodrec.predictor import MoodPredictor
from moodrec.ranker import CategoryRanker
from moodrec.sequence import SequenceAssembler

logger = logging.getLogger(__name__)

_RATIONALE_FRAGMENTS = {
    "tired": "relaxing and unwinding after a long day.",
    "stressed": "calming your mind and reducing anxiety.",
    "energetic": "keeping your energy levels high and staying motivated.",
    "focused": "maintaining concentration and productivity.",
    "relaxed": "maintaining a peaceful and calm state.",
    "anxious": "soothing your nerves and promoting relaxation.",
}
_DEFAULT_FRAGMENT = "enhancing your current mood."


class RecommendationEngine:
    """Orchestrates the inference-and-recommendation pipeline.

    ``text + context -> MoodPredictor -> CategoryRanker -> SequenceAssembler``,
    followed by a one-paragraph rationale.  The engine never writes to the
    behaviour store; recording observations is left to
    :class:`~moodrec.service.RecommendationService`.

    Args:
        predictor: The :class:`~moodrec.predictor.MoodPredictor`.
        ranker: The :class:`~moodrec.ranker.CategoryRanker`.
        assembler: The :class:`~moodrec.sequence.SequenceAssembler`.
    """

    def __init__(
        self,
        predictor: MoodPredictor,
        ranker: CategoryRanker,
        assembler: SequenceAssembler,
    ) -> None:
        self._predictor = predictor
        self._ranker = ranker
        self._assembler = assembler

    def predict_mood(self, user_input: UserInput, user_id: str | None = None) -> MoodPrediction:
        return self._predictor.predict(user_input, user_id)

    def recommend(
        self,
        user_input: UserInput,
        user_id: str | None = None,
        minutes: int = config.DEFAULT_SEQUENCE_MINUTES,
    ) -> Recommendation:
        """Return the full recommendation for one request.

        Args:
            user_input: Validated request input.
            user_id: Optional user identity; enables history blending.
            minutes: Target sequence duration in whole minutes.

        Returns:
            A :class:`~moodrec.models.Recommendation`.
        """
        prediction = self._predictor.predict(user_input, user_id)
        categories = self._ranker.rank(prediction)
        sequence = self._assembler.assemble(prediction, categories, minutes)
        rationale = build_rationale(prediction, categories)
        logger.debug(
            "Recommended %s for mood %s",
            [c.key for c in categories],
            prediction.primary_mood,
        )
        return Recommendation(
            prediction=prediction,
            categories=categories,
            sequence=sequence,
            rationale=rationale,
        )


def build_rationale(prediction: MoodPrediction, categories: list[Category]) -> str:
    """Explain the recommendation in one paragraph.

    Args:
        prediction: The mood prediction.
        categories: Ranked categories; the first one is named.

    Returns:
        The rationale text.
    """
    mood = prediction.primary_mood
    parts = [
        f"Based on your input, we detected a {mood} mood "
        f"(confidence: {prediction.confidence * 100:.0f}%). "
    ]
    if categories:
        fragment = _RATIONALE_FRAGMENTS.get(mood, _DEFAULT_FRAGMENT)
        parts.append(f"We recommend {categories[0].name} as it's perfect for {fragment}")
    return "".join(parts)
