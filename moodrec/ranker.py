"""Category ranker: maps a mood prediction to scored content categories."""

from __future__ import annotations

import logging

import config
from moodrec.catalogue import ContentCatalogue
from moodrec.models import Category, MoodPrediction

logger = logging.getLogger(__name__)


class CategoryRanker:
    """Scores the candidate categories for a prediction's primary mood.

    ``relevance = min(1.0, affinity(category) * (0.5 + primary_value * 0.5))``
    where *primary_value* is the distribution's value at the primary mood.
    Candidates come from the catalogue's mood table; categories the
    catalogue does not know are skipped.

    Args:
        catalogue: Read-only catalogue supplying candidates and affinities.
        max_categories: Upper bound on returned categories.
    """

    def __init__(
        self, catalogue: ContentCatalogue, max_categories: int = config.MAX_CATEGORIES
    ) -> None:
        self._catalogue = catalogue
        self._max_categories = max_categories

    def rank(self, prediction: MoodPrediction) -> list[Category]:
        """Return scored category copies, best first.

        Ties keep the candidate-list order.

        Args:
            prediction: The mood prediction to rank for.

        Returns:
            At most ``max_categories`` :class:`~moodrec.models.Category`
            copies carrying their ``relevance_score``.
        """
        mood_factor = 0.5 + prediction.value_of(prediction.primary_mood) * 0.5

        scored: list[Category] = []
        for key in self._catalogue.candidates_for(prediction.primary_mood):
            template = self._catalogue.get_category(key)
            if template is None:
                logger.warning("Candidate category %r missing from catalogue.", key)
                continue
            relevance = min(1.0, self._catalogue.affinity(key) * mood_factor)
            scored.append(template.with_relevance(relevance))

        ranked = sorted(scored, key=lambda c: c.relevance_score, reverse=True)
        return ranked[: self._max_categories]
