"""Sequence assembler: greedy duration-bounded item selection."""

from __future__ import annotations

import logging
import random

import config
from moodrec.catalogue import FALLBACK_CATEGORY, ContentCatalogue
from moodrec.models import Category, ContentItem, ContentSequence, MoodPrediction

logger = logging.getLogger(__name__)

SEQUENCE_NAMES = {
    "tired": "Late Night Chill",
    "stressed": "Stress Relief",
    "energetic": "Energy Boost",
    "relaxed": "Relaxation Station",
    "focused": "Deep Focus",
    "anxious": "Calm & Collected",
}
GENERIC_SEQUENCE_NAME = "Mood Playlist"
FALLBACK_SEQUENCE_NAME = "Default Playlist"


class SequenceAssembler:
    """Fills a target duration from the ranked categories' item pools.

    Categories are visited in rank order and each pool in catalogue order.
    An item is appended while the running total is below the target, so the
    last item may overshoot; the sequence only falls short when every pool
    is exhausted.  The chosen items are shuffled before the sequence is
    frozen.

    Args:
        catalogue: Read-only catalogue supplying item pools.
        rng: Source of randomness for the final shuffle.
    """

    def __init__(self, catalogue: ContentCatalogue, rng: random.Random | None = None) -> None:
        self._catalogue = catalogue
        self._rng = rng or random.Random()

    def assemble(
        self,
        prediction: MoodPrediction,
        categories: list[Category],
        minutes: int,
    ) -> ContentSequence:
        """Build the content sequence for *prediction*.

        Args:
            prediction: The mood prediction the sequence is for.
            categories: Ranked categories, best first.
            minutes: Target duration in whole minutes.

        Returns:
            A frozen :class:`~moodrec.models.ContentSequence`.  Empty
            *categories* yield the fallback sequence.
        """
        mood = prediction.primary_mood
        if not categories:
            return self._fallback_sequence(mood)

        target = minutes * 60
        total = 0
        chosen: list[ContentItem] = []

        for category in categories:
            if total >= target:
                break
            for item in self._catalogue.get_items(category.key):
                if total >= target:
                    break
                chosen.append(item)
                total += item.duration_seconds

        self._rng.shuffle(chosen)
        logger.debug(
            "Assembled %d items (%ds of %ds target) for mood %s.",
            len(chosen),
            total,
            target,
            mood,
        )
        return ContentSequence(
            name=SEQUENCE_NAMES.get(mood, GENERIC_SEQUENCE_NAME),
            mood=mood,
            items=tuple(chosen),
            total_duration_seconds=sum(item.duration_seconds for item in chosen),
        )

    def _fallback_sequence(self, mood: str) -> ContentSequence:
        items = self._catalogue.get_items(FALLBACK_CATEGORY)[: config.FALLBACK_SEQUENCE_SIZE]
        logger.info("No categories ranked for mood %s; using fallback sequence.", mood)
        return ContentSequence(
            name=FALLBACK_SEQUENCE_NAME,
            mood=mood,
            items=tuple(items),
            total_duration_seconds=sum(item.duration_seconds for item in items),
        )
