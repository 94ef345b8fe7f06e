"""Context rules engine: typing speed, hour of day and text heuristics."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from moodrec.models import Mood, UserInput

logger = logging.getLogger(__name__)

# Typing speed thresholds (characters per second)
VERY_SLOW_THRESHOLD = 1.0
SLOW_THRESHOLD = 2.0
FAST_THRESHOLD = 6.0

STUDY_MARKERS = ("study", "studying", "exam", "test")
_MIN_TOKENS = 3
_MAX_EXCLAMATIONS = 2
_LEXICON_THRESHOLD = 0.3

ADJUSTED_MOODS: tuple[str, ...] = (
    Mood.TIRED.value,
    Mood.STRESSED.value,
    Mood.ENERGETIC.value,
    Mood.RELAXED.value,
    Mood.FOCUSED.value,
    Mood.ANXIOUS.value,
)

_TIRED = Mood.TIRED.value
_STRESSED = Mood.STRESSED.value
_ENERGETIC = Mood.ENERGETIC.value
_RELAXED = Mood.RELAXED.value
_FOCUSED = Mood.FOCUSED.value
_ANXIOUS = Mood.ANXIOUS.value


class ContextRulesEngine:
    """Turns request context into six non-negative mood adjustments.

    Rules are independent and additive; every adjustment starts at zero and
    is capped at 1.0 once all rules have run.

    ==========================  ======================================
    Condition                   Adjustment
    ==========================  ======================================
    speed < 1.0                 tired +0.4, stressed +0.2
    1.0 <= speed < 2.0          tired +0.3, focused +0.1
    speed > 6.0                 energetic +0.3, stressed +0.2
    hour in [23, 4)             tired +0.5, stressed +0.2
    hour in [4, 7)              tired +0.4
    hour in [7, 12)             energetic +0.2, focused +0.2
    hour in [12, 17)            focused +0.1
    hour in [17, 23)            relaxed +0.2
    study words in text         focused +0.3, stressed +0.2
    fewer than 3 tokens         tired +0.2
    more than 2 ``!``           energetic +0.2, stressed +0.1
    lexicon stress > 0.3        stressed +0.3, anxious +0.2
    lexicon focus > 0.3         focused +0.3
    lexicon energy > 0.3        energetic +0.3
    ==========================  ======================================
    """

    def apply(
        self, user_input: UserInput, lexicon: Mapping[str, float]
    ) -> dict[str, float]:
        """Return mood adjustments for *user_input*.

        Args:
            user_input: The request context.
            lexicon: Output of :meth:`~moodrec.lexicon.LexiconScorer.score`.

        Returns:
            Dict keyed by :data:`ADJUSTED_MOODS`, values in [0, 1].
        """
        adjustments = dict.fromkeys(ADJUSTED_MOODS, 0.0)

        self._apply_typing_speed(adjustments, user_input.typing_speed)
        self._apply_hour(adjustments, user_input.hour_of_day)
        self._apply_text(adjustments, (user_input.text or "").lower())

        if lexicon.get("stress", 0.0) > _LEXICON_THRESHOLD:
            adjustments[_STRESSED] += 0.3
            adjustments[_ANXIOUS] += 0.2
        if lexicon.get("focus", 0.0) > _LEXICON_THRESHOLD:
            adjustments[_FOCUSED] += 0.3
        if lexicon.get("energy", 0.0) > _LEXICON_THRESHOLD:
            adjustments[_ENERGETIC] += 0.3

        adjustments = {mood: min(1.0, value) for mood, value in adjustments.items()}
        logger.debug("Rule adjustments: %s", adjustments)
        return adjustments

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_typing_speed(adjustments: dict[str, float], speed: float) -> None:
        if speed < VERY_SLOW_THRESHOLD:
            adjustments[_TIRED] += 0.4
            adjustments[_STRESSED] += 0.2
        elif speed < SLOW_THRESHOLD:
            adjustments[_TIRED] += 0.3
            adjustments[_FOCUSED] += 0.1
        elif speed > FAST_THRESHOLD:
            adjustments[_ENERGETIC] += 0.3
            adjustments[_STRESSED] += 0.2

    @staticmethod
    def _apply_hour(adjustments: dict[str, float], hour: int) -> None:
        if hour >= 23 or hour < 4:
            # late night
            adjustments[_TIRED] += 0.5
            adjustments[_STRESSED] += 0.2
        elif hour < 7:
            # early morning
            adjustments[_TIRED] += 0.4
        elif hour < 12:
            adjustments[_ENERGETIC] += 0.2
            adjustments[_FOCUSED] += 0.2
        elif hour < 17:
            adjustments[_FOCUSED] += 0.1
        else:
            # evening, 17-22
            adjustments[_RELAXED] += 0.2

    @staticmethod
    def _apply_text(adjustments: dict[str, float], text: str) -> None:
        if any(marker in text for marker in STUDY_MARKERS):
            adjustments[_FOCUSED] += 0.3
            adjustments[_STRESSED] += 0.2

        if len(text.split()) < _MIN_TOKENS:
            adjustments[_TIRED] += 0.2

        if text.count("!") > _MAX_EXCLAMATIONS:
            adjustments[_ENERGETIC] += 0.2
            adjustments[_STRESSED] += 0.1
