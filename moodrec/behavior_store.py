"""Behaviour store: bounded per-user sample history and windowed aggregates."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Mapping

import config
from moodrec.models import BehaviorSample, Mood

logger = logging.getLogger(__name__)

PATTERN_MOODS: tuple[str, ...] = (
    Mood.TIRED.value,
    Mood.STRESSED.value,
    Mood.ENERGETIC.value,
    Mood.RELAXED.value,
    Mood.FOCUSED.value,
)


class _UserHistory:
    """One user's samples, guarded by its own lock."""

    __slots__ = ("lock", "samples")

    def __init__(self, limit: int) -> None:
        self.lock = threading.Lock()
        self.samples: deque[BehaviorSample] = deque(maxlen=limit)


class BehaviorStore:
    """Thread-safe in-memory store of behaviour samples, partitioned by user.

    Each user owns an independent bounded history with its own lock, so
    writers for different users never contend.  The store-wide lock is held
    only while a user's partition is looked up or created.

    Appending to a full history evicts the oldest sample in the same locked
    step, and readers copy the history under that lock, so no reader sees a
    half-applied append.

    Args:
        history_limit: Samples kept per user.
        window_hours: Half-width of the hour-of-day window used by
            :meth:`learned_pattern`.
        learned_weight: Share of the learned pattern in
            :meth:`adjust_with_learning`.
    """

    def __init__(
        self,
        history_limit: int = config.HISTORY_LIMIT,
        window_hours: int = config.LEARNING_WINDOW_HOURS,
        learned_weight: float = config.LEARNED_PATTERN_WEIGHT,
    ) -> None:
        self._history_limit = history_limit
        self._window_hours = window_hours
        self._learned_weight = learned_weight
        self._lock = threading.Lock()
        self._histories: dict[str, _UserHistory] = {}

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record(self, user_id: str, sample: BehaviorSample) -> None:
        """Append *sample* to *user_id*'s history, evicting the oldest if full.

        Args:
            user_id: The observed user.
            sample: The observation; never mutated after recording.
        """
        history = self._get_or_create(user_id)
        with history.lock:
            history.samples.append(sample)
            size = len(history.samples)
        logger.debug("Recorded sample for user %r (history size %d).", user_id, size)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def history(self, user_id: str) -> tuple[BehaviorSample, ...]:
        """Return a snapshot of *user_id*'s samples, oldest first."""
        history = self._get(user_id)
        if history is None:
            return ()
        with history.lock:
            return tuple(history.samples)

    def user_ids(self) -> list[str]:
        with self._lock:
            return list(self._histories)

    def learned_pattern(self, user_id: str, hour: int) -> dict[str, float]:
        """Return mood probabilities observed around *hour* for *user_id*.

        Samples whose hour is within ``window_hours`` of *hour* contribute
        their mood counts; each mood's share of the summed counts becomes its
        probability.  The distance is a plain absolute difference, so hour
        23 and hour 1 are not neighbours.

        Args:
            user_id: The user whose history is aggregated.
            hour: Hour of day, 0-23.

        Returns:
            Dict with at least the :data:`PATTERN_MOODS` keys.  All zeros
            when the user has no samples in the window.
        """
        pattern = dict.fromkeys(PATTERN_MOODS, 0.0)

        in_window = [
            sample
            for sample in self.history(user_id)
            if abs(sample.timestamp.hour - hour) <= self._window_hours
        ]
        if not in_window:
            return pattern

        mood_totals: dict[str, int] = {}
        for sample in in_window:
            for mood, count in sample.mood_counts.items():
                key = str(mood.value if isinstance(mood, Mood) else mood).lower()
                mood_totals[key] = mood_totals.get(key, 0) + count

        total = sum(mood_totals.values())
        if total > 0:
            for mood, count in mood_totals.items():
                pattern[mood] = count / total
        return pattern

    def average_typing_speed(self, user_id: str) -> float:
        """Return the mean of all recorded typing speeds.

        Returns:
            The mean, or :data:`config.DEFAULT_TYPING_SPEED` if the user has
            never supplied one.
        """
        speeds = [
            sample.typing_speed
            for sample in self.history(user_id)
            if sample.typing_speed is not None
        ]
        if not speeds:
            return config.DEFAULT_TYPING_SPEED
        return sum(speeds) / len(speeds)

    def popular_tags(self, user_id: str) -> dict[str, int]:
        """Return tag counts summed over the user's full history."""
        totals: dict[str, int] = {}
        for sample in self.history(user_id):
            for tag, count in sample.tag_counts.items():
                totals[tag] = totals.get(tag, 0) + count
        return totals

    def adjust_with_learning(
        self, user_id: str, hour: int, base: Mapping[str, float]
    ) -> dict[str, float]:
        """Blend *base* with the learned pattern for *user_id* at *hour*.

        Every key present in either mapping gets
        ``base * (1 - w) + learned * w`` with ``w = learned_weight``;
        missing values count as zero.
        """
        learned = self.learned_pattern(user_id, hour)
        current_weight = 1.0 - self._learned_weight
        moods = list(base) + [mood for mood in learned if mood not in base]
        return {
            mood: base.get(mood, 0.0) * current_weight
            + learned.get(mood, 0.0) * self._learned_weight
            for mood in moods
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get(self, user_id: str) -> _UserHistory | None:
        with self._lock:
            return self._histories.get(user_id)

    def _get_or_create(self, user_id: str) -> _UserHistory:
        with self._lock:
            history = self._histories.get(user_id)
            if history is None:
                history = _UserHistory(self._history_limit)
                self._histories[user_id] = history
            return history
