"""Core domain dataclasses shared across all moodrec modules."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any


class Mood(str, Enum):
    """Emotional states the predictor can emit.

    Declaration order is the tie-break priority used when two moods share
    the highest score.
    """

    TIRED = "tired"
    STRESSED = "stressed"
    ENERGETIC = "energetic"
    RELAXED = "relaxed"
    FOCUSED = "focused"
    ANXIOUS = "anxious"
    HAPPY = "happy"
    SAD = "sad"


# Mood name -> score in [0, 1].  Values need not sum to 1.
MoodDistribution = dict[str, float]


@dataclass(frozen=True)
class MoodPrediction:
    """Result of a single mood inference.

    Attributes:
        primary_mood: The distribution key with the highest score.
        confidence: The score at :attr:`primary_mood` (``0.0`` if absent).
        distribution: Score per mood name.
    """

    primary_mood: str
    confidence: float
    distribution: MoodDistribution

    def value_of(self, mood: str) -> float:
        return self.distribution.get(mood, 0.0)


@dataclass(frozen=True)
class Category:
    """A content category in the catalogue.

    Catalogue entries carry ``relevance_score == 0.0``; the ranker hands out
    per-request copies via :meth:`with_relevance`.

    Attributes:
        key: Stable lookup key (e.g. ``"lofi"``).
        name: Display name (e.g. ``"Lo-Fi Beats"``).
        description: One-line description.
        relevance_score: Computed suitability in [0, 1].
        example_artists: Representative creators.
        example_items: Representative item titles.
    """

    key: str
    name: str
    description: str
    relevance_score: float = 0.0
    example_artists: tuple[str, ...] = ()
    example_items: tuple[str, ...] = ()

    def with_relevance(self, score: float) -> Category:
        return replace(self, relevance_score=score)


@dataclass(frozen=True)
class ContentItem:
    """A single playable item."""

    title: str
    creator: str
    genre: str
    duration_seconds: int
    mood: str
    intensity: float


@dataclass(frozen=True)
class ContentSequence:
    """An ordered, duration-bounded selection of items for one request."""

    name: str
    mood: str
    items: tuple[ContentItem, ...]
    total_duration_seconds: int


@dataclass(frozen=True)
class BehaviorSample:
    """One observation of a user, appended to their history.

    Attributes:
        user_id: The observed user.
        timestamp: When the observation happened; its hour drives the
            learning window.
        mood_counts: Mood name -> count for this observation.
        tag_counts: Tag -> count for this observation.
        typing_speed: Characters per second, or ``None`` if unknown.
    """

    user_id: str
    timestamp: datetime
    mood_counts: dict[str, int] = field(default_factory=dict)
    tag_counts: dict[str, int] = field(default_factory=dict)
    typing_speed: float | None = None


@dataclass
class UserInput:
    """Already-validated request input.

    Attributes:
        text: Free-form text typed by the user (may be empty).
        typing_speed: Characters per second.
        timestamp: When the text was typed.
        tags: Optional recent search tags.
    """

    text: str
    typing_speed: float
    timestamp: datetime
    tags: list[str] = field(default_factory=list)

    @property
    def hour_of_day(self) -> int:
        return self.timestamp.hour


@dataclass
class Recommendation:
    """Everything returned for one recommendation request."""

    prediction: MoodPrediction
    categories: list[Category]
    sequence: ContentSequence
    rationale: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
