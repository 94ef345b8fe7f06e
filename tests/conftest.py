"""Shared pytest fixtures for all moodrec tests."""

from __future__ import annotations

import random
from datetime import datetime

import pytest

from moodrec.behavior_store import BehaviorStore
from moodrec.catalogue import ContentCatalogue, default_catalogue
from moodrec.lexicon import LexiconScorer
from moodrec.models import BehaviorSample, MoodPrediction, UserInput
from moodrec.predictor import MoodPredictor
from moodrec.rules import ContextRulesEngine


def at_hour(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, 15, hour, minute, 0)


def make_input(
    text: str = "just a normal sentence here",
    typing_speed: float = 3.0,
    hour: int = 14,
    tags: list[str] | None = None,
) -> UserInput:
    """Return a UserInput that fires no typing band and only the afternoon rule."""
    return UserInput(
        text=text, typing_speed=typing_speed, timestamp=at_hour(hour), tags=tags or []
    )


def make_sample(
    user_id: str = "u1",
    hour: int = 14,
    mood: str = "focused",
    tags: dict[str, int] | None = None,
    typing_speed: float | None = None,
) -> BehaviorSample:
    return BehaviorSample(
        user_id=user_id,
        timestamp=at_hour(hour),
        mood_counts={mood: 1},
        tag_counts=tags or {},
        typing_speed=typing_speed,
    )


def make_prediction(primary: str, value: float) -> MoodPrediction:
    return MoodPrediction(primary_mood=primary, confidence=value, distribution={primary: value})


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalogue() -> ContentCatalogue:
    return default_catalogue()


@pytest.fixture
def store() -> BehaviorStore:
    return BehaviorStore(history_limit=100, window_hours=2, learned_weight=0.3)


@pytest.fixture
def predictor(store) -> MoodPredictor:
    return MoodPredictor(LexiconScorer(), ContextRulesEngine(), store)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
