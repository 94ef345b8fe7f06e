"""Tests for moodrec.engine.RecommendationEngine."""

from __future__ import annotations

import pytest

from conftest import make_input, make_prediction
from moodrec.engine import RecommendationEngine, build_rationale
from moodrec.ranker import CategoryRanker
from moodrec.sequence import SequenceAssembler


@pytest.fixture
def engine(predictor, catalogue, rng) -> RecommendationEngine:
    return RecommendationEngine(
        predictor=predictor,
        ranker=CategoryRanker(catalogue),
        assembler=SequenceAssembler(catalogue, rng=rng),
    )


class TestRecommend:
    def test_late_night_study_session(self, engine) -> None:
        result = engine.recommend(
            make_input(text="studying fr today", typing_speed=1.5, hour=2), minutes=30
        )
        assert result.prediction.primary_mood == "stressed"
        assert [c.key for c in result.categories] == ["lofi", "ambient", "classical", "indie"]
        assert result.sequence.name == "Stress Relief"
        assert result.sequence.total_duration_seconds >= 30 * 60
        assert result.rationale.startswith("Based on your input, we detected a stressed mood")

    def test_energetic_request(self, engine) -> None:
        result = engine.recommend(
            make_input(text="ready for the gym lets go party", typing_speed=7.0, hour=9),
            minutes=10,
        )
        assert result.prediction.primary_mood == "energetic"
        assert [c.key for c in result.categories] == ["electronic", "rock", "hiphop"]
        assert {item.genre for item in result.sequence.items} == {"Electronic"}

    def test_default_duration_is_thirty_minutes(self, engine) -> None:
        result = engine.recommend(make_input())
        assert result.sequence.total_duration_seconds >= 30 * 60

    def test_does_not_write_history(self, engine, store) -> None:
        engine.recommend(make_input(), user_id="u1")
        assert store.history("u1") == ()

    def test_to_dict(self, engine) -> None:
        data = engine.recommend(make_input()).to_dict()
        assert set(data) == {"prediction", "categories", "sequence", "rationale"}
        assert data["prediction"]["primary_mood"] == "focused"


class TestRationale:
    def test_mentions_mood_confidence_and_top_category(self, catalogue) -> None:
        prediction = make_prediction("tired", 0.8)
        categories = CategoryRanker(catalogue).rank(prediction)
        text = build_rationale(prediction, categories)
        assert text == (
            "Based on your input, we detected a tired mood (confidence: 80%). "
            "We recommend Lo-Fi Beats as it's perfect for relaxing and "
            "unwinding after a long day."
        )

    def test_unknown_mood_uses_generic_fragment(self, catalogue) -> None:
        prediction = make_prediction("happy", 0.5)
        text = build_rationale(prediction, [catalogue.get_category("jazz")])
        assert text.endswith("We recommend Jazz as it's perfect for enhancing your current mood.")

    def test_no_categories(self) -> None:
        text = build_rationale(make_prediction("sad", 0.25), [])
        assert text == "Based on your input, we detected a sad mood (confidence: 25%). "
