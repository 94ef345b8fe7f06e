"""Tests for moodrec.behavior_store.BehaviorStore.

The learned pattern feeds straight into mood prediction, so the window and
eviction behaviour are checked closely here.
"""

from __future__ import annotations

import threading

import pytest

from conftest import make_sample
from moodrec.behavior_store import PATTERN_MOODS, BehaviorStore


# ---------------------------------------------------------------------------
# Recording and eviction
# ---------------------------------------------------------------------------


class TestRecord:
    def test_appends_in_observation_order(self, store) -> None:
        first = make_sample(mood="tired")
        second = make_sample(mood="focused")
        store.record("u1", first)
        store.record("u1", second)
        assert store.history("u1") == (first, second)

    def test_users_are_independent(self, store) -> None:
        store.record("u1", make_sample(user_id="u1"))
        assert store.history("u2") == ()
        assert store.user_ids() == ["u1"]

    def test_history_is_a_snapshot(self, store) -> None:
        store.record("u1", make_sample())
        snapshot = store.history("u1")
        store.record("u1", make_sample())
        assert len(snapshot) == 1

    def test_oldest_evicted_first(self) -> None:
        store = BehaviorStore(history_limit=3)
        samples = [make_sample(hour=h) for h in range(5)]
        for sample in samples:
            store.record("u1", sample)
        assert store.history("u1") == tuple(samples[2:])

    def test_pattern_reflects_only_most_recent_hundred(self, store) -> None:
        for _ in range(50):
            store.record("u1", make_sample(mood="tired"))
        for _ in range(100):
            store.record("u1", make_sample(mood="energetic"))
        assert len(store.history("u1")) == 100
        pattern = store.learned_pattern("u1", 14)
        assert pattern["tired"] == 0.0
        assert pattern["energetic"] == pytest.approx(1.0)


# ---------------------------------------------------------------------------
# Learned pattern
# ---------------------------------------------------------------------------


class TestLearnedPattern:
    def test_unknown_user_is_all_zero(self, store) -> None:
        assert store.learned_pattern("nobody", 10) == dict.fromkeys(PATTERN_MOODS, 0.0)

    def test_probabilities_from_counts(self, store) -> None:
        store.record("u1", make_sample(hour=10, mood="focused"))
        store.record("u1", make_sample(hour=11, mood="focused"))
        store.record("u1", make_sample(hour=9, mood="tired"))
        store.record("u1", make_sample(hour=12, mood="stressed"))
        pattern = store.learned_pattern("u1", 10)
        assert pattern["focused"] == pytest.approx(0.5)
        assert pattern["tired"] == pytest.approx(0.25)
        assert pattern["stressed"] == pytest.approx(0.25)
        assert pattern["relaxed"] == 0.0

    def test_window_is_plus_minus_two_hours(self, store) -> None:
        store.record("u1", make_sample(hour=8, mood="tired"))
        store.record("u1", make_sample(hour=12, mood="tired"))
        store.record("u1", make_sample(hour=13, mood="energetic"))
        store.record("u1", make_sample(hour=7, mood="energetic"))
        pattern = store.learned_pattern("u1", 10)
        assert pattern["tired"] == pytest.approx(1.0)
        assert pattern["energetic"] == 0.0

    def test_no_sample_in_window_is_all_zero(self, store) -> None:
        store.record("u1", make_sample(hour=20, mood="relaxed"))
        assert store.learned_pattern("u1", 8) == dict.fromkeys(PATTERN_MOODS, 0.0)

    def test_midnight_does_not_wrap(self, store) -> None:
        store.record("u1", make_sample(hour=1, mood="tired"))
        assert store.learned_pattern("u1", 23)["tired"] == 0.0

    def test_mood_keys_are_lowercased(self, store) -> None:
        store.record("u1", make_sample(mood="TIRED"))
        assert store.learned_pattern("u1", 14)["tired"] == pytest.approx(1.0)

    def test_moods_outside_defaults_are_kept(self, store) -> None:
        store.record("u1", make_sample(mood="anxious"))
        store.record("u1", make_sample(mood="relaxed"))
        pattern = store.learned_pattern("u1", 14)
        assert pattern["anxious"] == pytest.approx(0.5)
        assert pattern["relaxed"] == pytest.approx(0.5)


class TestAdjustWithLearning:
    def test_no_history_scales_base(self, store) -> None:
        blended = store.adjust_with_learning("u1", 10, {"tired": 1.0, "anxious": 0.5})
        assert blended["tired"] == pytest.approx(0.7)
        assert blended["anxious"] == pytest.approx(0.35)
        assert blended["relaxed"] == 0.0

    def test_union_of_keys(self, store) -> None:
        store.record("u1", make_sample(hour=10, mood="relaxed"))
        blended = store.adjust_with_learning("u1", 10, {"tired": 0.5})
        assert blended["tired"] == pytest.approx(0.35)
        assert blended["relaxed"] == pytest.approx(0.3)


# ---------------------------------------------------------------------------
# Other aggregates
# ---------------------------------------------------------------------------


class TestTypingSpeed:
    def test_default_without_history(self, store) -> None:
        assert store.average_typing_speed("u1") == pytest.approx(3.0)

    def test_default_when_no_speed_recorded(self, store) -> None:
        store.record("u1", make_sample(typing_speed=None))
        assert store.average_typing_speed("u1") == pytest.approx(3.0)

    def test_mean_ignores_missing(self, store) -> None:
        store.record("u1", make_sample(typing_speed=2.0))
        store.record("u1", make_sample(typing_speed=None))
        store.record("u1", make_sample(typing_speed=5.0))
        assert store.average_typing_speed("u1") == pytest.approx(3.5)


class TestPopularTags:
    def test_sums_over_full_history(self, store) -> None:
        store.record("u1", make_sample(hour=1, tags={"study": 2, "focus": 1}))
        store.record("u1", make_sample(hour=20, tags={"study": 1}))
        assert store.popular_tags("u1") == {"study": 3, "focus": 1}

    def test_empty_for_unknown_user(self, store) -> None:
        assert store.popular_tags("nobody") == {}


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrency:
    def test_concurrent_writers_same_user(self) -> None:
        store = BehaviorStore(history_limit=100)
        n_threads, per_thread = 8, 50

        def writer(index: int) -> None:
            for i in range(per_thread):
                store.record("shared", make_sample(user_id="shared", tags={f"t{index}": 1}))
                store.learned_pattern("shared", 14)

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store.history("shared")) == 100

    def test_concurrent_writers_many_users(self) -> None:
        store = BehaviorStore(history_limit=100)

        def writer(user_id: str) -> None:
            for hour in range(20):
                store.record(user_id, make_sample(user_id=user_id, hour=hour))

        threads = [
            threading.Thread(target=writer, args=(f"u{i}",)) for i in range(10)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(store.user_ids()) == sorted(f"u{i}" for i in range(10))
        for i in range(10):
            hours = [s.timestamp.hour for s in store.history(f"u{i}")]
            assert hours == list(range(20))
