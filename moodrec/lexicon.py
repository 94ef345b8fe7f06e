"""Lexicon scorer: keyword-membership counting over free text."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

POSITIVE_WORDS = frozenset({
    "happy", "great", "awesome", "amazing", "love", "excited", "good", "nice",
    "wonderful", "fantastic", "excellent", "perfect", "best", "yeah", "yes",
})

NEGATIVE_WORDS = frozenset({
    "sad", "bad", "hate", "terrible", "awful", "worst", "angry", "frustrated",
    "tired", "exhausted", "stressed", "anxious", "worried", "depressed", "sick",
})

STRESS_WORDS = frozenset({
    "stress", "stressed", "pressure", "deadline", "exam", "test", "work", "busy",
    "overwhelmed", "fr", "fuck", "damn", "ugh", "argh",
})

FOCUS_WORDS = frozenset({
    "study", "studying", "focus", "concentrate", "work", "homework", "assignment",
    "reading", "learning", "exam", "test",
})

# "let's" loses its apostrophe when tokens are stripped, so it never matches.
ENERGY_WORDS = frozenset({
    "energy", "energetic", "pumped", "ready", "go", "let's", "party", "dance",
    "workout", "exercise", "run", "gym",
})

# (signal, keyword set, score per matched token)
_SIGNALS = (
    ("positive", POSITIVE_WORDS, 0.3),
    ("negative", NEGATIVE_WORDS, 0.3),
    ("stress", STRESS_WORDS, 0.4),
    ("focus", FOCUS_WORDS, 0.4),
    ("energy", ENERGY_WORDS, 0.4),
)

SIGNAL_NAMES: tuple[str, ...] = tuple(name for name, _, _ in _SIGNALS)

INTENSIFIERS = ("very", "really", "so ", "extremely")
_INTENSIFIER_FACTOR = 1.2

NEGATIONS = ("not ", "no ", "don't", "can't")
_NEGATION_BOOST = 0.2

_NON_ALPHA = re.compile(r"[^a-z]")


class LexiconScorer:
    """Maps raw text to five independent signals in [0, 1].

    Signals are ``positive``, ``negative``, ``stress``, ``focus`` and
    ``energy``.  Each is ``min(1.0, matches * weight)`` where a match is a
    whitespace token (lower-cased, non-letters stripped) found in the
    signal's keyword set.

    Two whole-text adjustments follow:

    * an intensifier anywhere multiplies every signal by 1.2.  The result is
      **not** re-clamped, so values up to 1.2 reach callers.
    * a negation marker adds 0.2 to ``negative``, clamped to 1.0.

    The scorer is stateless and safe to share between threads.
    """

    def score(self, text: str | None) -> dict[str, float]:
        """Return the five lexicon signals for *text*.

        Args:
            text: Free-form text.  ``None``, empty and blank text all score
                zero.

        Returns:
            Dict keyed by :data:`SIGNAL_NAMES`.
        """
        scores = dict.fromkeys(SIGNAL_NAMES, 0.0)
        if text is None or not text.strip():
            return scores

        lower = text.lower()
        tokens = [_NON_ALPHA.sub("", word) for word in lower.split()]

        for name, words, weight in _SIGNALS:
            matches = sum(1 for token in tokens if token in words)
            scores[name] = min(1.0, matches * weight)

        if any(marker in lower for marker in INTENSIFIERS):
            scores = {name: value * _INTENSIFIER_FACTOR for name, value in scores.items()}

        if any(marker in lower for marker in NEGATIONS):
            scores["negative"] = min(1.0, scores["negative"] + _NEGATION_BOOST)

        logger.debug("Lexicon scores for %d tokens: %s", len(tokens), scores)
        return scores
