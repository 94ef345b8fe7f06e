"""Application configuration driven by environment variables.

All settings have sensible defaults for local development.
"""

import os

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: str = os.getenv("MOODREC_LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Behaviour history
# ---------------------------------------------------------------------------

# Samples kept per user; the oldest sample is evicted first.
HISTORY_LIMIT: int = int(os.getenv("MOODREC_HISTORY_LIMIT", "100"))

# Samples within this many hours of the request hour feed the learned
# pattern.  Plain absolute difference: 23 and 1 are four hours apart.
LEARNING_WINDOW_HOURS: int = int(os.getenv("MOODREC_LEARNING_WINDOW_HOURS", "2"))

# Share of the learned pattern in the blended distribution.
LEARNED_PATTERN_WEIGHT: float = float(
    os.getenv("MOODREC_LEARNED_PATTERN_WEIGHT", "0.3")
)

# Reported when a user has never supplied a typing speed.
DEFAULT_TYPING_SPEED: float = 3.0

# ---------------------------------------------------------------------------
# Recommendation
# ---------------------------------------------------------------------------

MAX_CATEGORIES: int = int(os.getenv("MOODREC_MAX_CATEGORIES", "4"))

DEFAULT_SEQUENCE_MINUTES: int = int(
    os.getenv("MOODREC_DEFAULT_SEQUENCE_MINUTES", "30")
)

# Items taken from the lofi pool when no category could be ranked.
FALLBACK_SEQUENCE_SIZE: int = 5

# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

SLOW_REQUEST_WARN_MS: float = float(os.getenv("MOODREC_SLOW_REQUEST_WARN_MS", "50"))
