"""Entry point: wires all components and answers one request from the shell.

Usage::

    python main.py "studying fr today" [typing_speed] [user_id] [minutes]
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime

import config
from moodrec.behavior_store import BehaviorStore
from moodrec.catalogue import ContentCatalogue, default_catalogue
from moodrec.engine import RecommendationEngine
from moodrec.lexicon import LexiconScorer
from moodrec.models import UserInput
from moodrec.predictor import MoodPredictor
from moodrec.ranker import CategoryRanker
from moodrec.rules import ContextRulesEngine
from moodrec.sequence import SequenceAssembler
from moodrec.service import RecommendationService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_service(
    catalogue: ContentCatalogue,
    behavior_store: BehaviorStore,
) -> RecommendationService:
    """Construct the service with all dependencies wired.

    Args:
        catalogue: The loaded :class:`~moodrec.catalogue.ContentCatalogue`.
        behavior_store: The shared :class:`~moodrec.behavior_store.BehaviorStore`.

    Returns:
        A ready :class:`~moodrec.service.RecommendationService`.
    """
    predictor = MoodPredictor(
        lexicon_scorer=LexiconScorer(),
        rules_engine=ContextRulesEngine(),
        behavior_store=behavior_store,
    )
    engine = RecommendationEngine(
        predictor=predictor,
        ranker=CategoryRanker(catalogue),
        assembler=SequenceAssembler(catalogue),
    )
    return RecommendationService(engine=engine, behavior_store=behavior_store)


def main(argv: list[str] | None = None) -> int:
    """Answer a single request given on the command line and print JSON."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__, file=sys.stderr)
        return 2

    text = args[0]
    typing_speed = float(args[1]) if len(args) > 1 else config.DEFAULT_TYPING_SPEED
    user_id = args[2] if len(args) > 2 else None
    minutes = int(args[3]) if len(args) > 3 else None

    catalogue = default_catalogue()
    logger.info("Catalogue loaded: %d categories.", len(catalogue.get_all_categories()))
    service = build_service(catalogue, BehaviorStore())

    user_input = UserInput(text=text, typing_speed=typing_speed, timestamp=datetime.now())
    recommendation = service.get_recommendations(user_input, user_id, minutes)
    print(json.dumps(recommendation.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
