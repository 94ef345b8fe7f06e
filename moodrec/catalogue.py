"""Content catalogue: read-only category, item and mapping tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from moodrec.models import Category, ContentItem, Mood

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES: tuple[str, ...] = ("lofi", "ambient")
DEFAULT_AFFINITY = 0.5
FALLBACK_CATEGORY = "lofi"


class ContentCatalogue:
    """Immutable lookup tables shared by the ranker and the assembler.

    Built once at process start and never mutated; every mapping is exposed
    through a read-only proxy.

    Args:
        categories: Catalogue category templates.
        items_by_category: Category key -> item pool, in catalogue order.
        mood_candidates: Mood -> ordered candidate category keys.
        affinities: Category key -> base suitability in [0, 1].
    """

    def __init__(
        self,
        categories: Iterable[Category],
        items_by_category: Mapping[str, Iterable[ContentItem]],
        mood_candidates: Mapping[str, Iterable[str]],
        affinities: Mapping[str, float],
    ) -> None:
        self._categories = MappingProxyType({c.key: c for c in categories})
        self._items = MappingProxyType(
            {key: tuple(items) for key, items in items_by_category.items()}
        )
        self._candidates = MappingProxyType(
            {mood: tuple(keys) for mood, keys in mood_candidates.items()}
        )
        self._affinities = MappingProxyType(dict(affinities))

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get_category(self, key: str) -> Category | None:
        """Return the catalogue template for *key*, or ``None`` if unknown."""
        return self._categories.get(key)

    def get_all_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_items(self, key: str) -> tuple[ContentItem, ...]:
        """Return the item pool for *key* in catalogue order.

        Returns:
            A tuple of :class:`~moodrec.models.ContentItem`; empty if the
            category has no pool.
        """
        return self._items.get(key, ())

    def candidates_for(self, mood: str) -> tuple[str, ...]:
        """Return the ordered candidate category keys for *mood*.

        Unknown moods get :data:`DEFAULT_CANDIDATES`.
        """
        return self._candidates.get(mood, DEFAULT_CANDIDATES)

    def affinity(self, key: str) -> float:
        return self._affinities.get(key, DEFAULT_AFFINITY)


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

_CATEGORIES = (
    Category(
        "lofi",
        "Lo-Fi Beats",
        "Chill, relaxed beats perfect for studying and focus",
        example_artists=("Lofi Girl", "ChilledCow", "Jinsang", "Idealism"),
        example_items=("Lofi Hip Hop", "Study Beats", "Chill Vibes", "Focus Music"),
    ),
    Category(
        "electronic",
        "Electronic/EDM",
        "High-energy electronic music for workouts and parties",
        example_artists=("Avicii", "The Chainsmokers", "Calvin Harris", "Martin Garrix"),
        example_items=("Wake Me Up", "Closer", "Summer", "Animals"),
    ),
    Category(
        "jazz",
        "Jazz",
        "Smooth jazz for relaxation and background ambiance",
        example_artists=("Miles Davis", "John Coltrane", "Bill Evans", "Duke Ellington"),
        example_items=("Kind of Blue", "Blue Train", "Waltz for Debby", "Take the A Train"),
    ),
    Category(
        "classical",
        "Classical",
        "Classical music for deep focus and concentration",
        example_artists=("Mozart", "Beethoven", "Bach", "Chopin"),
        example_items=("Eine kleine Nachtmusik", "Moonlight Sonata", "Air on G String", "Nocturne"),
    ),
    Category(
        "ambient",
        "Ambient",
        "Atmospheric sounds for relaxation and meditation",
        example_artists=("Brian Eno", "Aphex Twin", "Boards of Canada", "Tim Hecker"),
        example_items=(
            "Music for Airports",
            "Selected Ambient Works",
            "Geogaddi",
            "Harmony in Ultraviolet",
        ),
    ),
    Category(
        "indie",
        "Indie/Folk",
        "Chill indie and folk music for casual listening",
        example_artists=("Bon Iver", "Fleet Foxes", "Iron & Wine", "Sufjan Stevens"),
        example_items=("Holocene", "White Winter Hymnal", "Naked as We Came", "Chicago"),
    ),
    Category(
        "rock",
        "Rock",
        "Energetic rock music for motivation and energy",
        example_artists=("The Beatles", "Led Zeppelin", "Queen", "AC/DC"),
        example_items=("Hey Jude", "Stairway to Heaven", "Bohemian Rhapsody", "Thunderstruck"),
    ),
    Category(
        "hiphop",
        "Hip-Hop",
        "Hip-hop beats for energy and motivation",
        example_artists=("Kendrick Lamar", "J. Cole", "Drake", "Travis Scott"),
        example_items=("HUMBLE.", "No Role Modelz", "God's Plan", "SICKO MODE"),
    ),
)

_ITEMS = {
    "lofi": (
        ContentItem("Midnight City", "Lofi Girl", "Lo-Fi", 180, "relaxed", 0.3),
        ContentItem("Study Session", "ChilledCow", "Lo-Fi", 200, "focused", 0.2),
        ContentItem("Coffee Break", "Jinsang", "Lo-Fi", 175, "relaxed", 0.25),
        ContentItem("Rainy Day", "Idealism", "Lo-Fi", 190, "calm", 0.2),
        ContentItem("Late Night", "Kupla", "Lo-Fi", 185, "tired", 0.15),
    ),
    "electronic": (
        ContentItem("Wake Me Up", "Avicii", "Electronic", 247, "energetic", 0.9),
        ContentItem("Closer", "The Chainsmokers", "Electronic", 244, "energetic", 0.85),
        ContentItem("Summer", "Calvin Harris", "Electronic", 223, "happy", 0.8),
        ContentItem("Animals", "Martin Garrix", "Electronic", 195, "energetic", 0.95),
        ContentItem("Levels", "Avicii", "Electronic", 202, "energetic", 0.9),
    ),
    "jazz": (
        ContentItem("Kind of Blue", "Miles Davis", "Jazz", 345, "relaxed", 0.4),
        ContentItem("Blue Train", "John Coltrane", "Jazz", 420, "focused", 0.5),
        ContentItem("Waltz for Debby", "Bill Evans", "Jazz", 380, "relaxed", 0.3),
        ContentItem("Take the A Train", "Duke Ellington", "Jazz", 280, "happy", 0.6),
        ContentItem("So What", "Miles Davis", "Jazz", 320, "relaxed", 0.4),
    ),
    "classical": (
        ContentItem("Eine kleine Nachtmusik", "Mozart", "Classical", 360, "focused", 0.5),
        ContentItem("Moonlight Sonata", "Beethoven", "Classical", 900, "relaxed", 0.3),
        ContentItem("Air on G String", "Bach", "Classical", 240, "calm", 0.2),
        ContentItem("Nocturne Op.9 No.2", "Chopin", "Classical", 280, "relaxed", 0.25),
        ContentItem("Clair de Lune", "Debussy", "Classical", 300, "calm", 0.2),
    ),
    "ambient": (
        ContentItem("Music for Airports", "Brian Eno", "Ambient", 1200, "calm", 0.1),
        ContentItem("Selected Ambient Works", "Aphex Twin", "Ambient", 420, "relaxed", 0.15),
        ContentItem("Geogaddi", "Boards of Canada", "Ambient", 380, "calm", 0.2),
        ContentItem("Harmony in Ultraviolet", "Tim Hecker", "Ambient", 450, "relaxed", 0.15),
        ContentItem("Disintegration Loops", "William Basinski", "Ambient", 3600, "calm", 0.1),
    ),
    "indie": (
        ContentItem("Holocene", "Bon Iver", "Indie", 320, "relaxed", 0.4),
        ContentItem("White Winter Hymnal", "Fleet Foxes", "Indie", 180, "calm", 0.3),
        ContentItem("Naked as We Came", "Iron & Wine", "Indie", 200, "relaxed", 0.35),
        ContentItem("Chicago", "Sufjan Stevens", "Indie", 380, "happy", 0.5),
        ContentItem("Skinny Love", "Bon Iver", "Indie", 240, "sad", 0.3),
    ),
    "rock": (
        ContentItem("Hey Jude", "The Beatles", "Rock", 431, "happy", 0.7),
        ContentItem("Stairway to Heaven", "Led Zeppelin", "Rock", 482, "energetic", 0.8),
        ContentItem("Bohemian Rhapsody", "Queen", "Rock", 355, "energetic", 0.85),
        ContentItem("Thunderstruck", "AC/DC", "Rock", 292, "energetic", 0.95),
        ContentItem("Sweet Child O' Mine", "Guns N' Roses", "Rock", 356, "happy", 0.75),
    ),
    "hiphop": (
        ContentItem("HUMBLE.", "Kendrick Lamar", "Hip-Hop", 177, "energetic", 0.9),
        ContentItem("No Role Modelz", "J. Cole", "Hip-Hop", 289, "focused", 0.7),
        ContentItem("God's Plan", "Drake", "Hip-Hop", 198, "happy", 0.8),
        ContentItem("SICKO MODE", "Travis Scott", "Hip-Hop", 312, "energetic", 0.95),
        ContentItem("Money Trees", "Kendrick Lamar", "Hip-Hop", 386, "focused", 0.75),
    ),
}

_MOOD_CANDIDATES = {
    Mood.TIRED.value: ("lofi", "ambient", "jazz", "classical"),
    Mood.STRESSED.value: ("lofi", "ambient", "classical", "indie"),
    Mood.ENERGETIC.value: ("electronic", "rock", "hiphop"),
    Mood.RELAXED.value: ("jazz", "ambient", "indie", "lofi"),
    Mood.FOCUSED.value: ("classical", "lofi", "ambient", "jazz"),
    Mood.ANXIOUS.value: ("ambient", "classical", "lofi", "jazz"),
}

_AFFINITIES = {
    "lofi": 0.9,
    "ambient": 0.85,
    "classical": 0.8,
    "jazz": 0.75,
    "electronic": 0.9,
    "rock": 0.85,
    "hiphop": 0.8,
    "indie": 0.7,
}


def default_catalogue() -> ContentCatalogue:
    """Build the built-in catalogue of eight music categories."""
    catalogue = ContentCatalogue(_CATEGORIES, _ITEMS, _MOOD_CANDIDATES, _AFFINITIES)
    logger.debug(
        "Built default catalogue: %d categories.", len(catalogue.get_all_categories())
    )
    return catalogue
