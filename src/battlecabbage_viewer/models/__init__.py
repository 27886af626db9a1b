"""Response models for the Battle Cabbage content API."""

from .genre import Genre
from .movie import Movie, Review
from .parsing import PayloadError, from_payload, from_payload_list
from .people import Actor, Director
from .stats import Stats
from .top import TopActor, TopDirector, TopGenre
from .urls import API_BASE_URL, PLACEHOLDER_POSTER_URL, resolve_image_url, resolve_poster_url

__all__ = [
    "Movie",
    "Review",
    "Actor",
    "Director",
    "Genre",
    "TopActor",
    "TopDirector",
    "TopGenre",
    "Stats",
    "PayloadError",
    "from_payload",
    "from_payload_list",
    "API_BASE_URL",
    "PLACEHOLDER_POSTER_URL",
    "resolve_image_url",
    "resolve_poster_url",
]
