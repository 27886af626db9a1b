"""Leaderboard models for the ``*/top`` endpoints."""

from attrs import define, field

from .parsing import integer, optional_text, text
from .urls import resolve_image_url


@define(frozen=True)
class TopActor:
    """An actor ranked by number of movies."""

    actor_id: int = field(default=0, converter=integer)
    actor: str = field(default="", converter=text)
    movie_count: int = field(default=0, converter=integer)
    image_url: str | None = field(default=None, converter=optional_text)

    @property
    def full_image_url(self) -> str | None:
        return resolve_image_url(self.image_url)


@define(frozen=True)
class TopDirector:
    """A director ranked by number of movies."""

    director_id: int = field(default=0, converter=integer)
    director: str = field(default="", converter=text)
    movie_count: int = field(default=0, converter=integer)
    image_url: str | None = field(default=None, converter=optional_text)

    @property
    def full_image_url(self) -> str | None:
        return resolve_image_url(self.image_url)


@define(frozen=True)
class TopGenre:
    """A genre ranked by number of movies."""

    genre_id: int = field(default=0, converter=integer)
    genre: str = field(default="", converter=text)
    movie_count: int = field(default=0, converter=integer)
