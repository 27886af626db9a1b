"""Movie and review models."""

from attrs import define, field

from .parsing import list_of, optional_integer, optional_number, optional_text, text
from .people import Actor, Director
from .urls import resolve_poster_url


@define(frozen=True)
class Review:
    """A critic review attached to a movie."""

    review_id: int | None = field(default=None, converter=optional_integer)
    reviewer: str | None = field(default=None, converter=optional_text)
    critic_score: float | None = field(default=None, converter=optional_number)
    review_text: str | None = field(default=None, converter=optional_text)


@define(frozen=True)
class Movie:
    """Represents a movie with its cast, crew and reviews."""

    movie_id: int | None = field(default=None, converter=optional_integer)
    external_id: str = field(default="", converter=text)
    title: str = field(default="", converter=text)
    tagline: str | None = field(default=None, converter=optional_text)
    mpaa_rating: str | None = field(default=None, converter=optional_text)
    description: str | None = field(default=None, converter=optional_text)
    popularity_score: float | None = field(default=None, converter=optional_number)
    genre: str | None = field(default=None, converter=optional_text)
    poster_url: str | None = field(default=None, converter=optional_text)
    # Kept as the API sends it; dates are not validated.
    release_date: str | None = field(default=None, converter=optional_text)
    actors: list[Actor] = field(factory=list, converter=list_of(Actor))
    directors: list[Director] = field(factory=list, converter=list_of(Director))
    reviews: list[Review] = field(factory=list, converter=list_of(Review))

    @property
    def full_poster_url(self) -> str | None:
        return resolve_poster_url(self.poster_url)

    @property
    def average_score(self) -> float | None:
        """Mean critic score over scored reviews, or None if none are scored."""
        scores = [r.critic_score for r in self.reviews if r.critic_score is not None]
        if not scores:
            return None
        return sum(scores) / len(scores)
