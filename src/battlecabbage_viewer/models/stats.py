"""Catalogue statistics model."""

from attrs import define, field

from .parsing import count_map, integer


@define(frozen=True)
class Stats:
    """Aggregate counts across the whole catalogue."""

    total_movies: int = field(default=0, converter=integer)
    total_reviews: int = field(default=0, converter=integer)
    total_actors: int = field(default=0, converter=integer)
    total_directors: int = field(default=0, converter=integer)
    genres: dict[str, int] = field(factory=dict, converter=count_map)
    ratings: dict[str, int] = field(factory=dict, converter=count_map)
