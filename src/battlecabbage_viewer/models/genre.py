"""Genre model."""

from attrs import define, field

from .parsing import integer, optional_integer, text


@define(frozen=True)
class Genre:
    """Represents a genre, optionally with the number of movies in it."""

    genre_id: int = field(default=0, converter=integer)
    genre: str = field(default="", converter=text)
    movie_count: int | None = field(default=None, converter=optional_integer)

    @property
    def name(self) -> str:
        return self.genre
