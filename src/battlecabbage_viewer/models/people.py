"""Actor and director models."""

from attrs import define, field

from .parsing import integer, optional_text, text
from .urls import resolve_image_url


@define(frozen=True)
class Actor:
    """Represents an actor as returned by ``actors`` and nested in movies."""

    actor_id: int = field(default=0, converter=integer)
    actor: str = field(default="", converter=text)
    image_url: str | None = field(default=None, converter=optional_text)

    @property
    def name(self) -> str:
        return self.actor

    @property
    def full_image_url(self) -> str | None:
        return resolve_image_url(self.image_url)


@define(frozen=True)
class Director:
    """Represents a director as returned by ``directors`` and nested in movies."""

    director_id: int = field(default=0, converter=integer)
    director: str = field(default="", converter=text)
    image_url: str | None = field(default=None, converter=optional_text)

    @property
    def name(self) -> str:
        return self.director

    @property
    def full_image_url(self) -> str | None:
        return resolve_image_url(self.image_url)
