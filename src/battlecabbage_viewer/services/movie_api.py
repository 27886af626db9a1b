"""Battle Cabbage content API service."""

import logging
from typing import Any, Callable, TypeVar
from urllib.parse import quote, urlencode

import httpx
from attrs import define

from ..config import ApiSettings
from ..models import (
    Actor,
    Director,
    Genre,
    Movie,
    Stats,
    TopActor,
    TopDirector,
    TopGenre,
    from_payload,
    from_payload_list,
)
from .result import ApiResult, RequestFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_endpoint(path: str, **params: Any) -> str:
    """Append a query string to ``path``, skipping unset parameters.

    Parameters keep their argument order and values are percent-encoded with
    no safe characters, so ``Sci Fi`` becomes ``Sci%20Fi``.
    """
    query = [(k, v) for k, v in params.items() if v is not None and v != ""]
    if not query:
        return path
    return f"{path}?{urlencode(query, quote_via=quote, safe='')}"


@define
class MovieApiService:
    """Client for the Battle Cabbage content API.

    Every public method issues one GET and never raises: failures are logged
    and come back as an empty list or None.
    """

    settings: ApiSettings
    transport: httpx.AsyncBaseTransport | None = None
    _client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.api_base_url,
                headers={"Accept": self.settings.accept},
                timeout=self.settings.timeout,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "MovieApiService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _fetch(self, endpoint: str, parse: Callable[[Any], T]) -> ApiResult[T]:
        """GET ``endpoint`` and parse its JSON body."""
        client = await self._get_client()
        logger.debug("GET %s", endpoint)
        try:
            resp = await client.get(endpoint)
            resp.raise_for_status()
            # JSON decode errors and PayloadError are both ValueErrors; deeply
            # nested bodies overflow the decoder with RecursionError
            return ApiResult.success(parse(resp.json()))
        except (
            httpx.HTTPError,
            httpx.InvalidURL,
            ValueError,
            OverflowError,
            RecursionError,
        ) as e:
            return ApiResult.failure(RequestFailure(endpoint, str(e)))

    async def _get_list(self, endpoint: str, cls: type[T]) -> list[T]:
        result = await self._fetch(endpoint, lambda data: from_payload_list(cls, data))
        if not result.ok:
            logger.warning("Error fetching %s: %s", result.error.endpoint, result.error.reason)
            return []
        return result.value

    async def _get_one(self, endpoint: str, cls: type[T]) -> T | None:
        result = await self._fetch(
            endpoint, lambda data: None if data is None else from_payload(cls, data)
        )
        if not result.ok:
            logger.warning("Error fetching %s: %s", result.error.endpoint, result.error.reason)
            return None
        return result.value

    # Movies

    async def get_movies(
        self, skip: int = 0, limit: int = 10, genre: str | None = None
    ) -> list[Movie]:
        """Fetch a page of movies, optionally filtered by genre name."""
        endpoint = build_endpoint("movies", skip=skip, limit=limit, genre=genre)
        return await self._get_list(endpoint, Movie)

    async def get_movie(self, movie_id: int) -> Movie | None:
        """Fetch one movie with its actors, directors and reviews."""
        return await self._get_one(f"movies/{movie_id}", Movie)

    async def get_random_movies(self) -> list[Movie]:
        return await self._get_list("movies/random", Movie)

    async def get_top_rated_movies(self) -> list[Movie]:
        return await self._get_list("movies/top-rated", Movie)

    async def get_worst_rated_movies(self) -> list[Movie]:
        return await self._get_list("movies/worst-rated", Movie)

    async def get_recent_movies(self) -> list[Movie]:
        return await self._get_list("movies/recent", Movie)

    # Actors

    async def get_actors(self, skip: int = 0, limit: int = 50) -> list[Actor]:
        """Fetch a page of actors."""
        endpoint = build_endpoint("actors", skip=skip, limit=limit)
        return await self._get_list(endpoint, Actor)

    async def get_actor(self, actor_id: int) -> Actor | None:
        return await self._get_one(f"actors/{actor_id}", Actor)

    async def get_top_actors(self) -> list[TopActor]:
        """Fetch actors ranked by number of movies."""
        return await self._get_list("actors/top", TopActor)

    async def get_actor_movies(self, actor_id: int) -> list[Movie]:
        """Fetch the movies an actor appears in."""
        return await self._get_list(f"actors/{actor_id}/movies", Movie)

    # Directors

    async def get_directors(self, skip: int = 0, limit: int = 50) -> list[Director]:
        """Fetch a page of directors."""
        endpoint = build_endpoint("directors", skip=skip, limit=limit)
        return await self._get_list(endpoint, Director)

    async def get_top_directors(self) -> list[TopDirector]:
        return await self._get_list("directors/top", TopDirector)

    # Genres

    async def get_genres(self) -> list[Genre]:
        return await self._get_list("genres", Genre)

    async def get_top_genres(self) -> list[TopGenre]:
        return await self._get_list("genres/top", TopGenre)

    # Stats

    async def get_stats(self) -> Stats | None:
        """Fetch catalogue-wide totals and per-genre/per-rating counts."""
        return await self._get_one("stats", Stats)
