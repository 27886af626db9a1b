"""Service layer for the content API."""

from .movie_api import MovieApiService
from .result import ApiResult, RequestFailure

__all__ = ["MovieApiService", "ApiResult", "RequestFailure"]
