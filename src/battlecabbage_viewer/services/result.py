"""Outcome of a single API request."""

from typing import Generic, TypeVar

from attrs import define

T = TypeVar("T")


class RequestFailure(Exception):
    """A request that failed in transport, by status, or while decoding."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Error fetching {endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason


@define(frozen=True)
class ApiResult(Generic[T]):
    """Either a parsed value or the failure that prevented it."""

    value: T | None = None
    error: RequestFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RequestFailure) -> "ApiResult[T]":
        return cls(error=error)
