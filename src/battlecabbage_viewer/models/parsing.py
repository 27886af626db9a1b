"""Build attrs records from API JSON payloads.

The API speaks snake_case, but keys are matched case-insensitively and
camelCase/PascalCase keys are folded to snake_case, so ``MovieId``,
``movieId`` and ``movie_id`` all land on the ``movie_id`` field.
"""

import math
import re
from typing import Any, Callable, TypeVar

import attrs

T = TypeVar("T")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class PayloadError(ValueError):
    """Raised when a payload does not have the shape a record expects."""


def _field_name(key: str, names: set[str]) -> str | None:
    lowered = key.lower()
    if lowered in names:
        return lowered
    snake = _CAMEL_BOUNDARY.sub("_", key).lower()
    if snake in names:
        return snake
    return None


def from_payload(cls: type[T], payload: Any) -> T:
    """Build a single record from a decoded JSON object."""
    if isinstance(payload, cls):
        return payload
    if not isinstance(payload, dict):
        raise PayloadError(
            f"expected an object for {cls.__name__}, got {type(payload).__name__}"
        )

    names = {f.name for f in attrs.fields(cls)}
    kwargs = {}
    for key, value in payload.items():
        name = _field_name(str(key), names)
        if name is not None:
            kwargs[name] = value

    try:
        return cls(**kwargs)
    except PayloadError:
        raise
    except (TypeError, ValueError, OverflowError) as e:
        raise PayloadError(f"invalid {cls.__name__} payload: {e}") from e


def from_payload_list(cls: type[T], payload: Any) -> list[T]:
    """Build a list of records from a decoded JSON array, keeping its order."""
    if not isinstance(payload, list):
        raise PayloadError(
            f"expected an array of {cls.__name__}, got {type(payload).__name__}"
        )
    return [from_payload(cls, item) for item in payload]


def list_of(cls: type[T]) -> Callable[[Any], list[T]]:
    """Converter for nested record lists; null becomes an empty list."""

    def convert(value: Any) -> list[T]:
        if value is None:
            return []
        return from_payload_list(cls, value)

    return convert


def integer(value: Any) -> int:
    """Converter for integer fields; fractions, booleans and strings are rejected."""
    if isinstance(value, bool):
        raise PayloadError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise PayloadError(f"expected an integer, got {value!r}")


def optional_integer(value: Any) -> int | None:
    if value is None:
        return None
    return integer(value)


def optional_number(value: Any) -> float | None:
    """Converter for optional finite numbers."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise PayloadError(f"expected a finite number, got {value!r}")
    return float(value)


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise PayloadError(f"expected a string, got {type(value).__name__}")
    return str(value)


def text(value: Any) -> str:
    """Converter for required strings; null becomes an empty string."""
    if value is None:
        return ""
    return optional_text(value)


def count_map(value: Any) -> dict[str, int]:
    """Converter for ``{label: count}`` objects."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadError(f"expected an object of counts, got {type(value).__name__}")
    return {str(k): integer(v) for k, v in value.items()}
