"""Configuration management using environment variables."""

import os
from functools import lru_cache

from attrs import define

from .models.urls import API_BASE_URL


@define(frozen=True)
class ApiSettings:
    """Transport settings shared by every API call."""

    api_base_url: str = API_BASE_URL
    accept: str = "application/json"
    timeout: float = 30.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> ApiSettings:
    """Load settings from environment, falling back to the public API."""
    return ApiSettings(
        api_base_url=os.environ.get("BATTLECABBAGE_API_URL", API_BASE_URL),
        timeout=float(os.environ.get("BATTLECABBAGE_API_TIMEOUT", "30")),
        log_level=os.environ.get("BATTLECABBAGE_LOG_LEVEL", "INFO"),
    )
