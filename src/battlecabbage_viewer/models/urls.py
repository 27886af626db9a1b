"""Image and poster URL resolution."""

API_BASE_URL = "https://api.battlecabbage.com"
PLACEHOLDER_POSTER_URL = "https://placehold.co/400x600/667eea/white?text=Coming+Soon"
PLACEHOLDER_POSTER_NAME = "movie_poster_url.jpeg"


def resolve_image_url(url: str | None, base_url: str = API_BASE_URL) -> str | None:
    """Turn a relative image path into an absolute URL.

    Absolute http(s) URLs pass through untouched; empty values resolve to None.
    """
    if not url:
        return None
    if url.startswith(("http://", "https://")):
        return url
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"


def resolve_poster_url(url: str | None, base_url: str = API_BASE_URL) -> str | None:
    """Like resolve_image_url, but maps the placeholder filename to a filler image."""
    if not url:
        return None
    if url == PLACEHOLDER_POSTER_NAME or url.endswith(f"/{PLACEHOLDER_POSTER_NAME}"):
        return PLACEHOLDER_POSTER_URL
    return resolve_image_url(url, base_url)
