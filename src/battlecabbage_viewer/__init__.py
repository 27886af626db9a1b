"""Battle Cabbage movie viewer: typed client and models for the content API."""

__version__ = "0.1.0"
