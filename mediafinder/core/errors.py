from typing import Optional


class MediaFinderError(Exception):
    """Base class for errors raised by mediafinder."""


class ConfigurationError(MediaFinderError):
    """Raised when required configuration (the API token) is missing or unreadable."""


class TMDBRequestError(MediaFinderError):
    """A single TMDB request failed in transport, status or decoding."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class SelectionError(MediaFinderError):
    """Raised when a selection index does not point at a normalized item."""
