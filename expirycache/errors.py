"""Exceptions raised by the cache."""


class CacheError(Exception):
    """Base class for every error raised by the cache."""

    default_message = "cache error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class KeyNotFoundError(CacheError, LookupError):
    """The requested key is not present in the cache."""

    default_message = "key not found in cache"


class KeyExpiredError(CacheError, LookupError):
    """The requested key was present but its lifetime has passed."""

    default_message = "key has expired"


class NilValueError(CacheError, ValueError):
    """An attempt was made to store ``None`` in the cache."""

    default_message = "nil value is not allowed"