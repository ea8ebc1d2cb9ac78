"""Thread-safe in-memory key/value cache with per-item expiration and a demo command."""

__version__ = "0.1.0"
__all__ = ["cache", "errors", "item", "cli"]