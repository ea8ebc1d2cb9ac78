"""Demonstration of the cache's features on the command line."""

from __future__ import annotations

import argparse
import time
from typing import Any, Sequence

from .cache import Cache
from .errors import CacheError


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _print_value(cache: Cache, key: str) -> None:
    try:
        value = cache.get(key)
    except CacheError as err:
        print(f"Key '{key}': {err}")
        return
    print(f"Key '{key}': {_format(value)}")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="expirycache", description="Show the in-memory expiring cache at work."
    )
    parser.add_argument(
        "--ttl",
        type=float,
        default=2.0,
        help="lifetime in seconds of the short-lived entry (default: 2)",
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=3.0,
        help="seconds to wait for the short-lived entry to expire (default: 3)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    args = _parse_args(argv)

    with Cache(default_expiration=5 * 60, cleanup_interval=60) as cache:
        cache.set("string", "hello world")
        cache.set("number", 42)
        cache.set("bool", True)
        cache.set_with_expiration("short-lived", "I'll expire soon", args.ttl)

        for key in ("string", "number", "bool", "short-lived", "non-existent"):
            _print_value(cache, key)

        print("\nWaiting for the short-lived value to expire...")
        time.sleep(args.wait)

        _print_value(cache, "short-lived")
        _print_value(cache, "string")

        def compute() -> str:
            print("Computing value...")
            time.sleep(0.1)
            return "computed value"

        cache.get_or_set("computed", compute)
        _print_value(cache, "computed")

        def compute_again() -> str:
            print("Computing value again... (this shouldn't be displayed)")
            return "new computed value"

        cache.get_or_set("computed", compute_again)
        _print_value(cache, "computed")

        print("\nDeleting 'string' from cache")
        cache.delete("string")
        _print_value(cache, "string")

        print("\nAll items in cache:")
        for key, value in cache.items().items():
            print(f"{key}: {_format(value)}")

        print("\nFlushing cache...")
        cache.flush()
        print(f"Items in cache after flush: {cache.item_count()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())