# expirycache

A small, thread-safe, in-memory key/value cache. Each entry can carry its own
lifetime, and a background thread can remove expired entries at a fixed
interval.

## Installing

```
pip install expirycache
```

For running the tests:

```
pip install "expirycache[test]"
pytest
```

## Using the cache

```python
from datetime import timedelta

from expirycache.cache import Cache
from expirycache.errors import KeyExpiredError, KeyNotFoundError

# Entries live for 5 minutes by default; expired ones are swept every minute.
with Cache(default_expiration=300, cleanup_interval=60) as cache:
    cache.set("greeting", "hello world")
    cache.set_with_expiration("short-lived", "gone soon", 2)
    cache.set_with_expiration("hourly", "an hour", timedelta(hours=1))
    cache.set_with_expiration("forever", "never expires", 0)

    print(cache.get("greeting"))

    try:
        cache.get("missing")
    except KeyNotFoundError as exc:
        print(exc)                 # key not found in cache

    value = cache.get_or_set("computed", lambda: "expensive result")

    cache.delete("greeting")       # True if the key was present
    print(cache.items())           # dict copy of all unexpired entries
    print(cache.item_count())      # also counts expired entries not yet removed
    cache.delete_expired()
    cache.flush()
```

`Cache(default_expiration=0, cleanup_interval=0)` takes both durations either
as a number of seconds or as a `datetime.timedelta`; `set_with_expiration`
does the same. A duration of `0` (or less) means the entry never expires, and
a `cleanup_interval` of `0` starts no background thread. `Cache()` with no
arguments therefore keeps every entry until it is deleted or flushed.

Leaving the `with` block, or calling `cache.stop()`, stops and joins the
cleanup thread. The thread is a daemon thread, so it does not keep the
interpreter alive.

All operations take an internal lock and may be called from several threads.

### Errors

All errors derive from `expirycache.errors.CacheError`:

- `KeyNotFoundError` (also a `LookupError`): the key is not in the cache.
- `KeyExpiredError` (also a `LookupError`): the key was present but its
  lifetime had passed; the entry is removed when this is raised.
- `NilValueError` (also a `ValueError`): `None` was given as a value; the
  cache does not store it.

`get_or_set` calls the given function when the key is missing or expired,
stores what it returns under the default expiration, and returns it. Any
exception raised by the function is passed on and nothing is stored; if the
function returns `None`, `NilValueError` is raised.

### Items

`expirycache.item.Item` is a dataclass holding a stored `value` and its
`expiration` as a Unix time in nanoseconds (`0` for never);
`Item.expired()` tells whether that time has passed.

## Demonstration

A short walk through the cache's features, printing each step, with a few
seconds of waiting for an entry to expire:

```
expirycache-demo
```

Options:

- `--ttl SECONDS`: lifetime of the short-lived entry (default: 2).
- `--wait SECONDS`: how long to wait before reading it again (default: 3).

## What it does not do

The cache lives only in the memory of one process. It does not save entries
to disk, share them between processes, limit its size or evict entries other
than by expiry, and it offers no server or network interface.