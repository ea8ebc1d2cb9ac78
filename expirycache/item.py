"""A cached value together with its expiry time."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any


@dataclass
class Item:
    """A stored value; ``expiration`` is a Unix time in nanoseconds, 0 for never."""

    value: Any
    expiration: int = 0

    def expired(self) -> bool:
        """Return True if the item's lifetime has passed."""
        if self.expiration == 0:
            return False
        return time.time_ns() > self.expiration