"""
Identity generator and clock used to stamp new records.

Both are plain callables so repositories can be handed deterministic
replacements in tests.
"""

import threading
import time
import uuid
from typing import Callable


IdGenerator = Callable[[], str]
Clock = Callable[[], int]


def uuid_id() -> str:
    """Return a new random UUID4 string."""
    return str(uuid.uuid4())


class MonotonicClock:
    """Wall-clock timestamps in nanoseconds that never go backwards.

    ``time.time_ns`` can step back when the system clock is adjusted;
    this clock holds the last value it returned and never returns less.
    """

    def __init__(self, source: Callable[[], int] = time.time_ns) -> None:
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = self._source()
            if now < self._last:
                now = self._last
            self._last = now
            return now
