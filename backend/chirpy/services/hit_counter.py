"""
Chirpy Backend — Hit Counter
=============================

What:  In-memory count of static-file requests served under /app.
How:   A plain int guarded by a threading.Lock. Increments can come from
       the event loop and from threadpool workers at the same time, so
       every read-modify-write happens under the lock.
Who:   Owned by ApiContext; incremented by HitCounterMiddleware; read by the
       metrics routes; cleared by POST /admin/reset.

Lifetime: the process (no persistence). A restart starts again from zero.
"""

import threading


class HitCounter:
    """Thread-safe, non-negative, monotonically increasing counter."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one hit and return the new count."""
        with self._lock:
            self._value += 1
            return self._value

    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        """Set the count back to zero unconditionally."""
        with self._lock:
            self._value = 0

    def __repr__(self) -> str:
        return f"<HitCounter(value={self.value()})>"
