"""
Record-set cache — a single time-bounded snapshot of the certificate sheet.

The store is an explicit object owned by CertificateSource rather than
module state, so each source (and each test) gets its own.

Invariants:
  - at most one snapshot at a time, replaced wholesale
  - a snapshot is served only while its age is below the freshness window
  - clear() empties the snapshot and resets the timestamp to the epoch
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from cert_verifier.domain.models import Certificate

DEFAULT_TTL_SECONDS = 5 * 60.0

Clock = Callable[[], float]


class RecordSetCache:
    """
    Snapshot store: the last fetched record set plus when it was stored.

    `lock` is exposed so the owner can make check-fetch-store atomic;
    the store itself does no I/O.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot: tuple[Certificate, ...] | None = None
        self._fetched_at = 0.0
        self.lock = threading.RLock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    @property
    def fetched_at(self) -> float:
        return self._fetched_at

    def get(self) -> tuple[Certificate, ...] | None:
        """Return the snapshot if it is still fresh, else None."""
        if self._snapshot is None:
            return None
        if self._clock() - self._fetched_at >= self._ttl_seconds:
            return None
        return self._snapshot

    def put(self, records: tuple[Certificate, ...]) -> None:
        """Replace the snapshot and stamp it with the current time."""
        self._snapshot = records
        self._fetched_at = self._clock()

    def clear(self) -> None:
        """Drop the snapshot so the next read misses regardless of age."""
        with self.lock:
            self._snapshot = None
            self._fetched_at = 0.0
