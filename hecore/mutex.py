"""A mutex that spins briefly before blocking."""

from __future__ import annotations

import threading

from hecore.config import MUTEX_DEFAULT_SPIN_COUNT


class Mutex:
    """Non-recursive lock; ``acquire`` tries ``spin_count`` times before waiting."""

    def __init__(self, spin_count: int = MUTEX_DEFAULT_SPIN_COUNT) -> None:
        if spin_count < 0:
            raise ValueError(f"spin count must not be negative, got {spin_count}")
        self.spin_count = spin_count
        self._lock = threading.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def acquire(self) -> None:
        """Take the lock, spinning first and then blocking."""
        for _ in range(self.spin_count):
            if self._lock.acquire(blocking=False):
                return
        self._lock.acquire()

    def try_acquire(self) -> bool:
        """Take the lock if it is free; return whether it was taken."""
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        """Release the lock; releasing an unlocked mutex raises RuntimeError."""
        self._lock.release()

    def __enter__(self) -> "Mutex":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()