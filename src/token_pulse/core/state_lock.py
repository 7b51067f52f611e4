"""State locking utilities that keep ticks and reads from interleaving."""

import logging
import threading
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class StateLock:
    """Re-entrant lock for managing state access."""

    def __init__(self, name: str):
        """Initialize state lock."""
        self.name = name
        self._lock = threading.RLock()
        self._lock_count = 0
        logger.debug(f"State lock '{name}' created")

    def acquire(self, timeout: float = -1) -> bool:
        """Acquire the lock. Returns False if ``timeout`` expired."""
        acquired = self._lock.acquire(timeout=timeout)
        if acquired:
            self._lock_count += 1
            logger.debug(f"State lock '{self.name}' acquired (count: {self._lock_count})")
        return acquired

    def release(self) -> None:
        """Release the lock."""
        self._lock_count -= 1
        self._lock.release()
        logger.debug(f"State lock '{self.name}' released (count: {self._lock_count})")

    @contextmanager
    def locked(self):
        """Context manager for locked access."""
        self.acquire()
        try:
            yield
        finally:
            self.release()

    def locked_count(self) -> int:
        """Get current lock depth."""
        return self._lock_count


class StateManager:
    """Manages named state locks."""

    def __init__(self):
        """Initialize state manager."""
        self._locks: dict[str, StateLock] = {}
        self._registry_lock = threading.Lock()
        logger.debug("State manager initialized")

    def get_lock(self, name: str) -> StateLock:
        """Get or create a state lock."""
        with self._registry_lock:
            if name not in self._locks:
                self._locks[name] = StateLock(name)
            return self._locks[name]

    @contextmanager
    def lock_state(self, lock_name: str):
        """Context manager for locking specific state."""
        with self.get_lock(lock_name).locked():
            yield

    def get_lock_status(self) -> dict[str, int]:
        """Get status of all locks."""
        return {name: lock.locked_count() for name, lock in self._locks.items()}
