"""One-shot availability check for the underlying storage."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from slimstore_core.constants import AVAILABILITY_CHECK_KEY
from slimstore_core.exceptions import StorageUnavailableError
from slimstore_core.interfaces.storage import KeyValueStorage

logger = structlog.get_logger()

StorageSource = KeyValueStorage | Callable[[], KeyValueStorage]


class AvailabilityGuard:
    """Decide once, lazily, whether the storage can be used.

    The first ``check()`` builds the storage (when given a factory) and
    checks it with a read. Failures are recorded, never raised. The result
    is memoized for the lifetime of the guard.
    """

    def __init__(
        self,
        source: StorageSource,
        on_first_available: Callable[[], object] | None = None,
    ) -> None:
        """Initialize with a storage instance or a zero-argument factory."""
        self._source = source
        self._on_first_available = on_first_available
        self._storage: KeyValueStorage | None = None
        self._available: bool | None = None

    def check(self) -> bool:
        """Return whether the storage is usable, reading it on first call only."""
        if self._available is not None:
            return self._available

        try:
            storage = self._resolve()
            storage.get(AVAILABILITY_CHECK_KEY)
        except Exception as e:
            logger.warning("storage_unavailable", error=str(e), error_type=type(e).__name__)
            self._available = False
            return False

        self._storage = storage
        self._available = True
        logger.debug("storage_available", backend=type(storage).__name__)

        if self._on_first_available is not None:
            self._on_first_available()
        return True

    @property
    def storage(self) -> KeyValueStorage:
        """The checked storage.

        Raises:
            StorageUnavailableError: If the guard has not found a usable storage.
        """
        if self._storage is None:
            msg = "Storage is not available"
            raise StorageUnavailableError(msg)
        return self._storage

    def _resolve(self) -> KeyValueStorage:
        # A storage class matches the protocol too; treat it as a factory.
        if isinstance(self._source, type) or not isinstance(self._source, KeyValueStorage):
            return self._source()
        return self._source
