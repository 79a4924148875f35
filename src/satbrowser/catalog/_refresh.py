"""Bounded, cancellable catalog refresh poller.

Re-runs a refresh callback while a catalog is still loading: once
immediately, then at a fixed interval for a bounded number of attempts,
stopping early when the provider reports that it is fully loaded or when
the owner cancels. Change notifications from the provider trigger an
extra refresh while the poller is running.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from satbrowser.catalog._provider import CatalogChange, CatalogProvider
from satbrowser.config import PollConfig

logger = logging.getLogger(__name__)


class CatalogRefreshPoller:
    """Drive a refresh callback until the catalog settles.

    ``on_refresh`` calls are serialized by an internal lock, so the
    callback never runs concurrently with itself even when a change
    notification arrives from another thread. The lock is reentrant: a
    callback that mutates the provider re-enters it through the change
    notification instead of deadlocking.

    Args:
        provider: Catalog to watch.
        on_refresh: Callback re-reading the catalog (e.g. recomputing
            category counts).
        config: Attempt count and interval. Default: ``PollConfig()``.
    """

    def __init__(
        self,
        provider: CatalogProvider,
        on_refresh: Callable[[], None],
        config: PollConfig | None = None,
    ) -> None:
        self._provider = provider
        self._on_refresh = on_refresh
        self._config = config if config is not None else PollConfig()
        self._cancelled = threading.Event()
        self._refresh_lock = threading.RLock()
        self._thread: threading.Thread | None = None
        self._attempts = 0

    @property
    def attempts(self) -> int:
        """Number of interval-driven refreshes performed so far."""
        return self._attempts

    @property
    def cancelled(self) -> bool:
        """True once :meth:`cancel` has been called."""
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Stop polling. Takes effect immediately, even mid-wait."""
        self._cancelled.set()

    def run(self) -> int:
        """Poll in the calling thread until done.

        Returns:
            Number of interval-driven refreshes performed (excluding the
            initial refresh and notification-driven refreshes).
        """
        unsubscribe = self._provider.subscribe(self._on_change)
        try:
            if self._cancelled.is_set():
                return self._attempts
            self._refresh()
            while (
                self._attempts < self._config.max_attempts
                and not self._provider.is_fully_loaded()
            ):
                if self._cancelled.wait(self._config.interval):
                    logger.debug("Catalog refresh poller cancelled")
                    break
                self._refresh()
                self._attempts += 1
        finally:
            unsubscribe()

        logger.debug(
            "Catalog refresh poller finished after %d attempts", self._attempts
        )
        return self._attempts

    def start(self) -> None:
        """Run :meth:`run` on a daemon thread.

        Raises:
            RuntimeError: If the poller was already started.
        """
        if self._thread is not None:
            raise RuntimeError("Poller already started")
        self._thread = threading.Thread(
            target=self.run, name="catalog-refresh-poller", daemon=True
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        """Wait for a poller started with :meth:`start` to finish.

        Args:
            timeout: Maximum seconds to wait, or None to wait forever.
        """
        if self._thread is not None:
            self._thread.join(timeout)

    def _on_change(self, change: CatalogChange) -> None:
        if self._cancelled.is_set():
            return
        logger.debug("Catalog changed (total %d), refreshing", change.total)
        self._refresh()

    def _refresh(self) -> None:
        with self._refresh_lock:
            self._on_refresh()
