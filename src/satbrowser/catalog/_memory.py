"""In-memory catalog provider.

Holds an already-materialized snapshot of satellite records and notifies
subscribers whenever the snapshot changes. The record map is replaced
atomically on every update, so a reader always iterates a consistent
snapshot.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from satbrowser._record import SatelliteRecord
from satbrowser.catalog._provider import CatalogChange, ChangeListener
from satbrowser.utils import collation_key

logger = logging.getLogger(__name__)

_MIN_QUICK_SEARCH_LENGTH = 2
_MAX_QUICK_SEARCH_RESULTS = 10


class InMemoryCatalog:
    """Catalog provider backed by an ordered dictionary of records.

    Thread-safe via internal lock for updates and subscriptions.

    Args:
        records: Initial records. Later duplicates of an id replace
            earlier ones.
        fully_loaded: Initial value of the "fully loaded" signal.
    """

    def __init__(
        self,
        records: Iterable[SatelliteRecord] = (),
        fully_loaded: bool = False,
    ) -> None:
        self._records: dict[str, SatelliteRecord] = {r.id: r for r in records}
        self._fully_loaded = fully_loaded
        self._listeners: list[ChangeListener] = []
        self._lock = threading.Lock()

    # -- Read access --

    def get_all(self) -> list[SatelliteRecord]:
        """Return every record, in insertion order."""
        return list(self._records.values())

    def get_by_id(self, satellite_id: str) -> SatelliteRecord | None:
        """Return the record with *satellite_id*, or None if absent."""
        return self._records.get(satellite_id)

    def search_by_name_substring(self, text: str) -> list[SatelliteRecord]:
        """Quick search over name, id, category and shortname.

        Queries shorter than two characters (after trimming) return an
        empty list. Results are sorted by name and capped at ten entries.

        Args:
            text: Search text.

        Returns:
            Matching records.
        """
        query = text.lower().strip()
        if len(query) < _MIN_QUICK_SEARCH_LENGTH:
            return []

        matches = [
            r
            for r in self._records.values()
            if query in r.name.lower()
            or query in r.id.lower()
            or query in r.category.lower()
            or (r.shortname is not None and query in r.shortname.lower())
        ]
        matches.sort(key=lambda r: collation_key(r.name))
        return matches[:_MAX_QUICK_SEARCH_RESULTS]

    def is_fully_loaded(self) -> bool:
        """Return True once no further records are expected."""
        return self._fully_loaded

    def stats(self) -> dict[str, int]:
        """Return record counts per category plus a ``"total"`` entry."""
        counts: dict[str, int] = {"total": 0}
        for r in self._records.values():
            counts[r.category] = counts.get(r.category, 0) + 1
            counts["total"] += 1
        return counts

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, satellite_id: object) -> bool:
        return satellite_id in self._records

    # -- Updates --

    def replace(self, records: Iterable[SatelliteRecord]) -> None:
        """Replace the whole catalog with *records*.

        Args:
            records: New record set.
        """
        with self._lock:
            new = {r.id: r for r in records}
            self._records = new
        logger.info("Catalog replaced with %d records", len(new))
        self._notify(CatalogChange(added=len(new), total=len(new)))

    def upsert(self, records: Iterable[SatelliteRecord]) -> None:
        """Add or replace records by id, keeping existing insertion order.

        Args:
            records: Records to add or replace.
        """
        with self._lock:
            new = dict(self._records)
            added = 0
            for r in records:
                new[r.id] = r
                added += 1
            self._records = new
        logger.debug("Catalog upsert of %d records, total %d", added, len(new))
        self._notify(CatalogChange(added=added, total=len(new)))

    def remove(self, satellite_id: str) -> bool:
        """Remove the record with *satellite_id*.

        Args:
            satellite_id: Id of the record to remove.

        Returns:
            True if a record was removed.
        """
        with self._lock:
            if satellite_id not in self._records:
                return False
            new = dict(self._records)
            del new[satellite_id]
            self._records = new
        self._notify(CatalogChange(added=0, total=len(new)))
        return True

    def set_fully_loaded(self, loaded: bool) -> None:
        """Set the "fully loaded" signal and notify subscribers.

        Args:
            loaded: New value of the signal.
        """
        self._fully_loaded = loaded
        self._notify(CatalogChange(added=0, total=len(self._records)))

    # -- Notification --

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Callable invoked with a :class:`CatalogChange` after
                every update.

        Returns:
            A function that unregisters *listener*. Calling it more than
            once has no effect.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: CatalogChange) -> None:
        """Deliver *change* to every listener registered at call time."""
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.warning(
                    "Catalog change listener %r raised; continuing delivery",
                    listener,
                    exc_info=True,
                )
