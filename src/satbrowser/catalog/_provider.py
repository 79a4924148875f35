"""Catalog provider interface.

The catalog provider owns the record set. Query and selection code only
reads through this interface and never mutates records.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from satbrowser._record import SatelliteRecord


@dataclass(frozen=True)
class CatalogChange:
    """Notification payload emitted when the catalog is updated.

    Args:
        added: Number of records added or replaced by the update.
        total: Catalog size after the update.
    """

    added: int
    total: int


ChangeListener = Callable[[CatalogChange], None]
"""Callback signature for catalog change subscribers."""


@runtime_checkable
class CatalogProvider(Protocol):
    """Protocol for read access to a satellite catalog."""

    def get_all(self) -> list[SatelliteRecord]:
        """Return every record, in insertion order."""
        ...

    def get_by_id(self, satellite_id: str) -> SatelliteRecord | None:
        """Return the record with *satellite_id*, or None."""
        ...

    def search_by_name_substring(self, text: str) -> list[SatelliteRecord]:
        """Return records whose name or identifiers contain *text*."""
        ...

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register *listener* and return a function that unregisters it."""
        ...

    def is_fully_loaded(self) -> bool:
        """Return True once the provider will not add further records."""
        ...
