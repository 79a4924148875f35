"""Catalog module.

Provides the catalog provider interface, an in-memory provider, and a
bounded refresh poller for consumers of a catalog that is still loading.
"""

from satbrowser._record import Dimensions, Position, SatelliteRecord
from satbrowser.catalog._memory import InMemoryCatalog
from satbrowser.catalog._provider import CatalogChange, CatalogProvider, ChangeListener
from satbrowser.catalog._refresh import CatalogRefreshPoller

__all__ = [
    # Records
    "SatelliteRecord",
    "Position",
    "Dimensions",
    # Provider interface
    "CatalogProvider",
    "CatalogChange",
    "ChangeListener",
    # Providers
    "InMemoryCatalog",
    # Refresh
    "CatalogRefreshPoller",
]
