"""Catalog query service.

Groups the catalog by category, browses a single category, runs filtered
searches, and looks up individual records. Every call re-reads the
provider, so results always reflect the current catalog snapshot.
"""

from __future__ import annotations

import logging

from satbrowser._record import SatelliteRecord
from satbrowser.browser._filter import apply_filters
from satbrowser.browser._types import BrowseResult, BrowserFilters, CategoryInfo
from satbrowser.catalog import CatalogProvider
from satbrowser.utils import collation_key

logger = logging.getLogger(__name__)

CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "earth-observation": "Satellites monitoring Earth's surface, climate, and environment",
    "communication": "Satellites providing telecommunications and internet services",
    "scientific": "Research satellites for space exploration and scientific studies",
    "navigation": "Satellites providing positioning and navigation services",
    "weather": "Satellites monitoring weather patterns and atmospheric conditions",
}
"""Descriptions of the well-known categories."""


def format_category_name(category: str) -> str:
    """Convert a kebab-case category key to Title Case.

    Args:
        category: Category key (e.g. ``"earth-observation"``).

    Returns:
        Display name (e.g. ``"Earth Observation"``).
    """
    return " ".join(word[:1].upper() + word[1:] for word in category.split("-"))


def default_category_description(category: str) -> str:
    """Return the description used for categories without a mapped one.

    Args:
        category: Category key.

    Returns:
        ``"<Display Name> satellites"``.
    """
    return f"{format_category_name(category)} satellites"


def category_description(category: str) -> str:
    """Return the description of *category*.

    Args:
        category: Category key.

    Returns:
        The mapped description, or :func:`default_category_description`.
    """
    description = CATEGORY_DESCRIPTIONS.get(category)
    if description is None:
        return default_category_description(category)
    return description


class CatalogQueryService:
    """Read-only queries over a catalog provider.

    Args:
        provider: Catalog to query.
    """

    def __init__(self, provider: CatalogProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> CatalogProvider:
        """The underlying catalog provider."""
        return self._provider

    def get_categories(self) -> list[CategoryInfo]:
        """Return every category present in the catalog with its size.

        Categories are sorted by display name. Categories without records
        never appear.

        Returns:
            List of category summaries.
        """
        counts: dict[str, int] = {}
        for record in self._provider.get_all():
            counts[record.category] = counts.get(record.category, 0) + 1

        categories = [
            CategoryInfo(
                id=category,
                display_name=format_category_name(category),
                description=category_description(category),
                count=count,
            )
            for category, count in counts.items()
        ]
        categories.sort(key=lambda c: collation_key(c.display_name))
        return categories

    def browse_by_category(
        self, category: str, filters: BrowserFilters | None = None
    ) -> BrowseResult:
        """Return the records of one category, filtered and sorted.

        An unknown category yields an empty result, not an error.

        Args:
            category: Exact category key.
            filters: Additional filters and ordering.

        Returns:
            Matching records with ``category`` set.
        """
        in_category = [r for r in self._provider.get_all() if r.category == category]
        satellites = apply_filters(in_category, filters)
        logger.debug(
            "Category %r: %d of %d records after filters",
            category,
            len(satellites),
            len(in_category),
        )
        return BrowseResult(
            satellites=satellites, total_count=len(satellites), category=category
        )

    def search_satellites(self, filters: BrowserFilters | None = None) -> BrowseResult:
        """Apply *filters* to the whole catalog.

        Args:
            filters: Filters and ordering. None matches everything.

        Returns:
            Matching records with ``category`` unset.
        """
        satellites = apply_filters(self._provider.get_all(), filters)
        return BrowseResult(satellites=satellites, total_count=len(satellites))

    def get_satellite_by_id(self, satellite_id: str) -> SatelliteRecord | None:
        """Return the record with *satellite_id*, or None if absent."""
        return self._provider.get_by_id(satellite_id)

    def get_satellites_by_name(self, text: str) -> list[SatelliteRecord]:
        """Quick search delegated to the provider.

        Args:
            text: Partial name or identifier.

        Returns:
            Matching records, as ordered and capped by the provider.
        """
        return self._provider.search_by_name_substring(text)
