"""Filter and sort engine for browser listings.

Applies :class:`~satbrowser.browser.BrowserFilters` to a list of records in
a fixed order:

1. Name filter -- case-insensitive substring match against the name,
   shortname, or id (any one match keeps the record).
2. Type filter -- exact match against the category.
3. Sort -- by name or category using locale-aware collation. The sort is
   stable, and descending order negates the comparison instead of
   reversing the list, so records with equal keys keep their relative
   order in both directions.

Filtering never raises: unset fields impose no constraint.
"""

from __future__ import annotations

import functools
from collections.abc import Callable

from satbrowser._record import SatelliteRecord
from satbrowser.browser._types import BrowserFilters, SortBy, SortOrder
from satbrowser.utils import compare_collated


def matches_name(record: SatelliteRecord, text: str) -> bool:
    """Check whether *text* occurs in the record's name, shortname, or id.

    Args:
        record: Record to test.
        text: Search text. Compared case-insensitively.

    Returns:
        True if any of the fields contains *text*.
    """
    needle = text.lower()
    if needle in record.name.lower():
        return True
    if record.shortname and needle in record.shortname.lower():
        return True
    return needle in record.id.lower()


def _compare_by(sort_by: SortBy) -> Callable[[SatelliteRecord, SatelliteRecord], int]:
    """Return the ascending comparator for *sort_by*."""
    if sort_by is SortBy.NAME:
        return lambda a, b: compare_collated(a.name, b.name)
    if sort_by is SortBy.TYPE:
        return lambda a, b: compare_collated(a.category, b.category)
    # LAUNCH_DATE: no launch date data in the catalog
    return lambda a, b: 0


def apply_order(
    records: list[SatelliteRecord],
    sort_by: SortBy | None,
    sort_order: SortOrder | None = None,
) -> list[SatelliteRecord]:
    """Return *records* sorted by *sort_by*.

    Args:
        records: Records to sort. Not modified.
        sort_by: Sort key, or None to keep the input order.
        sort_order: Direction. Default: ascending.

    Returns:
        A new, stably sorted list.
    """
    if sort_by is None:
        return list(records)

    ascending = _compare_by(sort_by)
    descending = sort_order is SortOrder.DESC

    def compare(a: SatelliteRecord, b: SatelliteRecord) -> int:
        cmp = ascending(a, b)
        return -cmp if descending else cmp

    return sorted(records, key=functools.cmp_to_key(compare))


def apply_filters(
    records: list[SatelliteRecord], filters: BrowserFilters | None
) -> list[SatelliteRecord]:
    """Apply name filter, type filter, and ordering to *records*.

    Args:
        records: Records to filter. Not modified.
        filters: Filters to apply, or None for no constraint.

    Returns:
        A new list of matching records.
    """
    filtered = list(records)
    if filters is None:
        return filtered

    if filters.name:
        filtered = [r for r in filtered if matches_name(r, filters.name)]

    if filters.type:
        filtered = [r for r in filtered if r.category == filters.type]

    # launch_date_from / launch_date_to: no launch date data to filter on

    return apply_order(filtered, filters.sort_by, filters.sort_order)
