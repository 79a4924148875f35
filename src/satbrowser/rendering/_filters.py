"""Rendering selection filters.

Composable, pure filters that turn the full catalog into the bounded,
prioritized, viewport-aware list of records a renderer may draw in one
frame. No filter mutates its input list.

The viewport filter evaluates its bounds test as a single vectorized mask
over float64 position arrays, so a record just outside an edge is never
rounded onto it.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

import numpy as np

from satbrowser._record import SatelliteRecord
from satbrowser.config import SelectionConfig, get_selection_config
from satbrowser.rendering._priority import loading_priority
from satbrowser.rendering._types import ViewportBounds


def by_enabled_types(
    records: Sequence[SatelliteRecord], enabled_types: Collection[str]
) -> list[SatelliteRecord]:
    """Keep records whose category is in *enabled_types*.

    Args:
        records: Records to filter.
        enabled_types: Enabled category keys.

    Returns:
        Matching records.
    """
    return [r for r in records if r.category in enabled_types]


def by_tracking_status(
    records: Sequence[SatelliteRecord],
    tracked_id: str | None,
    exclusive: bool = False,
) -> list[SatelliteRecord]:
    """Keep only the tracked record when exclusive tracking is on.

    Args:
        records: Records to filter.
        tracked_id: Id of the tracked record, or None.
        exclusive: Whether only the tracked record may be shown.

    Returns:
        The tracked record alone in exclusive mode, otherwise all records.
    """
    if not tracked_id or not exclusive:
        return list(records)
    return [r for r in records if r.id == tracked_id]


def viewport_mask(
    records: Sequence[SatelliteRecord], bounds: ViewportBounds, margin: float = 0.0
) -> np.ndarray:
    """Return a boolean mask of records inside the expanded viewport.

    The inclusive test region is
    ``[west - margin, east + margin] x [south - margin/2, north + margin/2]``.

    Args:
        records: Records to test.
        bounds: Viewport bounds in degrees.
        margin: Longitude margin in degrees. Latitude uses half of it.

    Returns:
        Boolean array, one entry per record.
    """
    if not records:
        return np.zeros(0, dtype=bool)

    lng = np.asarray([r.position.lng for r in records], dtype=np.float64)
    lat = np.asarray([r.position.lat for r in records], dtype=np.float64)

    region = bounds.expand(margin)
    return (
        (lng >= region.west)
        & (lng <= region.east)
        & (lat >= region.south)
        & (lat <= region.north)
    )


def by_viewport_bounds(
    records: Sequence[SatelliteRecord], bounds: ViewportBounds, margin: float = 0.0
) -> list[SatelliteRecord]:
    """Keep records inside the viewport grown by *margin*.

    Args:
        records: Records to filter.
        bounds: Viewport bounds in degrees.
        margin: Longitude margin in degrees. Latitude uses half of it.

    Returns:
        Records inside the expanded viewport, in input order.
    """
    mask = viewport_mask(records, bounds, margin)
    return [r for r, keep in zip(records, mask) if keep]


def for_rendering(
    records: Sequence[SatelliteRecord],
    enabled_types: Collection[str],
    tracked_id: str | None,
    exclusive: bool,
    bounds: ViewportBounds | None = None,
    margin: float | None = None,
) -> list[SatelliteRecord]:
    """Combined tracking, type, and viewport filter.

    Exclusive tracking is the most restrictive filter and short-circuits:
    the tracked record is returned regardless of its category or position.
    Otherwise the type filter is applied, followed by the viewport filter
    when *bounds* is given.

    Args:
        records: Records to filter.
        enabled_types: Enabled category keys.
        tracked_id: Id of the tracked record, or None.
        exclusive: Whether only the tracked record may be shown.
        bounds: Viewport bounds, or None to skip viewport culling.
        margin: Viewport margin in degrees. Default: 0.

    Returns:
        Records to render.
    """
    if tracked_id and exclusive:
        return [r for r in records if r.id == tracked_id]

    filtered = by_enabled_types(records, enabled_types)

    if bounds is not None:
        filtered = by_viewport_bounds(
            filtered, bounds, margin if margin is not None else 0.0
        )

    return filtered


def by_search_query(
    records: Sequence[SatelliteRecord], query: str
) -> list[SatelliteRecord]:
    """Keep records whose name, shortname, or alternate name contains *query*.

    Matching is case-insensitive on the trimmed query. A blank query keeps
    every record.

    Args:
        records: Records to filter.
        query: Search text.

    Returns:
        Matching records.
    """
    term = query.strip().lower()
    if not term:
        return list(records)

    return [
        r
        for r in records
        if term in r.name.lower()
        or term in (r.shortname or "").lower()
        or term in (r.alternate_name or "").lower()
    ]


def by_loading_priority(records: Sequence[SatelliteRecord]) -> list[SatelliteRecord]:
    """Sort records by descending loading priority.

    The sort is stable: records with equal scores keep their input order.

    Args:
        records: Records to sort.

    Returns:
        A new list, highest priority first.
    """
    return sorted(records, key=loading_priority, reverse=True)


def for_performance(
    records: Sequence[SatelliteRecord],
    max_count: int,
    tracked_id: str | None = None,
) -> list[SatelliteRecord]:
    """Cap the number of records handed to a renderer.

    When the tracked record is present it is moved to the front and the
    remaining records are truncated to ``max_count - 1``, so the cap can
    never drop it.

    Args:
        records: Records in the desired order.
        max_count: Maximum number of records to return.
        tracked_id: Id of the tracked record, or None.

    Returns:
        At most *max_count* records.
    """
    if max_count <= 0:
        return []

    tracked = None
    if tracked_id:
        tracked = next((r for r in records if r.id == tracked_id), None)

    if tracked is None:
        return list(records[:max_count])

    others = [r for r in records if r.id != tracked_id]
    return [tracked] + others[: max_count - 1]


def select_for_frame(
    records: Sequence[SatelliteRecord],
    enabled_types: Collection[str],
    max_count: int | None = None,
    tracked_id: str | None = None,
    exclusive: bool = False,
    bounds: ViewportBounds | None = None,
    margin: float | None = None,
    config: SelectionConfig | None = None,
) -> list[SatelliteRecord]:
    """Run the full per-frame selection.

    Applies :func:`for_rendering`, orders the survivors with
    :func:`by_loading_priority`, and caps them with
    :func:`for_performance`.

    Args:
        records: Full catalog snapshot.
        enabled_types: Enabled category keys.
        max_count: Maximum number of records to return. Default:
            ``config.max_satellites``.
        tracked_id: Id of the tracked record, or None.
        exclusive: Whether only the tracked record may be shown.
        bounds: Viewport bounds, or None to skip viewport culling.
        margin: Viewport margin in degrees. Default:
            ``config.viewport_margin``.
        config: Selection configuration. Default: module-wide configuration.

    Returns:
        Records to draw this frame, tracked record first when present.
    """
    config = config if config is not None else get_selection_config()
    if max_count is None:
        max_count = config.max_satellites
    if margin is None:
        margin = config.viewport_margin

    visible = for_rendering(records, enabled_types, tracked_id, exclusive, bounds, margin)
    return for_performance(by_loading_priority(visible), max_count, tracked_id)
